"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/provider/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) so that
      load.py controls precedence (defaults < YAML < ENV < CLI).
    """

    # General
    app_name: str = Field(default="sharecheck", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # HTTP client (YAML section: http.*)
    http_timeout_seconds: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="Outbound request timeout. Unset keeps the httpx default.",
    )
    http_follow_redirects: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Follow redirects on provider requests.",
    )

    # Provider (YAML section: provider.*)
    default_host: str = Field(
        default="dm.nephobox.com",
        validation_alias=AliasChoices(
            "default_host",
            AliasPath("provider", "default_host"),
        ),
        description="Canonical API host used when the request names none.",
    )
    fallback_enabled: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "fallback_enabled",
            AliasPath("provider", "fallback_enabled"),
        ),
        description="Query the unauthenticated share-list endpoint on failure.",
    )
    fallback_url: str = Field(
        default=(
            "https://www.terabox.app/share/list"
            "?app_id=250528&shorturl={short_id}&root=1"
        ),
        validation_alias=AliasChoices(
            "fallback_url",
            AliasPath("provider", "fallback_url"),
        ),
        description="Fallback endpoint template; '{short_id}' is substituted.",
    )
    strict_domains: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "strict_domains",
            AliasPath("provider", "strict_domains"),
        ),
        description="Reject URLs that do not name a TeraBox domain (HTTP 400).",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("default_host")
    @classmethod
    def _validate_default_host(cls, v: str) -> str:
        v = v.strip()
        if not v or "/" in v:
            raise ValueError("default_host must be a bare hostname")
        return v

    @field_validator("fallback_url")
    @classmethod
    def _validate_fallback_url(cls, v: str) -> str:
        if "{short_id}" not in v:
            raise ValueError("fallback_url must contain '{short_id}'")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Supported env var examples (flat, explicit):
    - SHARECHECK_ENVIRONMENT
    - SHARECHECK_DEFAULT_HOST
    - SHARECHECK_FALLBACK_ENABLED
    - SHARECHECK_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="SHARECHECK_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_follow_redirects: Optional[bool] = None

    default_host: Optional[str] = None
    fallback_enabled: Optional[bool] = None
    fallback_url: Optional[str] = None
    strict_domains: Optional[bool] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
