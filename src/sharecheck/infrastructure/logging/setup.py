from __future__ import annotations

import logging.config
from typing import Any

import structlog

from sharecheck.infrastructure.config.schema import AppConfig

log = structlog.get_logger(__name__)

# Loggers that get their own level; everything else follows root.
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _drop_color_message(_: Any, __: Any, event_dict: dict[str, Any]) -> dict[str, Any]:
    # Uvicorn attaches "color_message" next to "message".
    event_dict.pop("color_message", None)
    return event_dict


def _pre_chain() -> list[structlog.typing.Processor]:
    """Processors shared by structlog events and foreign stdlib records."""
    return [
        _drop_color_message,
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]


def _renderer(config: AppConfig) -> structlog.typing.Processor:
    if config.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def build_logging_config(config: AppConfig) -> dict[str, Any]:
    """
    Build the dictConfig passed to uvicorn.run(log_config=...).

    Uvicorn, httpx and our own loggers all render through one structlog
    ProcessorFormatter. Access lines go to stdout, everything else to stderr.
    """
    level = config.log_level

    loggers: dict[str, Any] = {
        name: {"level": level} for name in _UVICORN_LOGGERS
    }
    loggers["uvicorn"].update(handlers=["default"], propagate=False)
    loggers["uvicorn.access"].update(handlers=["access"], propagate=False)
    # httpx logs every request at INFO, including query strings.
    loggers["httpx"] = {"level": "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structlog": {
                "()": structlog.stdlib.ProcessorFormatter,
                "foreign_pre_chain": _pre_chain(),
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    _renderer(config),
                ],
            },
        },
        "handlers": {
            "default": {
                "formatter": "structlog",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
            "access": {
                "formatter": "structlog",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": loggers,
        "root": {"handlers": ["default"], "level": level},
    }


def configure_logging(config: AppConfig) -> dict[str, Any]:
    """
    Configure structlog + stdlib logging and return the dict for
    uvicorn.run(log_config=...).
    """
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    cfg = build_logging_config(config)
    logging.config.dictConfig(cfg)
    log.info(
        "logging_configured", log_format=config.log_format, log_level=config.log_level
    )
    return cfg
