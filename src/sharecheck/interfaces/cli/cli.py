from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from sharecheck.infrastructure.config import load_config
from sharecheck.infrastructure.logging.setup import configure_logging
from sharecheck.interfaces.app import create_app

log = structlog.get_logger(__name__)

DEFAULT_PORT = 3000


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sharecheck")

    # Server options
    parser.add_argument(
        "--host",
        default=None,
        help="Bind host (overrides HOST env).",
    )
    parser.add_argument(
        "--port",
        default=None,
        type=int,
        help="Bind port (overrides PORT env).",
    )

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--default-host",
        default=None,
        help="Override the canonical TeraBox API host.",
    )
    parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Disable the unauthenticated fallback lookup.",
    )
    parser.add_argument(
        "--strict-domains",
        action="store_true",
        help="Reject URLs that do not name a TeraBox domain.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    return parser.parse_args(argv)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.default_host:
        overrides["default_host"] = args.default_host
    if args.no_fallback:
        overrides["fallback_enabled"] = False
    if args.strict_domains:
        overrides["strict_domains"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    return overrides


def start(argv: Iterable[str] | None = None) -> None:
    """
    Process entrypoint.

    Config is loaded exactly once here, then the FastAPI app is built with it.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = int(args.port or os.getenv("PORT", str(DEFAULT_PORT)))

    config = load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=_cli_overrides(args),
    )

    log_config = configure_logging(config)
    log.info(
        "server_starting",
        host=host,
        port=port,
        health=f"http://localhost:{port}/health",
        api=f"http://localhost:{port}/?url=TERABOX_URL&cookie=YOUR_COOKIE",
    )

    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_config=log_config,
    )


if __name__ == "__main__":
    raise SystemExit(start())
