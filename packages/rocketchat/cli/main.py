"""Command-line interface for the REST client.

Queries the unauthenticated server endpoints and prints the JSON result.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from rocketchat.core.api.http.errors import RocketChatError
from rocketchat.core.client import RocketChatClient, validate_server_url
from rocketchat.core.config.loader import load_app_config
from rocketchat.core.rest.server import configurations, server_info, settings, settings_oauth
from rocketchat.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


async def run_command(args: argparse.Namespace, server_url: str, client_kwargs: dict[str, Any]) -> Any:
    """Run one CLI command against the server.

    Args:
        args: Parsed arguments
        server_url: Server base URL
        client_kwargs: Extra RocketChatClient arguments (config)

    Returns:
        Command result, JSON-serializable
    """
    async with RocketChatClient(server_url, **client_kwargs) as client:
        if args.cmd == "info":
            result: Any = await server_info(client)
        elif args.cmd == "configurations":
            result = await configurations(client)
        elif args.cmd == "oauth":
            result = await settings_oauth(client)
        else:
            result = await settings(client, *args.names)
    return _to_jsonable(result)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="rocketchat",
        description="Query the public REST endpoints of a chat server",
    )
    p.add_argument("--server", help="Server base URL (default: config or ROCKETCHAT_URL)")
    p.add_argument("--config", help="Path to app config (.json, .yaml, .yml)")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override logging level",
    )

    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("info", help="Show server info (GET /api/info)")
    sub.add_parser("configurations", help="Show service configurations")
    sub.add_parser("oauth", help="Show available oauth services")
    st = sub.add_parser("settings", help="Show public settings")
    st.add_argument("names", nargs="*", help="Setting ids to fetch (default: all)")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_app_config(args.config)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 2

    configure_logging(
        level=args.log_level or config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured,
    )

    server_url = args.server or config.server_url
    if not server_url:
        console.print("[red]ERROR: No server URL (use --server or set ROCKETCHAT_URL)[/red]")
        return 2
    try:
        validate_server_url(server_url)
    except ValueError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 2

    client_kwargs = {"config": config.http.to_client_config()}
    try:
        result = asyncio.run(run_command(args, server_url, client_kwargs))
    except RocketChatError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
        return 1

    console.print_json(json.dumps(result, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
