#!/usr/bin/env python3
# main.py
"""CLI entrypoint for the License Lookup Relay."""

import argparse
import asyncio
import json
import os
import sys
from collections.abc import Awaitable
from collections.abc import Callable
from typing import Any

import httpx

from lookup.config import UpstreamConfig
from lookup.config import get_upstream_config
from lookup.upstream import UpstreamConnectionError
from lookup.upstream import UpstreamStatusError

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UPSTREAM = 2


def _run_lookup(
    search: Callable[[httpx.AsyncClient, UpstreamConfig], Awaitable[Any]],
) -> int:
    """Run one upstream search and print its JSON result.

    Args:
        search: Coroutine function taking the client and configuration.

    Returns:
        Exit code.
    """
    try:
        config = get_upstream_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    async def _search() -> Any:
        async with httpx.AsyncClient(timeout=config.timeout) as client:
            return await search(client, config)

    try:
        result = asyncio.run(_search())
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except (UpstreamStatusError, UpstreamConnectionError) as e:
        print(f"Upstream error: {e}", file=sys.stderr)
        return EXIT_UPSTREAM

    print(json.dumps(result, indent=2))
    return EXIT_OK


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code.
    """
    import uvicorn

    # Reload workers re-import relay.main and read the level from the env
    if args.debug:
        os.environ["RELAY_DEBUG"] = "true"

    uvicorn.run(
        "relay.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )
    return EXIT_OK


def cmd_illinois(args: argparse.Namespace) -> int:
    """Handle the illinois command."""
    from lookup import illinois

    return _run_lookup(
        lambda client, config: illinois.search(client, args.query, config)
    )


def cmd_colorado(args: argparse.Namespace) -> int:
    """Handle the colorado command."""
    from lookup import colorado

    try:
        mode, value = colorado.resolve_search(None, args.name, args.license)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    return _run_lookup(
        lambda client, config: colorado.search(client, mode, value, config)
    )


def cmd_california(args: argparse.Namespace) -> int:
    """Handle the california command."""
    from lookup import california

    try:
        return _run_lookup(
            lambda client, config: california.search(
                client, config, license_numbers=args.license, name=args.name
            )
        )
    except california.MissingCredentialsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID


def main() -> int:
    """Main CLI entrypoint.

    Returns:
        Exit code.
    """
    from lookup.logging import configure_logging
    from relay.config import HOST
    from relay.config import PORT
    from relay.config import RELAY_DEBUG
    from relay.config import RELAY_LOG_JSON

    parser = argparse.ArgumentParser(
        description="License Lookup Relay - professional license search relay",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py serve --port 8000
  python main.py illinois jones
  python main.py colorado --name "john smith"
  python main.py california --license A123456 --license G98765
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP relay")
    serve_parser.add_argument(
        "--host", type=str, default=HOST, help=f"Bind address (default: {HOST})"
    )
    serve_parser.add_argument(
        "--port", type=int, default=PORT, help=f"Listen port (default: {PORT})"
    )
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes"
    )
    serve_parser.add_argument(
        "--debug", action="store_true", help="Enable DEBUG logging"
    )

    # Illinois command
    illinois_parser = subparsers.add_parser(
        "illinois", help="Search the Illinois license dataset"
    )
    illinois_parser.add_argument("query", type=str, help="Free-text search")

    # Colorado command
    colorado_parser = subparsers.add_parser(
        "colorado", help="Search Colorado licenses by name or number"
    )
    colorado_group = colorado_parser.add_mutually_exclusive_group(required=True)
    colorado_group.add_argument("--name", type=str, help="'First Last' or last name")
    colorado_group.add_argument("--license", type=str, help="License number")

    # California command
    california_parser = subparsers.add_parser(
        "california", help="Search California DCA licenses"
    )
    california_group = california_parser.add_mutually_exclusive_group(required=True)
    california_group.add_argument(
        "--license",
        type=str,
        action="append",
        help="License number (can be specified multiple times)",
    )
    california_group.add_argument("--name", type=str, help="Licensee name")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    # Logs go to stderr so lookup output on stdout stays valid JSON
    configure_logging(
        debug=getattr(args, "debug", False) or RELAY_DEBUG, json_logs=RELAY_LOG_JSON
    )

    if args.command == "serve":
        return cmd_serve(args)
    elif args.command == "illinois":
        return cmd_illinois(args)
    elif args.command == "colorado":
        return cmd_colorado(args)
    elif args.command == "california":
        return cmd_california(args)
    else:
        parser.print_help()
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
