#!/usr/bin/env python3
"""Server runner for the greeting API.

Starts the FastAPI application under uvicorn, listening on the configured
host and port.

Usage:
    python run_server.py
    python run_server.py --port 8080
    python run_server.py --host 0.0.0.0 --reload
"""

import argparse
import sys
from pathlib import Path

# Add backend directory to path
backend_dir = Path(__file__).parent
sys.path.insert(0, str(backend_dir))

import structlog  # noqa: E402
import uvicorn  # noqa: E402
from rich.console import Console  # noqa: E402

from config import ConfigError, get_config  # noqa: E402

console = Console()
logger = structlog.get_logger(__name__)

APP_IMPORT_PATH = "api.main:app"


def print_banner(host: str, port: int) -> None:
    """Print the startup banner."""
    console.print()
    console.print("[bold blue]Greeting API[/bold blue]", justify="center")
    console.print(f"[dim]Server listening on http://{host}:{port}[/dim]", justify="center")
    console.print()


def build_parser(default_host: str, default_port: int, default_log_level: str) -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Greeting API server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --port 8080
  %(prog)s --host 0.0.0.0 --reload
        """,
    )

    parser.add_argument(
        "--host",
        default=default_host,
        help=f"Bind address (default: {default_host})",
    )

    parser.add_argument(
        "-p", "--port",
        type=int,
        default=default_port,
        help=f"Bind port (default: {default_port})",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes (development only)",
    )

    parser.add_argument(
        "--log-level",
        default=default_log_level,
        help=f"Log level (default: {default_log_level})",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the server runner."""
    try:
        config = get_config()
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/bold red] {exc}")
        return 2

    parser = build_parser(config.host, config.port, config.log_level)
    args = parser.parse_args(argv)

    print_banner(args.host, args.port)
    logger.info("server_starting", host=args.host, port=args.port, reload=args.reload)

    uvicorn.run(
        APP_IMPORT_PATH,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=args.reload,
        app_dir=str(backend_dir),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
