"""pubfiles entry point.

Commands:
  serve   web pages for /download/... and /files/... plus the JSON API
  browse  interactive terminal browser
  info    print one file's size and download URL
"""

import argparse
import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

from pubfiles.config import get_settings
from pubfiles.logging_setup import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _version() -> str:
    try:
        return get_version("pubfiles")
    except PackageNotFoundError:
        return "unknown"


async def run_info(storage_id: str, path: str) -> int:
    """Resolve one file and print it. Returns the process exit code."""
    from pubfiles.client import PublicFilesClient
    from pubfiles.views.resolver import FileResolver

    view = FileResolver(storage_id, path, PublicFilesClient())
    await view.mount()
    if view.state.error_message:
        print(view.state.error_message, file=sys.stderr)
        return 1
    print(f"Name: {view.name}")
    print(f"Size: {view.size_label}")
    print(f"Download: {view.download_url}")
    return 0


async def run_browse(storage_id: str, path: str) -> None:
    from pubfiles.client import PublicFilesClient
    from pubfiles.shell import BrowseShell

    await BrowseShell(storage_id, PublicFilesClient(), path=path).run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pubfiles",
        description="Browse and download files from public storages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pubfiles serve                         Start the web server
  pubfiles serve --host 0.0.0.0 -p 9000  Listen on all interfaces
  pubfiles browse 4f1c... docs           Browse a storage from the terminal
  pubfiles info 4f1c... reports/q1.pdf   Print size and download link
""",
    )
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument("--api-base", default=None, help="Storage API base URL (overrides PUBFILES_API_BASE)")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the web server")
    serve.add_argument("--host", type=str, default=None, help="Host to bind (default from settings)")
    serve.add_argument("--port", "-p", type=int, default=None, help="Port (default from settings)")
    serve.add_argument("--dev", action="store_true", help="Development mode with auto-reload")

    browse = sub.add_parser("browse", help="Browse a storage interactively")
    browse.add_argument("storage_id")
    browse.add_argument("path", nargs="?", default="")

    info = sub.add_parser("info", help="Show a file's size and download URL")
    info.add_argument("storage_id")
    info.add_argument("path")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.api_base:
        settings.api_base = args.api_base.rstrip("/")
    setup_logging(level=args.log_level or settings.log_level)

    if args.command == "serve":
        from pubfiles.api.serve import run_server

        run_server(
            host=args.host or settings.host,
            port=args.port or settings.port,
            dev=args.dev,
        )
        return 0
    if args.command == "browse":
        try:
            asyncio.run(run_browse(args.storage_id, args.path))
        except KeyboardInterrupt:
            logger.info("Bye")
        return 0
    if args.command == "info":
        return asyncio.run(run_info(args.storage_id, args.path))

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
