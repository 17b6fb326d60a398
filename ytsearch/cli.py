"""Command-line entry point.

Usage:
    ytsearch video "lofi hip hop"
    ytsearch channel "3blue1brown"

Requires ``api_key``, ``max_results`` and ``order`` in the environment.
Result JSON is written to stdout; diagnostics go to stderr.
"""

import argparse
import asyncio
import logging
import os
import sys

from pydantic import ValidationError

from ytsearch.config import get_settings
from ytsearch.errors import SearchPipelineError
from ytsearch.models import SearchKind
from ytsearch.services.pipeline_orchestrator import run_search

LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_ERROR, f"{self.prog}: error: {message}\n")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send ``ytsearch`` logs to stderr."""
    package_logger = logging.getLogger("ytsearch")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        package_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="ytsearch",
        description="Search YouTube and print launcher result items as JSON",
    )
    parser.add_argument(
        "kind",
        choices=[kind.value for kind in SearchKind],
        help="What to search for",
    )
    parser.add_argument("query", help="Search query string")
    return parser


def _describe_config_error(error: ValidationError) -> str:
    problems = ", ".join(
        f"{'.'.join(str(part) for part in item['loc'])} ({item['msg']})" for item in error.errors()
    )
    return f"Error: invalid configuration: {problems}"


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]
    # Queries may start with "-" (e.g. "-shorts"), so nothing is read as an option
    args = build_parser().parse_args(["--", *argv])
    configure_logging()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(_describe_config_error(e), file=sys.stderr)
        return EXIT_ERROR

    try:
        output = asyncio.run(run_search(args.kind, args.query, settings))
    except SearchPipelineError as e:
        print(e.describe(), file=sys.stderr)
        return EXIT_ERROR

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
