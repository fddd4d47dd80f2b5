"""Command line entry point: parses options and starts the HTTP server."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .app import VERSION, create_app

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
_VERBOSITY_PREFIX = "--v="


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def version() -> str:
    """Return the program version."""
    return VERSION


def extract_verbosity(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate ``--v=N`` options from the other arguments.

    Returns the verbosity values in the order given and the remaining
    arguments.
    """
    values: list[str] = []
    remaining: list[str] = []
    for arg in args:
        if arg.startswith(_VERBOSITY_PREFIX):
            values.append(arg[len(_VERBOSITY_PREFIX):])
        else:
            remaining.append(arg)
    return values, remaining


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="sysprobe", description="input config file address.")
    parser.add_argument(
        "-p", "--port", type=int, default=DEFAULT_PORT, help="port to listen on."
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("version", help="print version.")
    return parser


def run_server(port: int) -> None:
    """Serve the application on all interfaces at ``port``."""
    app = create_app()
    logger.debug("start server on port %d", port)
    app.run(host="0.0.0.0", port=port)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    values, remaining = extract_verbosity(args)

    verbosity = 0
    for value in values:
        print(f"Handling --v={value} parameter")
        try:
            verbosity = int(value)
        except ValueError:
            print(f"Failed to set klog -v flag: invalid value {value!r}")
    logging.basicConfig(level=logging.DEBUG if verbosity >= 1 else logging.INFO)

    try:
        options = _build_parser().parse_args(remaining)
    except UsageError as exc:
        logger.error("%s", exc)
        logger.critical("start error! please check databases config!")
        return 1

    if options.command == "version":
        logger.info("%s", version())
        return 0

    run_server(options.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())