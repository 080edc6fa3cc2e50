"""cronexpand CLI -- the `cronexpand` command.

Usage:
    cronexpand [--config PATH] [--verbose] <minute> <hour> <day-of-month> <month> <day-of-week> [<year>] <command...>

Example:
    cronexpand */15 0 1,15 * 1-5 /usr/bin/find

Options go before the first field; everything from the first field on is
taken verbatim, including command arguments that start with a dash.
"""

from __future__ import annotations

import argparse
import sys

from core.config import load_config
from core.errors import CronExpanderError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cronexpand",
        description="Expand a cron expression into the values of each field",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to config.yaml (default: built-in defaults)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    parser.add_argument(
        "tokens",
        nargs=argparse.REMAINDER,
        help="<minute> <hour> <day-of-month> <month> <day-of-week> [<year>] <command...>",
    )
    return parser


_VALUE_OPTIONS = {"-c", "--config"}
_FLAG_OPTIONS = {"-v", "--verbose", "-h", "--help"}


def split_options(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split leading known options from the schedule tokens.

    Fields such as "-1-5" start with a dash; argparse would take them for
    unknown options, so only the recognised prefix is handed to it.
    """
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in _VALUE_OPTIONS:
            i += 2
        elif arg in _FLAG_OPTIONS or arg.startswith("--config="):
            i += 1
        else:
            break
    i = min(i, len(argv))
    return argv[:i], argv[i:]


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    from main import run, setup_logging

    if argv is None:
        argv = sys.argv[1:]
    options, tokens = split_options(list(argv))

    parser = build_parser()
    args = parser.parse_args(options)

    try:
        config = load_config(args.config)
    except CronExpanderError as e:
        print(e)
        sys.exit(e.exit_code)

    setup_logging("DEBUG" if args.verbose else config.logging.level)
    sys.exit(run(tokens, config))


if __name__ == "__main__":
    main()
