"""cronexpand entrypoint -- wires config, parser and presenter into one run.

Usage:
    python main.py */15 0 1,15 * 1-5 /usr/bin/find
    python main.py --config /path/to/config.yaml 0 0 1 1 0 2030 /usr/bin/find
"""

from __future__ import annotations

import logging
import sys
from datetime import date
from typing import TextIO

from core.config import AppConfig
from core.errors import EXIT_INTERNAL, EXIT_OK, CronExpanderError
from expander.presenter import render
from expander.schedule import expand_schedule

logger = logging.getLogger("cronexpand")


def setup_logging(level: str) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run(
    tokens: list[str],
    config: AppConfig | None = None,
    out: TextIO | None = None,
    today: date | None = None,
) -> int:
    """Expand the schedule in ``tokens``, write the table, return an exit code.

    Never exits the process. Expected failures print their one-line message
    and return the code of their stage; anything else is logged with a
    traceback and returns EXIT_INTERNAL.
    """
    out = out or sys.stdout
    config = config or AppConfig()
    try:
        schedule = expand_schedule(tokens, config, today)
    except CronExpanderError as e:
        logger.debug("Expansion failed: %s", e)
        print(e, file=out)
        return e.exit_code
    except Exception:
        logger.exception("Unexpected error while expanding %r", tokens)
        print("Error: internal failure, see log for details", file=out)
        return EXIT_INTERNAL

    out.write(render(schedule))
    return EXIT_OK


if __name__ == "__main__":
    from cli.main import main

    main()
