"""Schedule parser -- splits argument tokens and expands every field in order.

Tokens: <minute> <hour> <day-of-month> <month> <day-of-week> [<year>] <command...>

The year is optional. Whether a failed year token is dropped into the
command or reported as an error is decided by ``YearConfig.policy``.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from core.config import AppConfig, YearConfig
from core.errors import CronExpansionError, InsufficientArguments
from core.models.fields import FieldSpec
from core.models.schedule import Schedule, ScheduleRequest
from expander.field import expand_field

logger = logging.getLogger(__name__)

FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec(name="minute", lower=0, upper=59),
    FieldSpec(name="hour", lower=0, upper=23),
    FieldSpec(name="day of month", lower=1, upper=31),
    FieldSpec(name="month", lower=1, upper=12),
    FieldSpec(name="day of week", lower=0, upper=6),
)

MIN_TOKENS = len(FIELD_SPECS) + 1

USAGE_EXAMPLE = "*/15 0 1,15 * 1-5 /usr/bin/find"

# Field syntax characters with at least one digit or "*"; anything else
# (including bare "-" or "/") is command text
_FIELD_SYNTAX_RE = re.compile(r"(?=.*[0-9*])[0-9*,/-]+")


def year_spec(year_config: YearConfig, today: date | None = None) -> FieldSpec:
    """Bounds for the year field, relative to the current year."""
    current = (today or date.today()).year
    return FieldSpec(
        name="year",
        lower=current - year_config.years_back,
        upper=current + year_config.years_ahead,
    )


def split_request(
    tokens: list[str],
    config: AppConfig | None = None,
    today: date | None = None,
) -> ScheduleRequest:
    """Split raw tokens into field strings, an optional year and the command."""
    config = config or AppConfig()
    if len(tokens) < MIN_TOKENS:
        raise InsufficientArguments(
            "Error: not enough arguments provided. "
            f"Example usage: cronexpand {USAGE_EXAMPLE}"
        )

    n = len(FIELD_SPECS)
    fields = list(tokens[:n])
    rest = list(tokens[n:])

    # A year needs at least one command token after it
    if not config.year.enabled or len(rest) < 2:
        return ScheduleRequest(fields=fields, command=" ".join(rest))

    candidate = rest[0]
    if config.year.policy == "strict":
        if _FIELD_SYNTAX_RE.fullmatch(candidate):
            return ScheduleRequest(fields=fields, year=candidate, command=" ".join(rest[1:]))
        return ScheduleRequest(fields=fields, command=" ".join(rest))

    try:
        expand_field(year_spec(config.year, today), candidate)
    except CronExpansionError as e:
        logger.debug("Token %r is not a year (%s); treating it as command text", candidate, e)
        return ScheduleRequest(fields=fields, command=" ".join(rest))
    return ScheduleRequest(fields=fields, year=candidate, command=" ".join(rest[1:]))


def parse(
    request: ScheduleRequest,
    config: AppConfig | None = None,
    today: date | None = None,
) -> Schedule:
    """Expand every field of a request, stopping at the first error."""
    config = config or AppConfig()
    expanded = [expand_field(spec, text) for spec, text in zip(FIELD_SPECS, request.fields)]
    if request.year is not None:
        expanded.append(expand_field(year_spec(config.year, today), request.year))
    return Schedule(fields=expanded, command=request.command)


def expand_schedule(
    tokens: list[str],
    config: AppConfig | None = None,
    today: date | None = None,
) -> Schedule:
    """Split and expand a full argument list."""
    request = split_request(tokens, config, today)
    return parse(request, config, today)
