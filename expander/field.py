"""Cron field expander -- turns one field's syntax into the values it denotes.

Supports: *, N, N-M, */N, N-M/N, and comma lists of those.

Examples (minute field, bounds 0-59):
    "*/15"     -> [0, 15, 30, 45]
    "1,15"     -> [1, 15]
    "10-20/5"  -> [10, 15, 20]
    "5"        -> [5]
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from core.errors import (
    InvalidRange,
    InvalidStep,
    InvalidStepBase,
    InvalidValue,
    NonPositiveStep,
    OutOfRange,
    StepTooLarge,
)
from core.models.fields import ExpandedField, FieldSpec

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only; int() alone would also take "1_0" and " 5"
_INT_RE = re.compile(r"[+-]?[0-9]+")


class TermKind(Enum):
    WILDCARD = "wildcard"
    LIST = "list"
    STEP = "step"
    RANGE = "range"
    SINGLE = "single"


def classify(text: str) -> TermKind:
    """Decide which syntax shape a field term has. First match wins."""
    if text == "*":
        return TermKind.WILDCARD
    if "," in text:
        return TermKind.LIST
    if "/" in text:
        return TermKind.STEP
    if "-" in text:
        return TermKind.RANGE
    return TermKind.SINGLE


def expand(spec: FieldSpec, text: str) -> list[int]:
    """Expand a field's syntax into its ordered values.

    Args:
        spec: bounds of the field being expanded
        text: the field syntax, e.g. "*/15" or "1-5"

    Returns:
        Ascending list of integers. Comma lists are not deduplicated.

    Raises:
        CronExpansionError subclass naming the offending token.
    """
    kind = classify(text)
    if kind is TermKind.LIST:
        values = _expand_list(spec, text)
    else:
        values = _expand_term(kind, spec.lower, spec.upper, text)
    logger.debug("Expanded %s %r -> %d value(s)", spec.name, text, len(values))
    return values


def expand_field(spec: FieldSpec, text: str) -> ExpandedField:
    """Like expand(), but keeps the spec and source text with the values."""
    return ExpandedField(spec=spec, values=expand(spec, text), source_text=text)


def _expand_term(kind: TermKind, lower: int, upper: int, text: str) -> list[int]:
    if kind is TermKind.WILDCARD:
        return list(range(lower, upper + 1))
    if kind is TermKind.STEP:
        return _expand_step(lower, upper, text)
    if kind is TermKind.RANGE:
        return _expand_range(lower, upper, text)
    if kind is TermKind.SINGLE:
        return [_expand_single(lower, upper, text)]
    raise InvalidValue(f"invalid input: {text}", text)


def _expand_list(spec: FieldSpec, text: str) -> list[int]:
    values: list[int] = []
    for part in text.split(","):
        # a sub-term holds no comma, so it can never classify as another list
        for value in _expand_term(classify(part), spec.lower, spec.upper, part):
            if not spec.contains(value):
                raise OutOfRange(f"value out of range: {value}", str(value))
            values.append(value)
    values.sort()
    return values


def _expand_step(lower: int, upper: int, text: str) -> list[int]:
    parts = text.split("/")
    if len(parts) != 2:
        raise InvalidStep(f"invalid step: {text}", text)
    base, step_text = parts

    step = _parse_int(step_text)
    if step is None:
        raise InvalidStep(f"invalid step value: {step_text}", step_text)
    if step <= 0:
        raise NonPositiveStep(f"step must be positive: {step}", step_text)

    if base != "*":
        bounds = base.split("-")
        if len(bounds) != 2:
            raise InvalidStepBase(f"invalid range for step base: {base}", base)
        start = _parse_int(bounds[0])
        if start is None:
            raise InvalidStepBase(f"invalid start of step range: {bounds[0]}", bounds[0])
        end = _parse_int(bounds[1])
        if end is None:
            raise InvalidStepBase(f"invalid end of step range: {bounds[1]}", bounds[1])
        if start < lower or end > upper:
            # local bounds are unbounded; a wide base yields a long expansion
            logger.debug(
                "Step range %d-%d extends beyond field bounds %d-%d", start, end, lower, upper
            )
        lower, upper = start, end

    if step > upper - lower:
        raise StepTooLarge("step is larger than the range", text)
    return list(range(lower, upper + 1, step))


def _expand_range(lower: int, upper: int, text: str) -> list[int]:
    parts = text.split("-")
    if len(parts) != 2:
        raise InvalidRange(f"invalid range: {text}", text)
    start = _parse_int(parts[0])
    if start is None:
        raise InvalidRange(f"invalid start of range: {parts[0]}", parts[0])
    end = _parse_int(parts[1])
    if end is None:
        raise InvalidRange(f"invalid end of range: {parts[1]}", parts[1])
    if not (lower <= start <= end <= upper):
        raise InvalidRange(f"invalid range: {text}", text)
    return list(range(start, end + 1))


def _expand_single(lower: int, upper: int, text: str) -> int:
    value = _parse_int(text)
    if value is None:
        raise InvalidValue(f"invalid input: {text}", text)
    if not lower <= value <= upper:
        raise OutOfRange(f"value out of range: {value}", text)
    return value


def _parse_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)
