"""Cron expression expansion: field expander, schedule parser and presenter."""

from expander.field import TermKind, classify, expand, expand_field
from expander.presenter import render
from expander.schedule import FIELD_SPECS, expand_schedule, parse, split_request

__all__ = [
    "TermKind",
    "classify",
    "expand",
    "expand_field",
    "render",
    "FIELD_SPECS",
    "expand_schedule",
    "parse",
    "split_request",
]
