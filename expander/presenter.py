"""Presenter -- renders an expanded schedule as a fixed-width table."""

from __future__ import annotations

from core.models.schedule import Schedule

LABEL_WIDTH = 14


def format_line(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}{value}\n"


def render(schedule: Schedule) -> str:
    """One line per populated field in display order, then the command line."""
    lines = [
        format_line(field.label, " ".join(str(v) for v in field.values))
        for field in schedule.fields
    ]
    lines.append(format_line("command", schedule.command))
    return "".join(lines)
