"""Schedule models -- raw request tokens and the aggregated expansion."""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.models.fields import ExpandedField


class ScheduleRequest(BaseModel):
    """Argument tokens split into field syntax strings and the command.

    ``year`` is the year candidate, or None when the request has none.
    """

    fields: list[str]
    year: str | None = None
    command: str = ""


class Schedule(BaseModel):
    """Every expanded field in display order, plus the command text."""

    fields: list[ExpandedField] = Field(default_factory=list)
    command: str = ""

    @property
    def year(self) -> ExpandedField | None:
        for field in self.fields:
            if field.spec.name == "year":
                return field
        return None

    def get(self, name: str) -> ExpandedField:
        for field in self.fields:
            if field.spec.name == name:
                return field
        raise KeyError(f"No field named {name!r}")
