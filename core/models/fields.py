"""Field models -- a schedule position's bounds and its expanded values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldSpec(BaseModel):
    """One schedule position with its inclusive bounds.

    Frozen: expressions that narrow the bounds (``A-B/N``) work on a local
    copy and never change the spec they were given.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    lower: int
    upper: int

    @model_validator(mode="after")
    def check_bounds(self) -> FieldSpec:
        if self.lower > self.upper:
            raise ValueError(f"lower bound {self.lower} exceeds upper bound {self.upper}")
        return self

    def contains(self, value: int) -> bool:
        return self.lower <= value <= self.upper


class ExpandedField(BaseModel):
    """The values a field's syntax denotes, in ascending order."""

    spec: FieldSpec
    values: list[int] = Field(default_factory=list)
    source_text: str = ""

    @property
    def label(self) -> str:
        return self.spec.name
