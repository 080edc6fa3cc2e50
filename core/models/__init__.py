"""Pydantic data models shared across all components."""

from core.models.fields import ExpandedField, FieldSpec
from core.models.schedule import Schedule, ScheduleRequest

__all__ = [
    "FieldSpec",
    "ExpandedField",
    "ScheduleRequest",
    "Schedule",
]
