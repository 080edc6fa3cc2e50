"""
Unit tests for the table presenter
"""

from core.models import ExpandedField, FieldSpec, Schedule
from expander.presenter import LABEL_WIDTH, format_line, render


def _field(name, lower, upper, values):
    return ExpandedField(spec=FieldSpec(name=name, lower=lower, upper=upper), values=values)


class TestRender:

    def test_label_padded_to_fixed_width(self):
        assert format_line("hour", "0") == "hour" + " " * (LABEL_WIDTH - 4) + "0\n"

    def test_fields_then_command(self):
        schedule = Schedule(
            fields=[_field("minute", 0, 59, [0, 30]), _field("day of week", 0, 6, [1, 2])],
            command="/usr/bin/find",
        )
        assert render(schedule) == (
            "minute        0 30\n"
            "day of week   1 2\n"
            "command       /usr/bin/find\n"
        )

    def test_year_line_only_when_present(self):
        without = Schedule(fields=[_field("minute", 0, 59, [5])], command="x")
        with_year = Schedule(
            fields=[_field("minute", 0, 59, [5]), _field("year", 2024, 2051, [2030])],
            command="x",
        )
        assert "year" not in render(without)
        assert "year          2030\n" in render(with_year)

    def test_empty_command(self):
        schedule = Schedule(fields=[], command="")
        assert render(schedule) == "command       \n"
