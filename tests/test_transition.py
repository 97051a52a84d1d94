"""
Tests for projected transition dates.

"Today" is always pinned so unbounded-room forecasts are reproducible.

Run: pytest tests/test_transition.py -v
"""

from datetime import date

import pytest

from roster.config import WITHDRAWN_CLASS
from roster.engines import TransitionProjector
from roster.engines.transition import add_months


@pytest.fixture
def projector():
    return TransitionProjector()


class TestAddMonths:
    def test_simple_shift(self):
        assert add_months(date(2024, 1, 1), 8) == date(2024, 9, 1)

    def test_crosses_year(self):
        assert add_months(date(2024, 6, 15), 18) == date(2025, 12, 15)

    def test_clamps_to_month_end(self):
        assert add_months(date(2023, 6, 30), 8) == date(2024, 2, 29)
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)


class TestProjectedTransitionDate:
    def test_banded_room_uses_max_age(self, projector, rooms, make_student):
        student = make_student(dob="01/01/2024")
        result = projector.projected_transition_date(student, "Young Infant", rooms)
        assert result == date(2024, 9, 1)

    def test_unbounded_room_uses_next_cutoff(self, projector, rooms, make_student):
        student = make_student(dob="01/01/2021")
        today = date(2025, 10, 18)
        result = projector.projected_transition_date(student, "Preschool", rooms, today=today)
        assert result == date(2026, 8, 31)

    def test_unbounded_room_before_cutoff(self, projector, rooms, make_student):
        student = make_student(dob="01/01/2021")
        result = projector.projected_transition_date(
            student, "PreK", rooms, today=date(2025, 3, 1)
        )
        assert result == date(2025, 8, 31)

    def test_special_room_has_no_transition(self, projector, rooms, make_student):
        assert projector.projected_transition_date(make_student(), WITHDRAWN_CLASS, rooms) is None

    def test_unknown_room_has_no_transition(self, projector, rooms, make_student):
        assert projector.projected_transition_date(make_student(), "Room 99", rooms) is None

    def test_unparseable_dob_has_no_transition(self, projector, rooms, make_student):
        student = make_student(dob="sometime")
        assert projector.projected_transition_date(student, "Young Infant", rooms) is None
