"""
Transition Projector.

Forecasts when a child will age out of the room they are in, for display
next to their name on a class roster.
"""

import calendar
from datetime import date
from typing import Optional

from ..dates import parse_date
from ..models import Student, find_classroom
from .cutoff import CutoffProjector


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the month's end."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


class TransitionProjector:
    """
    Projects the date a child moves on from their current room.

    - Month-banded rooms: dob + max_age months
    - Unbounded rooms (preschool/pre-K tiers): the next academic cutoff as
      seen from the wall-clock date, independent of any what-if projection
    """

    def __init__(self, cutoff_projector: CutoffProjector = None):
        self.cutoff = cutoff_projector or CutoffProjector()

    def projected_transition_date(self, student: Student, class_name: str,
                                  classrooms: list, today: Optional[date] = None) -> Optional[date]:
        """
        Args:
            student: Child to forecast
            class_name: The room the child is in now
            classrooms: Full classroom configuration
            today: Wall-clock date; defaults to date.today()

        Returns:
            Transition date, or None for unknown or special rooms and
            unparseable birth dates
        """
        classroom = find_classroom(classrooms, class_name)
        if classroom is None or classroom.is_special:
            return None

        dob = parse_date(student.dob)
        if dob is None:
            return None

        if classroom.max_age is not None:
            return add_months(dob, classroom.max_age)

        return self.cutoff.next_cutoff(today)
