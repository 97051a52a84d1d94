"""
Roster snapshot model.

A RosterSnapshot is everything one query needs: the students, the room
configuration, the three override tables and the projection date. It is
passed explicitly into each engine call; the engines keep no roster state.
"""

from dataclasses import dataclass, field
from typing import Optional

from .classroom import ClassroomConfig, find_classroom


@dataclass
class DisplaySettings:
    """Optional columns shown on a class roster card."""
    show_dob: bool = False
    show_age: bool = False
    show_transition: bool = False


@dataclass
class RosterSnapshot:
    """
    In-memory view of the roster at one projection date.

    Attributes:
        students: List of Student records
        classrooms: List of ClassroomConfig records
        manual_assignments: student id -> classroom name override
        waitlisted_assignments: student id -> classroom the child waits for
        manual_transition_dates: student id -> "promote on this date" text
        projection_date: The simulated "today" all math is relative to
        class_display_settings: classroom name -> DisplaySettings
    """
    students: list = field(default_factory=list)
    classrooms: list = field(default_factory=list)
    manual_assignments: dict = field(default_factory=dict)
    waitlisted_assignments: dict = field(default_factory=dict)
    manual_transition_dates: dict = field(default_factory=dict)
    projection_date: str = ""
    class_display_settings: dict = field(default_factory=dict)

    def classroom(self, name: str) -> Optional[ClassroomConfig]:
        return find_classroom(self.classrooms, name)

    def student(self, student_id: str):
        for s in self.students:
            if s.id == student_id:
                return s
        return None

    def is_waitlisted(self, student_id: str) -> bool:
        return bool(self.waitlisted_assignments.get(student_id))

    def display_settings_for(self, class_name: str) -> DisplaySettings:
        return self.class_display_settings.get(class_name) or DisplaySettings()
