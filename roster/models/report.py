"""
Report data models.

Contains the dataclasses returned by the enrollment and medical alert
engines. These are pure data; the terminal display decides how to show them.
"""

from dataclasses import dataclass, field
from enum import Enum


class RosterFilter(Enum):
    """Which slice of the roster a listing shows."""
    ACTIVE = "active"
    WAITLISTED = "waitlisted"
    GRADUATED = "graduated"
    ALL = "all"


class ExpiringItemType(Enum):
    MEDICATION = "Medication"
    FORM = "Form"


@dataclass
class ClassEnrollment:
    """
    Seat usage of a single active classroom.

    Example:
        name: "Older Infant"
        enrolled: 7
        capacity: 8
        waitlisted: 2
    """
    name: str
    enrolled: int
    capacity: int
    waitlisted: int = 0

    @property
    def vacancies(self) -> int:
        return max(0, self.capacity - self.enrolled)

    @property
    def is_over_capacity(self) -> bool:
        return self.enrolled > self.capacity


@dataclass
class EnrollmentTotals:
    """Facility-wide totals across all active classrooms."""
    enrolled: int
    capacity: int
    vacancies: int
    total_fte: float

    @property
    def utilization(self) -> float:
        """Enrolled share of capacity (0.0 when there is no capacity)."""
        if self.capacity <= 0:
            return 0.0
        return self.enrolled / self.capacity


@dataclass
class ExpiringItem:
    """A medication or medical form that is about to expire."""
    student_name: str
    student_id: str
    item_name: str
    item_type: ExpiringItemType
    days_left: int
    date: str


@dataclass
class ExpirationReport:
    urgent: list = field(default_factory=list)    # 0..7 days left
    upcoming: list = field(default_factory=list)  # 8..30 days left

    @property
    def total(self) -> int:
        return len(self.urgent) + len(self.upcoming)
