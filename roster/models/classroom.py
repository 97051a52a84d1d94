"""
Classroom configuration models.

Contains the ClassroomConfig dataclass and the ClassroomRole enum that tells
the classification engine how a room takes part in the assignment ladder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ClassroomRole(Enum):
    """
    How a classroom participates in automatic assignment.

    INFANT_BAND: Filled by strict [min_age, max_age) month bands
    PRESCHOOL_TIER: Receives children who are 3 as of the academic cutoff
    PREK_TIER: Receives children who are 4 as of the academic cutoff
    UNBOUNDED_OTHER: Never picked automatically (afterschool, pathways, ...)
    """
    INFANT_BAND = "infant-band"
    PRESCHOOL_TIER = "preschool-tier"
    PREK_TIER = "prek-tier"
    UNBOUNDED_OTHER = "unbounded-other"

    @classmethod
    def infer(cls, name: str, min_age: Optional[int], max_age: Optional[int],
              preschool_named: bool = False) -> "ClassroomRole":
        """
        Guess the role of a legacy configuration record that has none.

        Older exports relied on room names ("PreK", "Transitional
        Kindergarten", "Preschool"); this runs once at load time so the
        engine itself never looks at display names.

        Args:
            name: Room display name
            min_age: Lower band bound in months, if any
            max_age: Upper band bound in months, if any
            preschool_named: True when some active room is named exactly
                "Preschool"; rooms merely containing the word then lose
                the preschool tier to it
        """
        lowered = (name or "").strip().lower()
        if "prek" in lowered or "transitional" in lowered:
            return cls.PREK_TIER
        if lowered == "preschool":
            return cls.PRESCHOOL_TIER
        if "preschool" in lowered and not preschool_named:
            return cls.PRESCHOOL_TIER
        if min_age is not None and max_age is not None:
            return cls.INFANT_BAND
        return cls.UNBOUNDED_OTHER


@dataclass
class ClassroomConfig:
    """
    A named capacity bucket.

    The name is the foreign key used by every override table, so it must be
    unique within a configuration. Order and age bounds are expected to be
    consistent with each other; nothing here validates overlaps.

    Attributes:
        name: Unique display name (e.g., "Young Infant")
        capacity: Licensed seats
        hidden: Excluded from active rotation without being deleted
        order: Traversal sequence and tie-break for the age-band ladder
        min_age: Inclusive lower bound in whole months
        max_age: Exclusive upper bound in whole months
        is_special: Virtual bucket such as "Graduated/Withdrawn"
        role: How the room takes part in automatic assignment
        subdivision_count: Number of sub-groups the room is split into
    """
    name: str
    capacity: int = 0
    hidden: bool = False
    order: int = 0
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    is_special: bool = False
    role: ClassroomRole = ClassroomRole.UNBOUNDED_OTHER
    subdivision_count: int = 1

    @property
    def is_active(self) -> bool:
        """Visible, non-special rooms are the ones children can be placed in."""
        return not self.hidden and not self.is_special

    @property
    def has_age_band(self) -> bool:
        return self.min_age is not None and self.max_age is not None

    def contains_age(self, age_in_months: int) -> bool:
        """True if the age falls in the half-open [min_age, max_age) band."""
        if not self.has_age_band:
            return False
        return self.min_age <= age_in_months < self.max_age


def active_classrooms(classrooms: list) -> list:
    """Visible, non-special classrooms sorted by their configured order."""
    return sorted((c for c in classrooms if c.is_active), key=lambda c: c.order)


def find_classroom(classrooms: list, name: str) -> Optional[ClassroomConfig]:
    """Look up a classroom by exact name."""
    for classroom in classrooms:
        if classroom.name == name:
            return classroom
    return None


def default_classrooms() -> list:
    """The room layout a new facility starts with."""
    band = ClassroomRole.INFANT_BAND
    return [
        ClassroomConfig("Young Infant", 8, order=0, min_age=0, max_age=8, role=band),
        ClassroomConfig("Older Infant", 8, order=1, min_age=8, max_age=12, role=band),
        ClassroomConfig("Younger Toddler", 18, order=2, min_age=12, max_age=18, role=band),
        ClassroomConfig("Older Toddler", 18, order=3, min_age=18, max_age=24, role=band),
        ClassroomConfig("Early Preschool", 48, order=4, min_age=24, max_age=36, role=band),
        ClassroomConfig("Preschool Pathways", 16, order=5),
        ClassroomConfig("Preschool", 48, order=6, role=ClassroomRole.PRESCHOOL_TIER),
        ClassroomConfig("PreK", 48, order=7, role=ClassroomRole.PREK_TIER),
        ClassroomConfig("Transitional Kindergarten", 0, order=8, role=ClassroomRole.PREK_TIER),
        ClassroomConfig("Afterschool", 10, order=9),
        ClassroomConfig("Graduated/Withdrawn", 0, order=10, is_special=True),
    ]
