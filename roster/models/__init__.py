"""
Data models for the roster system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .classroom import (
    ClassroomConfig,
    ClassroomRole,
    active_classrooms,
    find_classroom,
    default_classrooms,
)
from .student import (
    Student,
    Relationship,
    RelationshipType,
    Allergy,
    AllergySeverity,
    Medication,
)
from .snapshot import RosterSnapshot, DisplaySettings
from .report import (
    RosterFilter,
    ClassEnrollment,
    EnrollmentTotals,
    ExpiringItem,
    ExpiringItemType,
    ExpirationReport,
)

__all__ = [
    # Classroom models
    "ClassroomConfig",
    "ClassroomRole",
    "active_classrooms",
    "find_classroom",
    "default_classrooms",
    # Student models
    "Student",
    "Relationship",
    "RelationshipType",
    "Allergy",
    "AllergySeverity",
    "Medication",
    # Snapshot
    "RosterSnapshot",
    "DisplaySettings",
    # Report models
    "RosterFilter",
    "ClassEnrollment",
    "EnrollmentTotals",
    "ExpiringItem",
    "ExpiringItemType",
    "ExpirationReport",
]
