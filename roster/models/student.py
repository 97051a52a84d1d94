"""
Student record models.

Contains the Student dataclass and the medical and relationship records
attached to it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RelationshipType(Enum):
    """Sibling links get enrollment priority; friends should move up together."""
    SIBLING = "S"
    FRIEND = "F"


class AllergySeverity(Enum):
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"


@dataclass
class Relationship:
    target_id: str
    type: RelationshipType = RelationshipType.SIBLING


@dataclass
class Allergy:
    id: str
    substance: str
    severity: AllergySeverity = AllergySeverity.MILD
    last_reaction: str = ""
    comments: str = ""


@dataclass
class Medication:
    id: str
    name: str
    frequency: str = ""
    expiration_date: str = ""


@dataclass
class Student:
    """
    A single child on the roster.

    Dates are kept as the text the staff entered; the engines parse them on
    every query. Changing dob silently reclassifies the child.

    Attributes:
        id: Opaque unique identifier
        name: Display name
        dob: Date of birth text (any layout parse_date accepts)
        withdrawal_date: Once the projection date reaches it, the child is
            permanently in the withdrawn bucket
        fte: Full-time-equivalent weight used in FTE totals
        relationships: Sibling/friend links to other students
        allergies: Allergy records
        medications: Medications with expiration dates
        document_expiration_date: Expiration of the medical form on file
    """
    id: str
    name: str
    dob: str
    withdrawal_date: Optional[str] = None
    fte: float = 1.0
    is_staff_child: bool = False
    is_promo: bool = False
    promo_comment: Optional[str] = None
    comments: Optional[str] = None
    relationships: list = field(default_factory=list)
    subdivision_index: Optional[int] = None
    allergies: list = field(default_factory=list)
    medications: list = field(default_factory=list)
    emergency_contact: str = ""
    medical_form_url: Optional[str] = None
    document_expiration_date: Optional[str] = None
    parent_email: Optional[str] = None
    leadership_email: Optional[str] = None
    alert_lead_days: list = field(default_factory=list)

    @property
    def has_medical_flags(self) -> bool:
        """True when the child has any allergy or medication on file."""
        return bool(self.allergies) or bool(self.medications)

    def is_linked_to(self, student_id: str) -> bool:
        return any(r.target_id == student_id for r in self.relationships)
