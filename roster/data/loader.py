"""
Snapshot loading.

This module reads a roster export (the JSON blob the console saves) into
model objects, caching the result so repeated reports don't re-read the file.
"""

import json
import logging
from pathlib import Path

from ..config import DEFAULT_SNAPSHOT_PATH
from ..models import (
    ClassroomConfig,
    ClassroomRole,
    DisplaySettings,
    RosterSnapshot,
    Student,
    Relationship,
    RelationshipType,
    Allergy,
    AllergySeverity,
    Medication,
    default_classrooms,
)

logger = logging.getLogger(__name__)


class SnapshotFormatError(ValueError):
    """The export file parsed as JSON but is not a roster snapshot."""


def _enum_value(enum_cls, raw, default):
    try:
        return enum_cls(raw)
    except ValueError:
        return default


def _optional_int(raw):
    # Browser form exports write an emptied field as ""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    return int(raw)


# =============================================================================
# RECORD PARSING (camelCase export keys -> models)
# =============================================================================

def classroom_from_dict(data: dict, preschool_named: bool = False) -> ClassroomConfig:
    """
    Build a ClassroomConfig from an exported record.

    Records written before rooms carried a role get one inferred from
    their name and bounds (see ClassroomRole.infer).
    """
    min_age = _optional_int(data.get("minAge"))
    max_age = _optional_int(data.get("maxAge"))
    name = data.get("name", "")
    is_special = bool(data.get("isSpecial", False))

    raw_role = data.get("role")
    if raw_role:
        role = _enum_value(ClassroomRole, raw_role, ClassroomRole.UNBOUNDED_OTHER)
    elif is_special:
        role = ClassroomRole.UNBOUNDED_OTHER
    else:
        role = ClassroomRole.infer(name, min_age, max_age, preschool_named)

    return ClassroomConfig(
        name=name,
        capacity=int(data.get("capacity", 0) or 0),
        hidden=bool(data.get("hidden", False)),
        order=int(data.get("order", 0) or 0),
        min_age=min_age,
        max_age=max_age,
        is_special=is_special,
        role=role,
        subdivision_count=int(data.get("subdivisionCount", 1) or 1),
    )


def classrooms_from_list(records: list) -> list:
    # An exact "Preschool" room wins the preschool tier over look-alikes
    preschool_named = any(
        str(r.get("name", "")).strip().lower() == "preschool"
        and not r.get("hidden") and not r.get("isSpecial")
        for r in records
    )
    return [classroom_from_dict(r, preschool_named) for r in records]


def student_from_dict(data: dict) -> Student:
    """Build a Student from an exported record."""
    relationships = [
        Relationship(
            target_id=r.get("targetId", ""),
            type=_enum_value(RelationshipType, r.get("type"), RelationshipType.SIBLING),
        )
        for r in data.get("relationships", []) or []
    ]
    allergies = [
        Allergy(
            id=a.get("id", ""),
            substance=a.get("substance", ""),
            severity=_enum_value(AllergySeverity, a.get("severity"), AllergySeverity.MILD),
            last_reaction=a.get("lastReaction", ""),
            comments=a.get("comments", ""),
        )
        for a in data.get("allergies", []) or []
    ]
    medications = [
        Medication(
            id=m.get("id", ""),
            name=m.get("name", ""),
            frequency=m.get("frequency", ""),
            expiration_date=m.get("expirationDate", ""),
        )
        for m in data.get("medications", []) or []
    ]

    return Student(
        id=str(data.get("id", "")),
        name=data.get("name", ""),
        dob=data.get("dob", ""),
        withdrawal_date=data.get("withdrawalDate"),
        fte=float(data.get("fte", 1.0) or 0.0),
        is_staff_child=bool(data.get("isStaffChild", False)),
        is_promo=bool(data.get("isPromo", False)),
        promo_comment=data.get("promoComment"),
        comments=data.get("comments"),
        relationships=relationships,
        subdivision_index=data.get("subdivisionIndex"),
        allergies=allergies,
        medications=medications,
        emergency_contact=data.get("emergencyContact", ""),
        medical_form_url=data.get("medicalFormUrl"),
        document_expiration_date=data.get("documentExpirationDate"),
        parent_email=data.get("parentEmail"),
        leadership_email=data.get("leadershipEmail"),
        alert_lead_days=list(data.get("alertLeadDays", []) or []),
    )


def snapshot_from_dict(data: dict) -> RosterSnapshot:
    """
    Build a RosterSnapshot from a parsed export.

    A missing classSettings key falls back to the default room layout.
    """
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"Expected a JSON object, got {type(data).__name__}")

    class_records = data.get("classSettings")
    try:
        classrooms = classrooms_from_list(class_records) if class_records else default_classrooms()
        students = [student_from_dict(s) for s in data.get("students", []) or []]
    except (ValueError, TypeError, AttributeError) as e:
        raise SnapshotFormatError(f"Malformed record in export: {e}") from e

    display = {
        name: DisplaySettings(
            show_dob=bool(s.get("showDob", False)),
            show_age=bool(s.get("showAge", False)),
            show_transition=bool(s.get("showTransition", False)),
        )
        for name, s in (data.get("classDisplaySettings") or {}).items()
    }

    return RosterSnapshot(
        students=students,
        classrooms=classrooms,
        manual_assignments=dict(data.get("manualAssignments") or {}),
        waitlisted_assignments=dict(data.get("waitlistedAssignments") or {}),
        manual_transition_dates=dict(data.get("manualTransitionDates") or {}),
        projection_date=data.get("projectionDate", ""),
        class_display_settings=display,
    )


# =============================================================================
# SERIALIZATION (models -> camelCase export keys)
# =============================================================================

def _drop_none(record: dict) -> dict:
    return {k: v for k, v in record.items() if v is not None}


def classroom_to_dict(c: ClassroomConfig) -> dict:
    return _drop_none({
        "name": c.name,
        "capacity": c.capacity,
        "hidden": c.hidden,
        "order": c.order,
        "minAge": c.min_age,
        "maxAge": c.max_age,
        "isSpecial": c.is_special or None,
        "role": c.role.value,
        "subdivisionCount": c.subdivision_count,
    })


def student_to_dict(s: Student) -> dict:
    return _drop_none({
        "id": s.id,
        "name": s.name,
        "dob": s.dob,
        "withdrawalDate": s.withdrawal_date,
        "fte": s.fte,
        "isStaffChild": s.is_staff_child,
        "isPromo": s.is_promo,
        "promoComment": s.promo_comment,
        "comments": s.comments,
        "relationships": [{"targetId": r.target_id, "type": r.type.value} for r in s.relationships],
        "subdivisionIndex": s.subdivision_index,
        "allergies": [
            {
                "id": a.id,
                "substance": a.substance,
                "severity": a.severity.value,
                "lastReaction": a.last_reaction,
                "comments": a.comments,
            }
            for a in s.allergies
        ],
        "medications": [
            {"id": m.id, "name": m.name, "frequency": m.frequency, "expirationDate": m.expiration_date}
            for m in s.medications
        ],
        "emergencyContact": s.emergency_contact,
        "medicalFormUrl": s.medical_form_url,
        "documentExpirationDate": s.document_expiration_date,
        "parentEmail": s.parent_email,
        "leadershipEmail": s.leadership_email,
        "alertLeadDays": s.alert_lead_days or None,
    })


def snapshot_to_dict(snapshot: RosterSnapshot) -> dict:
    """Inverse of snapshot_from_dict, using the console's export keys."""
    return {
        "students": [student_to_dict(s) for s in snapshot.students],
        "classSettings": [classroom_to_dict(c) for c in snapshot.classrooms],
        "manualAssignments": dict(snapshot.manual_assignments),
        "waitlistedAssignments": dict(snapshot.waitlisted_assignments),
        "manualTransitionDates": dict(snapshot.manual_transition_dates),
        "projectionDate": snapshot.projection_date,
        "classDisplaySettings": {
            name: {"showDob": d.show_dob, "showAge": d.show_age, "showTransition": d.show_transition}
            for name, d in snapshot.class_display_settings.items()
        },
    }


class SnapshotLoader:
    """
    Loads and caches a roster export file.

    WHY LAZY LOADING: The snapshot property only reads the file when first
    accessed, so building a console for --help never touches the disk.

    Usage:
        loader = SnapshotLoader("exports/roster.json")
        snapshot = loader.snapshot
        loader.reload()  # pick up changes written by the console
    """

    def __init__(self, path=None):
        self.path = Path(path) if path else DEFAULT_SNAPSHOT_PATH
        # None means "not loaded yet"
        self._snapshot = None

    @property
    def snapshot(self) -> RosterSnapshot:
        if self._snapshot is None:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._snapshot = snapshot_from_dict(data)
            logger.info(
                "Loaded %d students and %d classrooms from %s",
                len(self._snapshot.students), len(self._snapshot.classrooms), self.path,
            )
        return self._snapshot

    def reload(self) -> RosterSnapshot:
        self._snapshot = None
        return self.snapshot

    def save(self, snapshot: RosterSnapshot, path=None):
        """Write a snapshot back out in the export format."""
        target = Path(path) if path else self.path
        with open(target, "w", encoding="utf-8") as f:
            json.dump(snapshot_to_dict(snapshot), f, indent=2)
        self._snapshot = snapshot
        logger.info("Saved snapshot to %s", target)
