"""
Classroom Classification Engine.

This module decides which classroom a child belongs to on a projection date.
"""

import logging

from ..config import (
    WITHDRAWN_CLASS,
    PRESCHOOL_TIER_AGE,
    PREK_TIER_AGE,
    GRADUATION_AGE,
)
from ..dates import DateLike, parse_date, months_between
from ..models import ClassroomRole, Student, RosterSnapshot, active_classrooms, find_classroom
from .cutoff import CutoffProjector

logger = logging.getLogger(__name__)


class ClassificationEngine:
    """
    Maps a child to a classroom name for a given projection date.

    AUTOMATIC LADDER (first match wins):
    ------------------------------------
    1. Age at cutoff >= 5  -> Graduated/Withdrawn
    2. Age at cutoff >= 4  -> first active PREK_TIER room (if any)
    3. Age at cutoff >= 3  -> first active PRESCHOOL_TIER room (if any)
    4. First active room whose [min_age, max_age) band holds the age in months
    5. First active room, or Graduated/Withdrawn when none is active

    The tiers above the month bands are policy buckets; every facility names
    them differently, so they are found through ClassroomRole rather than
    by name.

    EFFECTIVE CLASS (first match wins):
    -----------------------------------
    1. Withdrawal date reached        -> Graduated/Withdrawn
    2. Manual assignment to a visible room -> that room
    3. Manual transition date reached -> the room after the automatic one
       as of the transition date
    4. Automatic ladder

    An unparseable projection date always yields Graduated/Withdrawn: with
    no valid "now" nobody can be enrolled.
    """

    def __init__(self, cutoff_projector: CutoffProjector = None):
        self.cutoff = cutoff_projector or CutoffProjector()

    def _tier_room(self, active: list, role: ClassroomRole):
        for classroom in active:
            if classroom.role == role:
                return classroom
        return None

    def automatic_class(self, student: Student, projection_date: DateLike,
                        classrooms: list) -> str:
        """
        Classroom chosen purely from age.

        Args:
            student: The child being classified
            projection_date: Simulated "today"
            classrooms: Full classroom configuration (hidden/special included)

        Returns:
            Classroom name, or WITHDRAWN_CLASS
        """
        dob = parse_date(student.dob)
        projection = parse_date(projection_date)
        if dob is None or projection is None:
            return WITHDRAWN_CLASS

        age_in_months = months_between(dob, projection)
        age_at_cutoff = self.cutoff.age_at_cutoff(dob, projection)
        active = active_classrooms(classrooms)

        if age_at_cutoff >= GRADUATION_AGE:
            return WITHDRAWN_CLASS

        if age_at_cutoff >= PREK_TIER_AGE:
            prek = self._tier_room(active, ClassroomRole.PREK_TIER)
            if prek:
                return prek.name

        if age_at_cutoff >= PRESCHOOL_TIER_AGE:
            preschool = self._tier_room(active, ClassroomRole.PRESCHOOL_TIER)
            if preschool:
                return preschool.name

        for classroom in active:
            if classroom.contains_age(age_in_months):
                return classroom.name

        if active:
            return active[0].name
        return WITHDRAWN_CLASS

    def effective_class(self, student: Student, projection_date: DateLike,
                        classrooms: list, manual_assignments: dict,
                        manual_transition_dates: dict) -> str:
        """
        Classroom after withdrawal, manual override and scheduled transition.

        Args:
            student: The child being classified
            projection_date: Simulated "today"
            classrooms: Full classroom configuration
            manual_assignments: student id -> classroom name
            manual_transition_dates: student id -> transition date text

        Returns:
            Classroom name, or WITHDRAWN_CLASS
        """
        projection = parse_date(projection_date)
        if projection is None:
            return WITHDRAWN_CLASS

        # Withdrawal beats every override
        withdrawal = parse_date(student.withdrawal_date)
        if withdrawal is not None and withdrawal <= projection:
            return WITHDRAWN_CLASS

        assigned_name = (manual_assignments or {}).get(student.id)
        if assigned_name:
            assigned = find_classroom(classrooms, assigned_name)
            if assigned is not None and not assigned.hidden:
                return assigned.name
            logger.debug("Ignoring manual assignment of %s to %r", student.id, assigned_name)

        transition_text = (manual_transition_dates or {}).get(student.id)
        transition = parse_date(transition_text)
        if transition is not None and projection >= transition:
            return self._class_after_transition(student, transition, classrooms)

        return self.automatic_class(student, projection, classrooms)

    def _class_after_transition(self, student: Student, transition, classrooms: list) -> str:
        """One step past where the ladder had the child on the transition date."""
        before = self.automatic_class(student, transition, classrooms)
        sequence = active_classrooms(classrooms)
        names = [c.name for c in sequence]
        if before in names:
            idx = names.index(before)
            if idx < len(names) - 1:
                return names[idx + 1]
        return WITHDRAWN_CLASS

    def classify_roster(self, snapshot: RosterSnapshot) -> dict:
        """Effective class of every student in the snapshot, keyed by id."""
        return {
            s.id: self.effective_class(
                s,
                snapshot.projection_date,
                snapshot.classrooms,
                snapshot.manual_assignments,
                snapshot.manual_transition_dates,
            )
            for s in snapshot.students
        }
