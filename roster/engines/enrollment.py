"""
Enrollment Engine.

Capacity totals, per-class seat usage and roster listings, all computed from
effective classes at the snapshot's projection date.
"""

from ..config import WITHDRAWN_CLASS
from ..models import (
    RosterSnapshot,
    RosterFilter,
    ClassEnrollment,
    EnrollmentTotals,
    active_classrooms,
)
from .classification import ClassificationEngine


class EnrollmentEngine:
    """
    Answers "how full is each room" for a roster snapshot.

    WAITLIST HANDLING:
    ------------------
    A waitlisted child is still classified into a room (so the room can show
    its waitlist) but does not occupy a seat and does not count toward FTE.

    Usage:
        engine = EnrollmentEngine()
        totals = engine.totals(snapshot)
        for row in engine.class_breakdown(snapshot):
            print(row.name, row.enrolled, row.capacity)
    """

    def __init__(self, classifier: ClassificationEngine = None):
        self.classifier = classifier or ClassificationEngine()

    def _classes(self, snapshot: RosterSnapshot) -> dict:
        return self.classifier.classify_roster(snapshot)

    def totals(self, snapshot: RosterSnapshot) -> EnrollmentTotals:
        """Facility-wide enrolled count, capacity, vacancies and FTE."""
        active = active_classrooms(snapshot.classrooms)
        active_names = {c.name for c in active}
        capacity = sum(c.capacity or 0 for c in active)
        classes = self._classes(snapshot)

        enrolled = 0
        total_fte = 0.0
        for s in snapshot.students:
            if snapshot.is_waitlisted(s.id):
                continue
            class_name = classes[s.id]
            if class_name in active_names:
                enrolled += 1
            if class_name != WITHDRAWN_CLASS:
                total_fte += s.fte or 0

        return EnrollmentTotals(
            enrolled=enrolled,
            capacity=capacity,
            vacancies=max(0, capacity - enrolled),
            total_fte=total_fte,
        )

    def class_breakdown(self, snapshot: RosterSnapshot) -> list:
        """Seat usage for every active room, in configured order."""
        classes = self._classes(snapshot)
        rows = []
        for classroom in active_classrooms(snapshot.classrooms):
            members = [s for s in snapshot.students if classes[s.id] == classroom.name]
            waitlisted = sum(1 for s in members if snapshot.is_waitlisted(s.id))
            rows.append(ClassEnrollment(
                name=classroom.name,
                enrolled=len(members) - waitlisted,
                capacity=classroom.capacity,
                waitlisted=waitlisted,
            ))
        return rows

    def students_in_class(self, snapshot: RosterSnapshot, class_name: str,
                          include_waitlisted: bool = False) -> list:
        classes = self._classes(snapshot)
        return [
            s for s in snapshot.students
            if classes[s.id] == class_name
            and (include_waitlisted or not snapshot.is_waitlisted(s.id))
        ]

    def filter_students(self, snapshot: RosterSnapshot,
                        roster_filter: RosterFilter = RosterFilter.ACTIVE,
                        search: str = "") -> list:
        """
        Roster listing for one filter tab plus a name search.

        ACTIVE excludes waitlisted and graduated children; WAITLISTED and
        GRADUATED show only those; ALL applies the search alone.
        """
        classes = self._classes(snapshot)
        needle = (search or "").lower()
        result = []
        for s in snapshot.students:
            if needle not in s.name.lower():
                continue
            waitlisted = snapshot.is_waitlisted(s.id)
            graduated = classes[s.id] == WITHDRAWN_CLASS
            if roster_filter == RosterFilter.ACTIVE and (waitlisted or graduated):
                continue
            if roster_filter == RosterFilter.WAITLISTED and not waitlisted:
                continue
            if roster_filter == RosterFilter.GRADUATED and not graduated:
                continue
            result.append(s)
        return result

    def sort_students(self, snapshot: RosterSnapshot, students: list,
                      key: str = "name", descending: bool = False) -> list:
        """Sort a listing by a student attribute, or by effective class."""
        if key == "class":
            classes = self._classes(snapshot)
            sort_key = lambda s: classes.get(s.id, "")
        else:
            # Missing values sort last ascending
            def sort_key(s):
                value = getattr(s, key, None)
                return (value is None, value if value is not None else "")
        return sorted(students, key=sort_key, reverse=descending)
