"""
Roster Console - Main Orchestrator.

This module contains the RosterConsole class that connects the
algorithm layer to the presentation layer.

NOTE: Don't run this file directly. Run from the repository root:
    python -m roster path/to/roster.json
"""

from dataclasses import replace
from datetime import date
from typing import Optional

from .dates import format_detailed_age, normalize_date, standardize_date_display
from .data import SnapshotLoader, BulkImporter
from .engines import (
    ClassificationEngine,
    CutoffProjector,
    EnrollmentEngine,
    MedicalAlertEngine,
    RelationshipGraph,
    TransitionProjector,
)
from .models import RosterSnapshot
from .ui import TerminalDisplay


class RosterConsole:
    """
    Main interface for the roster system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads a roster snapshot (students, rooms, override tables)
    2. Calls the engines to get classification and report data
    3. Passes that data to the presentation layer for display

    TO CHANGE THE UI:
    -----------------
    Replace `self.display = TerminalDisplay()` with your custom display class.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        console = RosterConsole("exports/roster.json", projection_date="09/01/2025")
        console.show_dashboard()
        console.show_class_rosters()
        console.show_medical_alerts()
    """

    def __init__(self, snapshot_path=None, projection_date: Optional[str] = None,
                 today: Optional[date] = None):
        self.loader = SnapshotLoader(snapshot_path)
        self.projection_override = projection_date
        self.today = today

        # All engines share one cutoff rule
        self.cutoff = CutoffProjector()
        self.classifier = ClassificationEngine(self.cutoff)
        self.transitions = TransitionProjector(self.cutoff)
        self.enrollment = EnrollmentEngine(self.classifier)
        self.medical = MedicalAlertEngine()
        self.importer = BulkImporter()

        self.display = TerminalDisplay()

    @property
    def snapshot(self) -> RosterSnapshot:
        """
        The loaded snapshot as seen at the projection date.

        The --as-of override (or today, when the export has no date) is
        applied to a copy; the stored snapshot keeps its own projectionDate.
        """
        stored = self.loader.snapshot
        if self.projection_override:
            return replace(stored, projection_date=standardize_date_display(self.projection_override))
        if not stored.projection_date:
            return replace(stored, projection_date=normalize_date(self.today or date.today()))
        return stored

    def show_dashboard(self) -> dict:
        """Print enrollment totals and per-class seat usage."""
        snapshot = self.snapshot
        totals = self.enrollment.totals(snapshot)
        rows = self.enrollment.class_breakdown(snapshot)
        self.display.print_enrollment_summary(snapshot.projection_date, totals, rows)
        return {"totals": totals, "classes": rows}

    def class_roster_entries(self, class_name: str) -> list:
        """(Student, age label, transition text) rows for one room's card."""
        snapshot = self.snapshot
        entries = []
        for s in self.enrollment.students_in_class(snapshot, class_name):
            transition = self.transitions.projected_transition_date(
                s, class_name, snapshot.classrooms, today=self.today
            )
            entries.append((
                s,
                format_detailed_age(s.dob, snapshot.projection_date),
                normalize_date(transition) if transition else "",
            ))
        return entries

    def show_class_rosters(self):
        """Print one card per active room."""
        snapshot = self.snapshot
        self.display.print_header(f"CLASS ROSTERS AS OF {snapshot.projection_date}")
        for row in self.enrollment.class_breakdown(snapshot):
            self.display.print_class_roster(
                row,
                self.class_roster_entries(row.name),
                snapshot.display_settings_for(row.name),
            )

    def show_medical_alerts(self):
        report = self.medical.expiration_report(self.snapshot.students, today=self.today)
        self.display.print_expiration_report(report)
        return report

    def show_relationships(self, student_id: str) -> list:
        """Print the sibling/friend group of one student."""
        snapshot = self.snapshot
        student = snapshot.student(student_id)
        if student is None:
            self.display.print_error(f"No student with id {student_id}")
            return []
        group = RelationshipGraph.transitive_group(snapshot.students, student_id)
        classes = self.classifier.classify_roster(snapshot)
        self.display.print_relationship_group(student, group, classes)
        return group

    def import_students(self, text: str, save: bool = True) -> list:
        """Append bulk-pasted students to the snapshot and optionally save it."""
        stored = self.loader.snapshot
        new_students = self.importer.parse_lines(text)
        stored.students = stored.students + new_students
        if save:
            self.loader.save(stored)
        return new_students
