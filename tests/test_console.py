"""
Tests for the orchestrator and CLI against the bundled sample export.

Sample roster at 09/01/2025:
    Mia  - Young Infant
    Leo  - Preschool (peanut allergy, EpiPen)
    Ava  - Preschool, staff child, 0.5 FTE
    Noah - Younger Toddler, waitlisted
    Emma - withdrawn 06/30/2025

Run: pytest tests/test_console.py -v
"""

import json
from datetime import date

import pytest

from roster.cli import main
from roster.config import DEFAULT_SNAPSHOT_PATH
from roster.console import RosterConsole

TODAY = date(2025, 9, 1)


@pytest.fixture
def console():
    return RosterConsole(DEFAULT_SNAPSHOT_PATH, today=TODAY)


class TestRosterConsole:
    def test_dashboard_totals(self, console, capsys):
        result = console.show_dashboard()
        totals = result["totals"]
        assert totals.enrolled == 3
        assert totals.total_fte == pytest.approx(2.5)
        assert "ENROLLMENT AS OF 09/01/2025" in capsys.readouterr().out

    def test_projection_override(self, capsys):
        console = RosterConsole(DEFAULT_SNAPSHOT_PATH, projection_date="2025-06-01", today=TODAY)
        console.show_dashboard()
        assert "ENROLLMENT AS OF 06/01/2025" in capsys.readouterr().out

    def test_class_roster_entries(self, console):
        entries = console.class_roster_entries("Young Infant")
        assert len(entries) == 1
        student, age_label, transition = entries[0]
        assert student.name == "Mia Torres"
        assert age_label == "6m"
        assert transition == "11/14/2025"

    def test_unbounded_room_transition_uses_today(self, console):
        entries = console.class_roster_entries("Preschool")
        assert {e[0].name for e in entries} == {"Leo Torres", "Ava Chen"}
        assert {e[2] for e in entries} == {"08/31/2026"}

    def test_class_rosters_print(self, console, capsys):
        console.show_class_rosters()
        out = capsys.readouterr().out
        assert "Mia Torres" in out
        assert "Emma Brooks" not in out

    def test_medical_alerts(self, console, capsys):
        report = console.show_medical_alerts()
        assert [i.item_name for i in report.urgent] == ["Medical Form"]
        assert [i.item_name for i in report.upcoming] == ["EpiPen"]
        assert "MEDICAL ALERTS (2)" in capsys.readouterr().out

    def test_relationship_group(self, console, capsys):
        group = console.show_relationships("a1f4")
        assert {s.name for s in group} == {"Leo Torres", "Ava Chen"}
        assert "Preschool" in capsys.readouterr().out

    def test_unknown_student(self, console, capsys):
        assert console.show_relationships("nobody") == []
        assert "No student with id nobody" in capsys.readouterr().out

    def test_import_students_saves(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(DEFAULT_SNAPSHOT_PATH.read_text())
        console = RosterConsole(path, today=TODAY)
        added = console.import_students("New Kid, 02012025")
        assert [s.dob for s in added] == ["02/01/2025"]
        saved = json.loads(path.read_text())
        assert saved["students"][-1]["name"] == "New Kid"

    def test_import_keeps_stored_projection_date(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(DEFAULT_SNAPSHOT_PATH.read_text())
        console = RosterConsole(path, projection_date="01/15/2026", today=TODAY)
        assert console.snapshot.projection_date == "01/15/2026"
        console.import_students("New Kid, 02012025")
        assert json.loads(path.read_text())["projectionDate"] == "09/01/2025"
        assert console.loader.snapshot.projection_date == "09/01/2025"
        assert console.snapshot.students[-1].name == "New Kid"


class TestCli:
    def test_dashboard_mode(self, capsys):
        assert main([str(DEFAULT_SNAPSHOT_PATH), "--mode", "1"]) == 0
        assert "Vacancies" in capsys.readouterr().out

    def test_as_of_flag(self, capsys):
        assert main([str(DEFAULT_SNAPSHOT_PATH), "--mode", "1", "--as-of", "01/15/2026"]) == 0
        assert "ENROLLMENT AS OF 01/15/2026" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json"), "--mode", "1"]) == 1
        assert "Could not read" in capsys.readouterr().out

    def test_blank_classroom_field_loads(self, tmp_path, capsys):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"classSettings": [{"name": "Room", "minAge": ""}]}))
        assert main([str(path), "--mode", "1"]) == 0
        assert "Room" in capsys.readouterr().out

    def test_malformed_classroom_field_exits_1(self, tmp_path, capsys):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"classSettings": [{"name": "Room", "minAge": "six"}]}))
        assert main([str(path), "--mode", "1"]) == 1
        assert "Could not read" in capsys.readouterr().out

    def test_import_from_missing_file(self, tmp_path, monkeypatch, capsys):
        missing = tmp_path / "kids.txt"
        monkeypatch.setattr("builtins.input", lambda prompt="": str(missing))
        assert main([str(DEFAULT_SNAPSHOT_PATH), "--mode", "5"]) == 0
        assert f"Could not read {missing}" in capsys.readouterr().out
