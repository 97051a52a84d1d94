"""
Tests for medical expiration alerts.

Run: pytest tests/test_medical.py -v
"""

from datetime import date

import pytest

from roster.engines import MedicalAlertEngine
from roster.engines.medical import days_until, is_expiring_soon
from roster.models import Medication, ExpiringItemType

TODAY = date(2025, 9, 1)


@pytest.fixture
def students(make_student):
    meds = [
        Medication("m0", "Today", expiration_date="09/01/2025"),
        Medication("m7", "Week", expiration_date="09/08/2025"),
        Medication("m8", "Eight", expiration_date="09/09/2025"),
        Medication("m30", "Month", expiration_date="10/01/2025"),
        Medication("m31", "Later", expiration_date="10/02/2025"),
        Medication("mx", "Expired", expiration_date="08/31/2025"),
        Medication("mb", "Bad", expiration_date="whenever"),
    ]
    return [
        make_student("a", name="Ava", medications=meds),
        make_student("b", name="Ben", document_expiration_date="2025-09-05"),
        make_student("c", name="Cara"),
    ]


class TestExpirationReport:
    def test_urgent_bucket(self, students):
        report = MedicalAlertEngine().expiration_report(students, today=TODAY)
        assert [i.item_name for i in report.urgent] == ["Today", "Week", "Medical Form"]

    def test_upcoming_bucket(self, students):
        report = MedicalAlertEngine().expiration_report(students, today=TODAY)
        assert [i.item_name for i in report.upcoming] == ["Eight", "Month"]

    def test_total(self, students):
        assert MedicalAlertEngine().expiration_report(students, today=TODAY).total == 5

    def test_form_items_are_typed(self, students):
        report = MedicalAlertEngine().expiration_report(students, today=TODAY)
        form = report.urgent[-1]
        assert form.item_type == ExpiringItemType.FORM
        assert form.student_id == "b"
        assert form.days_left == 4
        assert form.date == "2025-09-05"

    def test_custom_thresholds(self, students):
        report = MedicalAlertEngine(urgent_days=0, upcoming_days=8).expiration_report(
            students, today=TODAY
        )
        assert [i.item_name for i in report.urgent] == ["Today"]
        assert [i.item_name for i in report.upcoming] == ["Week", "Eight", "Medical Form"]

    def test_no_students(self):
        assert MedicalAlertEngine().expiration_report([], today=TODAY).total == 0


class TestHelpers:
    def test_days_until(self):
        assert days_until("09/11/2025", today=TODAY) == 10
        assert days_until("08/30/2025", today=TODAY) == -2
        assert days_until("nope", today=TODAY) is None

    def test_is_expiring_soon(self):
        assert is_expiring_soon("09/08/2025", 7, today=TODAY) is True
        assert is_expiring_soon("09/09/2025", 7, today=TODAY) is False
        assert is_expiring_soon("08/31/2025", 7, today=TODAY) is False
        assert is_expiring_soon(None, 7, today=TODAY) is False
