"""
Medical Alert Engine.

Finds medications and medical forms that are about to expire.
"""

import logging
from datetime import date
from typing import Optional

from ..config import URGENT_EXPIRATION_DAYS, UPCOMING_EXPIRATION_DAYS
from ..dates import DateLike, parse_date
from ..models import ExpiringItem, ExpiringItemType, ExpirationReport

logger = logging.getLogger(__name__)


def days_until(value: DateLike, today: Optional[date] = None) -> Optional[int]:
    """Whole days from today to the given date (negative once it passed)."""
    target = parse_date(value)
    if target is None:
        return None
    return (target - (today or date.today())).days


def is_expiring_soon(value: DateLike, days: int, today: Optional[date] = None) -> bool:
    """True if the date falls within the next `days` days, today included."""
    left = days_until(value, today)
    return left is not None and 0 <= left <= days


class MedicalAlertEngine:
    """
    Buckets upcoming expirations for the medical tracker.

    BUCKETS:
    --------
    - urgent:   0..7 days left
    - upcoming: 8..30 days left
    Anything already expired or further out is left out of the report.
    Unparseable expiration dates are skipped.
    """

    def __init__(self, urgent_days: int = URGENT_EXPIRATION_DAYS,
                 upcoming_days: int = UPCOMING_EXPIRATION_DAYS):
        self.urgent_days = urgent_days
        self.upcoming_days = upcoming_days

    def _bucket(self, report: ExpirationReport, item: ExpiringItem):
        if 0 <= item.days_left <= self.urgent_days:
            report.urgent.append(item)
        elif self.urgent_days < item.days_left <= self.upcoming_days:
            report.upcoming.append(item)

    def expiration_report(self, students: list, today: Optional[date] = None) -> ExpirationReport:
        """
        Collect medication and medical-form expirations for every student.

        Args:
            students: List of Student records
            today: Reference date; defaults to date.today()

        Returns:
            ExpirationReport with urgent and upcoming items in roster order
        """
        today = today or date.today()
        report = ExpirationReport()

        for s in students:
            for med in s.medications:
                left = days_until(med.expiration_date, today)
                if left is None:
                    logger.debug("Skipping medication %r of %s: no valid expiration", med.name, s.id)
                    continue
                self._bucket(report, ExpiringItem(
                    student_name=s.name,
                    student_id=s.id,
                    item_name=med.name,
                    item_type=ExpiringItemType.MEDICATION,
                    days_left=left,
                    date=med.expiration_date,
                ))

            if s.document_expiration_date:
                left = days_until(s.document_expiration_date, today)
                if left is not None:
                    self._bucket(report, ExpiringItem(
                        student_name=s.name,
                        student_id=s.id,
                        item_name="Medical Form",
                        item_type=ExpiringItemType.FORM,
                        days_left=left,
                        date=s.document_expiration_date,
                    ))

        return report
