"""
Bulk roster import.

This module turns pasted "name, dob" lines into new Student records.
"""

import logging
import uuid

from ..dates import auto_format_date
from ..models import Student

logger = logging.getLogger(__name__)


class BulkImporter:
    """
    Parses a bulk paste of new enrollments.

    FORMAT:
    -------
    One child per line, name first, birth date second:

        Ada Lovelace, 12101815
        Grace Hopper, 12/09/1906

    The date is run through auto_format_date, so bare digits become
    MM/DD/YYYY. Blank lines are ignored; lines without a comma are skipped
    and logged. Extra fields after the date are ignored.
    """

    def __init__(self, id_factory=None):
        self.id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def parse_line(self, line: str):
        """Return a Student for one line, or None if the line is malformed."""
        parts = line.split(",")
        if len(parts) < 2:
            return None
        name = parts[0].strip()
        if not name:
            return None
        return Student(
            id=self.id_factory(),
            name=name,
            dob=auto_format_date(parts[1].strip()),
            fte=1.0,
        )

    def parse_lines(self, text: str) -> list:
        students = []
        for number, line in enumerate(text.splitlines(), 1):
            if not line.strip():
                continue
            student = self.parse_line(line)
            if student is None:
                logger.warning("Skipping import line %d: expected 'name, dob', got %r", number, line)
                continue
            students.append(student)
        return students
