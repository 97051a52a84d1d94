"""Shared fixtures for the roster test suite."""

from dataclasses import replace

import pytest

from roster.models import ClassroomConfig, ClassroomRole, Student, default_classrooms


@pytest.fixture
def rooms():
    """The default facility layout (Young Infant ... Afterschool + withdrawn bucket)."""
    return default_classrooms()


@pytest.fixture
def infant_rooms():
    band = ClassroomRole.INFANT_BAND
    return [
        ClassroomConfig("Young Infant", 8, order=0, min_age=0, max_age=8, role=band),
        ClassroomConfig("Older Infant", 8, order=1, min_age=8, max_age=12, role=band),
    ]


@pytest.fixture
def make_student():
    def _make(student_id="s1", dob="01/01/2024", name=None, **kwargs):
        return Student(id=student_id, name=name or f"Child {student_id}", dob=dob, **kwargs)
    return _make


@pytest.fixture
def hide():
    def _hide(classrooms, *names):
        """Copy of the layout with the named rooms hidden."""
        return [replace(c, hidden=True) if c.name in names else c for c in classrooms]
    return _hide
