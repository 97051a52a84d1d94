"""
Configuration constants for the roster system.

This module contains all configuration values and constants used throughout
the classification engines. Centralizing these makes it easy to adjust
behavior as facility policies change.
"""

import calendar
from datetime import date
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_SNAPSHOT_PATH = DATA_DIR / "roster_snapshot.json"


# =============================================================================
# SPECIAL BUCKETS
# =============================================================================

# Terminal bucket for students who aged out, graduated or were withdrawn.
# It never takes part in capacity math or age-band lookup.
WITHDRAWN_CLASS = "Graduated/Withdrawn"


# =============================================================================
# ACADEMIC CUTOFF
# =============================================================================

# Age tiers for the older rooms are computed as of this month/day, not the
# child's birthday.
DEFAULT_ACADEMIC_CUTOFF_MONTH = 8  # August
DEFAULT_ACADEMIC_CUTOFF_DAY = 31


def cutoff_date(year: int, month: int = DEFAULT_ACADEMIC_CUTOFF_MONTH,
                day: int = DEFAULT_ACADEMIC_CUTOFF_DAY) -> date:
    """
    Return the academic cutoff date falling in the given calendar year.

    A day past the end of the month (Feb 29 in a common year) is clamped
    to the month's last day.
    """
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


# =============================================================================
# AGE TIERS (whole years as of the academic cutoff)
# =============================================================================

PRESCHOOL_TIER_AGE = 3
PREK_TIER_AGE = 4
GRADUATION_AGE = 5


# =============================================================================
# DATE PARSING
# =============================================================================

# Two-digit years: 50-99 -> 1950-1999, 00-49 -> 2000-2049
TWO_DIGIT_YEAR_PIVOT = 50

# Canonical display/storage format exchanged with callers. The year is
# always four digits, so years below 1000 re-parse as themselves.
DISPLAY_DATE_FORMAT = "{d.month:02d}/{d.day:02d}/{d.year:04d}"


# =============================================================================
# MEDICAL ALERTS
# =============================================================================

# Days until expiration (inclusive) for each alert bucket
URGENT_EXPIRATION_DAYS = 7
UPCOMING_EXPIRATION_DAYS = 30
