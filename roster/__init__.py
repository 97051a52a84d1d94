"""
Childcare Roster Package
========================

Classroom assignment and enrollment reporting for a childcare facility.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │   dates     │  │ CutoffProjector │  │   ClassificationEngine      │  │
│  │ (parsing,   │  │ (academic year  │  │ (withdrawal → override →    │  │
│  │  age math)  │  │  age tiers)     │  │  transition → age ladder)   │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌───────────────────┐ ┌──────────────────┐ ┌────────────────────────┐  │
│  │TransitionProjector│ │ EnrollmentEngine │ │ MedicalAlertEngine     │  │
│  │ (age-out dates)   │ │ (seats, FTE)     │ │ RelationshipGraph      │  │
│  └───────────────────┘ └──────────────────┘ └────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│  TerminalDisplay - formats and prints; swap without touching engines    │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     RosterConsole                                        │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

roster/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── dates.py             # Date parsing and age arithmetic
├── console.py           # RosterConsole orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── classroom.py     # ClassroomConfig, ClassroomRole
│   ├── student.py       # Student, Allergy, Medication, Relationship
│   ├── snapshot.py      # RosterSnapshot, DisplaySettings
│   └── report.py        # ClassEnrollment, EnrollmentTotals, ExpirationReport
│
├── data/                # Snapshot loading and bulk import
│   ├── loader.py        # SnapshotLoader
│   └── importer.py      # BulkImporter
│
├── engines/             # Classification and reporting engines
│   ├── cutoff.py        # CutoffProjector
│   ├── classification.py # ClassificationEngine
│   ├── transition.py    # TransitionProjector
│   ├── enrollment.py    # EnrollmentEngine
│   ├── medical.py       # MedicalAlertEngine
│   └── relationships.py # RelationshipGraph
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from roster import ClassificationEngine, ClassroomConfig, ClassroomRole, Student

    rooms = [
        ClassroomConfig("Young Infant", 8, order=0, min_age=0, max_age=8,
                        role=ClassroomRole.INFANT_BAND),
        ClassroomConfig("Older Infant", 8, order=1, min_age=8, max_age=12,
                        role=ClassroomRole.INFANT_BAND),
    ]
    engine = ClassificationEngine()
    engine.automatic_class(Student("s1", "Ada", "01/01/2024"), "06/01/2024", rooms)
    # -> "Young Infant"

Running from command line:

    python -m roster data/roster_snapshot.json --as-of 09/01/2025

"""

# Version
__version__ = "1.0.0"

# Main exports
from .console import RosterConsole
from .cli import main

# Date utilities
from .dates import (
    parse_date,
    normalize_date,
    standardize_date_display,
    auto_format_date,
    months_between,
    years_between,
    format_detailed_age,
)

# Model exports (for programmatic use)
from .models import (
    ClassroomConfig,
    ClassroomRole,
    Student,
    Relationship,
    RelationshipType,
    Allergy,
    AllergySeverity,
    Medication,
    RosterSnapshot,
    DisplaySettings,
    RosterFilter,
    ClassEnrollment,
    EnrollmentTotals,
    ExpiringItem,
    ExpiringItemType,
    ExpirationReport,
    default_classrooms,
)

# Engine exports
from .engines import (
    CutoffProjector,
    ClassificationEngine,
    TransitionProjector,
    EnrollmentEngine,
    MedicalAlertEngine,
    RelationshipGraph,
)

# Data exports
from .data import SnapshotLoader, SnapshotFormatError, BulkImporter

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    WITHDRAWN_CLASS,
    DEFAULT_ACADEMIC_CUTOFF_MONTH,
    DEFAULT_ACADEMIC_CUTOFF_DAY,
    cutoff_date,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "RosterConsole",
    "main",
    # Dates
    "parse_date",
    "normalize_date",
    "standardize_date_display",
    "auto_format_date",
    "months_between",
    "years_between",
    "format_detailed_age",
    # Models
    "ClassroomConfig",
    "ClassroomRole",
    "Student",
    "Relationship",
    "RelationshipType",
    "Allergy",
    "AllergySeverity",
    "Medication",
    "RosterSnapshot",
    "DisplaySettings",
    "RosterFilter",
    "ClassEnrollment",
    "EnrollmentTotals",
    "ExpiringItem",
    "ExpiringItemType",
    "ExpirationReport",
    "default_classrooms",
    # Engines
    "CutoffProjector",
    "ClassificationEngine",
    "TransitionProjector",
    "EnrollmentEngine",
    "MedicalAlertEngine",
    "RelationshipGraph",
    # Data
    "SnapshotLoader",
    "SnapshotFormatError",
    "BulkImporter",
    # UI
    "TerminalDisplay",
    # Config
    "WITHDRAWN_CLASS",
    "DEFAULT_ACADEMIC_CUTOFF_MONTH",
    "DEFAULT_ACADEMIC_CUTOFF_DAY",
    "cutoff_date",
]
