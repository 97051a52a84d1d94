"""
Classification and reporting engines.

This package contains all the engines that perform the core business logic
of the roster system. None of them print or touch the file system.
"""

from .cutoff import CutoffProjector
from .classification import ClassificationEngine
from .transition import TransitionProjector
from .enrollment import EnrollmentEngine
from .medical import MedicalAlertEngine
from .relationships import RelationshipGraph

__all__ = [
    "CutoffProjector",
    "ClassificationEngine",
    "TransitionProjector",
    "EnrollmentEngine",
    "MedicalAlertEngine",
    "RelationshipGraph",
]
