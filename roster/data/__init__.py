"""
Data loading and import module.

This package handles all file I/O and bulk roster parsing.
"""

from .loader import SnapshotLoader, SnapshotFormatError, snapshot_from_dict, snapshot_to_dict
from .importer import BulkImporter

__all__ = [
    "SnapshotLoader",
    "SnapshotFormatError",
    "snapshot_from_dict",
    "snapshot_to_dict",
    "BulkImporter",
]
