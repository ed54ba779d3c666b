"""
foldean
=======

A command-line tool that sorts a directory (your Downloads folder by default)
into category folders by file extension. Dry run unless told to apply.
"""

__version__ = "0.1.0"

from .categories import CATEGORY_EXTENSIONS, FALLBACK_CATEGORY, classify, file_extension
from .scanner import ScanEntry, scan_directory
from .planning import Move, build_plan, unique_destination, validate_plan
from .executor import apply_plan
from .errors import (
    OrganizerError,
    DirectoryResolutionError,
    DirectoryReadError,
    DirectoryCreateError,
    FileMoveError,
    FileTypeQueryError,
    PlanValidationError,
)

__all__ = [
    "CATEGORY_EXTENSIONS",
    "FALLBACK_CATEGORY",
    "classify",
    "file_extension",
    "ScanEntry",
    "scan_directory",
    "Move",
    "build_plan",
    "unique_destination",
    "validate_plan",
    "apply_plan",
    "OrganizerError",
    "DirectoryResolutionError",
    "DirectoryReadError",
    "DirectoryCreateError",
    "FileMoveError",
    "FileTypeQueryError",
    "PlanValidationError",
]
