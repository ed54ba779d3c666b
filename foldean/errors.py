"""
Error types for foldean.

Every error carries the operation that failed and the path it failed on,
so the CLI can print a single line of context and exit.
"""

from pathlib import Path


class OrganizerError(Exception):
    """Base class for all errors raised while planning or applying moves."""

    def __init__(self, operation: str, path: Path | str | None = None, cause: object = None):
        self.operation = operation
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        msg = self.operation
        if self.path is not None:
            msg = f"{msg} {self.path}"
        if self.cause is not None:
            msg = f"{msg}: {self.cause}"
        return msg


class DirectoryResolutionError(OrganizerError):
    """No target directory was given and none could be resolved."""


class DirectoryReadError(OrganizerError):
    """Listing a directory failed (missing, permission denied, ...)."""


class DirectoryCreateError(OrganizerError):
    """A destination folder could not be created."""


class FileMoveError(OrganizerError):
    """Rename failed, or the cross-device copy + delete fallback failed."""


class FileTypeQueryError(OrganizerError):
    """Could not determine whether a directory entry is a file or a directory."""


class PlanValidationError(OrganizerError):
    """A plan violates its invariants and must not be applied."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        details = "\n".join(f"  - {p}" for p in problems)
        super().__init__(f"Plan failed validation ({len(problems)} problems):\n{details}")
