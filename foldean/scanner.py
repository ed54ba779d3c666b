"""
Directory scanning.

Walks the target directory (optionally recursing a bounded number of levels)
and yields the regular files that are eligible for organizing.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Generator

from .errors import DirectoryReadError, FileTypeQueryError
from .categories import file_extension

# Office and LibreOffice write "~$name.docx" lock files next to open documents
LOCK_FILE_PREFIX = "~$"


@dataclass(frozen=True)
class ScanEntry:
    """A regular file found while scanning."""
    path: Path
    name: str
    extension: str


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_lock_file(name: str) -> bool:
    return name.startswith(LOCK_FILE_PREFIX)


def _list_entries(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise DirectoryReadError("Reading", directory, e) from e
    # Listing order from the OS is arbitrary; sort so plans are reproducible
    entries.sort(key=lambda entry: entry.name)
    return entries


def scan_directory(
    directory: Path,
    max_depth: int = 0,
    include_hidden: bool = False,
) -> Generator[ScanEntry, None, None]:
    """
    Yield the regular files of a directory in traversal order.

    Subdirectories are entered only while ``max_depth`` is positive, and their
    files are yielded at the position the subdirectory holds in the listing.
    Directories themselves are never yielded. Symlinks, sockets and other
    special entries are skipped.

    Args:
        directory: Directory to scan.
        max_depth: Number of subdirectory levels to descend (0 = top level only).
        include_hidden: Also yield dotfiles and descend into dot-directories.

    Raises:
        DirectoryReadError: If a directory cannot be listed.
        FileTypeQueryError: If an entry's type cannot be determined.
    """
    directory = Path(directory)

    for entry in _list_entries(directory):
        name = entry.name

        if not include_hidden and is_hidden(name):
            continue
        if is_lock_file(name):
            continue

        path = directory / name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file(follow_symlinks=False)
        except OSError as e:
            raise FileTypeQueryError("Inspecting", path, e) from e

        if is_dir:
            if max_depth > 0:
                yield from scan_directory(path, max_depth - 1, include_hidden)
            continue

        if not is_file:
            continue

        yield ScanEntry(path=path, name=name, extension=file_extension(name))
