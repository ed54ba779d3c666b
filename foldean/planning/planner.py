"""
Move planning for foldean.

Turns the files found by the scanner into an ordered list of
(source, destination) moves. Nothing on disk is modified here.
"""

import os
from pathlib import Path
from typing import Collection, NamedTuple

from ..categories import FALLBACK_CATEGORY, classify
from ..errors import FileTypeQueryError
from ..scanner import scan_directory


class Move(NamedTuple):
    source: Path
    destination: Path


def split_name(filename: str) -> tuple[str, str]:
    """
    Split a file name into stem and suffix (suffix keeps its dot).

    ``photo.JPG`` -> (``photo``, ``.JPG``); ``.env`` -> (``.env``, ``''``).
    """
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem:
        return filename, ""
    return stem, dot + ext


def _is_taken(candidate: Path, reserved: Collection[Path]) -> bool:
    # lexists: a dangling symlink still blocks the name
    return candidate in reserved or os.path.lexists(candidate)


def _already_in_place(candidate: Path, source: Path) -> bool:
    """
    True if ``candidate`` is the source file itself.

    Compares directory entries, not just path strings: on case-insensitive
    filesystems ``images/photo.jpg`` and ``Images/photo.jpg`` are one file.
    """
    if candidate == source:
        return True
    try:
        return os.path.samestat(os.lstat(candidate), os.lstat(source))
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as e:
        raise FileTypeQueryError("Inspecting", candidate, e) from e


def unique_destination(
    destination_dir: Path,
    filename: str,
    reserved: Collection[Path] = (),
) -> Path:
    """
    Find a free path for ``filename`` inside ``destination_dir``.

    Tries ``name.ext``, then ``name (1).ext``, ``name (2).ext`` and so on.

    Args:
        destination_dir: Folder the file will be moved into.
        filename: Original file name (case preserved).
        reserved: Paths already promised to other moves of the same plan.

    Returns:
        A path that neither exists on disk nor appears in ``reserved``.
    """
    candidate = destination_dir / filename
    if not _is_taken(candidate, reserved):
        return candidate

    stem, suffix = split_name(filename)
    counter = 1
    while True:
        candidate = destination_dir / f"{stem} ({counter}){suffix}"
        if not _is_taken(candidate, reserved):
            return candidate
        counter += 1


def build_plan(
    directory: Path,
    max_depth: int = 0,
    include_hidden: bool = False,
) -> list[Move]:
    """
    Compute the moves needed to organize a directory.

    Every file, including those found in subdirectories, is planned into a
    category folder directly under ``directory``. Files already sitting in
    their category folder are left out, so planning an organized directory
    yields an empty plan.

    Args:
        directory: Directory to organize.
        max_depth: Subdirectory levels to descend (0 = top level only).
        include_hidden: Also organize dotfiles and files in dot-directories.

    Returns:
        Moves in traversal order, with pairwise distinct destinations.

    Raises:
        DirectoryReadError: If a directory cannot be listed.
        FileTypeQueryError: If an entry's type cannot be determined.
    """
    root = Path(directory)
    moves: list[Move] = []
    allocated: set[Path] = set()

    for entry in scan_directory(root, max_depth, include_hidden):
        dest_dir = root / (classify(entry.extension) or FALLBACK_CATEGORY)

        if _already_in_place(dest_dir / entry.name, entry.path):
            continue

        destination = unique_destination(dest_dir, entry.name, reserved=allocated)
        allocated.add(destination)
        moves.append(Move(entry.path, destination))

    return moves
