"""
Plan execution for foldean.

Applies a plan to the filesystem, one move at a time, stopping at the first
failure. Moves that already happened stay applied.
"""

import errno
import os
import shutil
from datetime import datetime
from pathlib import Path

from tqdm import tqdm

from .errors import DirectoryCreateError, FileMoveError
from .planning import Move
from .utils import console


def _ensure_parent(dst: Path) -> bool:
    """Create the destination folder if needed. Returns True if it was created."""
    parent = dst.parent
    if parent.is_dir():
        return False
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError("Creating", parent, e) from e
    return True


def _copy_then_delete(src: Path, dst: Path) -> None:
    """Cross-device fallback. The source is only removed once the copy is complete."""
    try:
        shutil.copy2(src, dst)
    except OSError as e:
        # Drop the partial copy; the source is untouched
        try:
            if os.path.lexists(dst):
                os.unlink(dst)
        except OSError:
            pass
        raise FileMoveError("Copying", src, f"-> {dst}: {e}") from e

    try:
        os.unlink(src)
    except OSError as e:
        raise FileMoveError("Removing", src, e) from e


def move_file(src: Path, dst: Path) -> bool:
    """
    Move a single file, falling back to copy + delete across devices.

    Returns:
        True if the cross-device fallback was used.

    Raises:
        FileMoveError: If the move (or its fallback) fails.
    """
    # os.rename replaces an existing destination on POSIX
    if os.path.lexists(dst):
        raise FileMoveError("Moving", src, f"-> {dst}: destination already exists")

    try:
        os.rename(src, dst)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise FileMoveError("Moving", src, f"-> {dst}: {e}") from e
        _copy_then_delete(src, dst)
        return True
    return False


def apply_plan(root: Path, moves: list[Move], show_progress: bool = True) -> dict:
    """
    Apply the plan.

    Args:
        root: Directory being organized (used for the report).
        moves: Moves in the order they should happen.
        show_progress: Show a progress bar while moving.

    Returns:
        Execution report dict.

    Raises:
        DirectoryCreateError: If a category folder cannot be created.
        FileMoveError: If a file cannot be moved. Earlier moves are kept.
    """
    created_folders: list[str] = []
    executed_moves_count = 0
    cross_device_moves_count = 0

    console.print(f"\n[APPLY] Moving {len(moves)} files...", markup=False)

    with tqdm(total=len(moves), unit="file", disable=not show_progress) as pbar:
        for src, dst in moves:
            src, dst = Path(src), Path(dst)

            if _ensure_parent(dst):
                created_folders.append(str(dst.parent))

            if move_file(src, dst):
                cross_device_moves_count += 1
            executed_moves_count += 1
            pbar.update(1)

    if created_folders:
        console.print(f"[INFO] Created {len(created_folders)} folders", markup=False)
    if cross_device_moves_count:
        console.print(
            f"[INFO] {cross_device_moves_count} files were copied across devices",
            markup=False,
        )

    return {
        "root": str(root),
        "executed_at": datetime.now().isoformat(timespec='seconds'),
        "executed_moves_count": executed_moves_count,
        "created_folders_count": len(created_folders),
        "created_folders": created_folders,
        "cross_device_moves_count": cross_device_moves_count,
    }
