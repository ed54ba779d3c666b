"""
Plan validation for foldean.

Re-checks a plan right before it is applied. The filesystem may have changed
since planning (a dry run left on screen, a download finishing), so a plan
that no longer holds is rejected as a whole instead of being half-applied.
"""

import os
from pathlib import Path

from ..errors import PlanValidationError
from .planner import Move


def validate_plan(moves: list[Move]) -> list[Move]:
    """
    Validate a plan before applying it.

    Checks for:
    - No-op moves (same source and destination)
    - Destination collisions (two sources -> same destination)
    - Destinations that already exist on disk
    - Sources that are missing or no longer regular files

    Args:
        moves: The plan produced by build_plan().

    Returns:
        The same moves, unchanged.

    Raises:
        PlanValidationError: If any check fails.
    """
    problems = []

    # Track destinations to detect collisions
    destinations: dict[Path, Path] = {}  # destination -> source

    for source, destination in moves:
        if source == destination:
            problems.append(f"No-op move: {source}")
            continue

        if destination in destinations:
            problems.append(
                f"Collision: '{destinations[destination]}' and '{source}' both target '{destination}'"
            )
            continue
        destinations[destination] = source

        if os.path.lexists(destination):
            problems.append(f"Destination already exists: {destination}")

        if not Path(source).is_file() or Path(source).is_symlink():
            problems.append(f"Source is missing or not a regular file: {source}")

    if problems:
        raise PlanValidationError(problems)

    return moves
