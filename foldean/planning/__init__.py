"""
Planning module for foldean.

Provides:
- Move planning: classify files and pick collision-free destinations
- Plan validation
"""

from .planner import Move, build_plan, split_name, unique_destination
from .validator import validate_plan

__all__ = [
    "Move",
    "build_plan",
    "split_name",
    "unique_destination",
    "validate_plan",
]
