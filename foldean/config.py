"""
Run configuration for foldean.

Options come from the command line only; categories are fixed in
categories.py and there is no configuration file.
"""

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_downloads_dir

from .errors import DirectoryResolutionError


def resolve_target_directory(explicit: Path | None = None) -> Path:
    """
    Pick the directory to organize.

    Uses ``explicit`` when given. Otherwise asks `platformdirs` for the
    user's Downloads directory, which must exist.

    Raises:
        DirectoryResolutionError: If no directory was given and the Downloads
            directory cannot be found.
    """
    if explicit is not None:
        return Path(explicit).expanduser()

    downloads = user_downloads_dir()
    if not downloads or not Path(downloads).is_dir():
        raise DirectoryResolutionError(
            "Could not resolve Downloads directory. Pass --dir explicitly."
        )
    return Path(downloads)


@dataclass
class OrganizeOptions:
    directory: Path
    apply: bool = False
    include_hidden: bool = False
    depth: int = 0

    @classmethod
    def from_args(cls, args) -> "OrganizeOptions":
        """Build options from parsed CLI arguments, resolving the target directory."""
        return cls(
            directory=resolve_target_directory(args.dir),
            apply=args.apply,
            include_hidden=args.include_hidden,
            depth=args.depth,
        )
