"""
Data models

Configuration, walk entries and the walk error type.
"""

from dataclasses import dataclass
from pathlib import Path

from dirtree.filters.gitignore import DEFAULT_IGNORE_FILENAME


@dataclass
class TreeConfig:
    """
    Tree printing configuration

    Attributes:
        root: Directory whose tree is printed
        ignore_filename: Ignore file name, looked up inside ``root``
    """
    root: Path
    ignore_filename: str = DEFAULT_IGNORE_FILENAME


@dataclass(frozen=True)
class TreeEntry:
    """
    One entry visited by the walk

    Attributes:
        rel_path: Slash-separated path relative to the root
        name: Base name of the entry
        is_dir: Whether the entry is a (non-symlinked) directory
    """
    rel_path: str
    name: str
    is_dir: bool

    @property
    def depth(self) -> int:
        """Number of separators in the relative path."""
        return self.rel_path.count("/")


class TreeWalkError(Exception):
    """Reading a directory failed during the walk"""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause.strerror or cause}")
