"""
Core Layer

Tree configuration, walk entries and the directory walker.
"""

from dirtree.core.models import (
    TreeConfig,
    TreeEntry,
    TreeWalkError,
)
from dirtree.core.walker import (
    is_hidden,
    walk_tree,
)

__all__ = [
    # models
    "TreeConfig",
    "TreeEntry",
    "TreeWalkError",
    # walker
    "is_hidden",
    "walk_tree",
]
