"""Ignore-pattern filtering.

Loads the root ignore file and decides which relative paths are excluded.
"""

from dirtree.filters.gitignore import (
    GitignoreRules,
    DEFAULT_IGNORE_FILENAME,
    load_gitignore,
    parse_patterns,
    should_ignore,
)
from dirtree.filters.matcher import (
    RECURSIVE_WILDCARD,
    SEPARATOR,
    glob_match,
    match,
)

__all__ = [
    # gitignore
    "GitignoreRules",
    "DEFAULT_IGNORE_FILENAME",
    "load_gitignore",
    "parse_patterns",
    "should_ignore",
    # matcher
    "RECURSIVE_WILDCARD",
    "SEPARATOR",
    "glob_match",
    "match",
]
