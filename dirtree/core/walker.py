"""Directory walking.

Depth-first walk in lexical order. Hidden entries and entries matched by the
ignore rules are dropped, and excluded directories are never descended into.
"""

import logging
import os
from pathlib import Path
from typing import Iterator

from dirtree.core.models import TreeEntry, TreeWalkError
from dirtree.filters.gitignore import GitignoreRules, should_ignore
from dirtree.filters.matcher import SEPARATOR


logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def is_hidden(rel_path: str) -> bool:
    """Whether any segment of the relative path starts with a dot."""
    return any(part.startswith(HIDDEN_PREFIX) for part in rel_path.split(SEPARATOR))


def _list_dir(directory: Path) -> list[Path]:
    """Read a directory completely, sorted by the raw bytes of each name."""
    try:
        return sorted(directory.iterdir(), key=lambda p: os.fsencode(p.name))
    except OSError as e:
        raise TreeWalkError(directory, e) from e


def _is_real_dir(path: Path) -> bool:
    # Symlinks are listed but never followed
    try:
        return path.is_dir() and not path.is_symlink()
    except OSError as e:
        raise TreeWalkError(path, e) from e


def walk_tree(root: Path, rules: GitignoreRules) -> Iterator[TreeEntry]:
    """
    Walk ``root`` and yield every entry that should be printed.

    The walk is lazy, so entries already consumed stay consumed if a later
    directory cannot be read.

    Raises:
        TreeWalkError: A directory could not be listed
    """
    yield from _walk(root, "", rules)


def _walk(directory: Path, prefix: str, rules: GitignoreRules) -> Iterator[TreeEntry]:
    for path in _list_dir(directory):
        rel_path = f"{prefix}{path.name}"
        is_dir = _is_real_dir(path)

        if is_hidden(rel_path) or should_ignore(rel_path, is_dir, rules):
            if is_dir:
                logger.debug(f"Pruned {rel_path}{SEPARATOR}")
            continue

        yield TreeEntry(rel_path=rel_path, name=path.name, is_dir=is_dir)

        if is_dir:
            yield from _walk(path, rel_path + SEPARATOR, rules)
