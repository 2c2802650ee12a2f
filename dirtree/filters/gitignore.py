"""
Gitignore loader - parse an ignore file and decide which paths to skip

Patterns are loaded once from the ignore file at the tree root and passed
explicitly to every decision.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from dirtree.filters.matcher import SEPARATOR, match


logger = logging.getLogger(__name__)


# ============================================================
# Constants
# ============================================================

DEFAULT_IGNORE_FILENAME = ".gitignore"

COMMENT_PREFIX = "#"
NEGATION_PREFIX = "!"


# ============================================================
# Data model
# ============================================================

@dataclass(frozen=True)
class GitignoreRules:
    """
    Ordered set of ignore patterns

    Attributes:
        patterns: Patterns in file order; negations keep their ``!`` prefix
        source_file: Ignore file the patterns came from (if any)
        error: Why the file could not be loaded (if it could not)
    """
    patterns: tuple[str, ...] = ()
    source_file: Optional[Path] = None
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def __iter__(self):
        return iter(self.patterns)


# ============================================================
# Parsing
# ============================================================

def parse_patterns(lines: Iterable[str]) -> list[str]:
    """
    Turn raw ignore-file lines into patterns

    Blank lines and ``#`` comments are skipped. A single leading and a single
    trailing ``/`` are removed, so ``/build/`` becomes ``build``.
    """
    patterns: list[str] = []

    for line in lines:
        line = line.strip()

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        pattern = line.removeprefix(SEPARATOR).removesuffix(SEPARATOR)
        if not pattern:
            continue

        patterns.append(pattern)

    return patterns


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


def load_gitignore(
    root: Path,
    filename: str = DEFAULT_IGNORE_FILENAME,
) -> GitignoreRules:
    """
    Load the ignore file at the root of the tree

    A missing or unreadable file is not fatal: a warning is logged and an
    empty rule set is returned with ``error`` filled in.

    Args:
        root: Tree root directory
        filename: Name of the ignore file inside ``root``

    Returns:
        GitignoreRules object
    """
    ignore_path = root / filename

    try:
        content = _read_text(ignore_path)
    except OSError as e:
        logger.warning(f"couldn't load {filename}: {e}")
        return GitignoreRules(source_file=ignore_path, error=str(e))

    patterns = parse_patterns(content.splitlines())
    logger.debug(f"Loaded {len(patterns)} patterns from {ignore_path}")

    return GitignoreRules(patterns=tuple(patterns), source_file=ignore_path)


# ============================================================
# Decision
# ============================================================

def should_ignore(
    path: str,
    is_dir: bool,
    rules: Union[GitignoreRules, Iterable[str]],
) -> bool:
    """
    Decide whether a relative path is excluded

    Any matching negation keeps the path, no matter where it sits relative
    to the ignoring pattern.

    Args:
        path: Slash-separated path relative to the tree root
        is_dir: Whether the path is a directory
        rules: Loaded rules or a plain sequence of patterns

    Returns:
        Whether the path should be ignored
    """
    ignored = False

    for pattern in rules:
        if pattern.startswith(NEGATION_PREFIX):
            if match(path, pattern[len(NEGATION_PREFIX):], is_dir):
                return False
            continue

        if not ignored and match(path, pattern, is_dir):
            ignored = True

    return ignored
