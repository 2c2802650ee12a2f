"""Gitignore-style pattern matching.

Two regimes are supported:

1. Patterns without ``**`` are glob-matched against the whole relative path,
   then fall back to a suffix check and a "names a directory component"
   check. A bare ``build`` therefore matches ``build``, ``src/build`` and
   ``build/out.bin``.
2. Patterns with ``**`` are matched segment by segment, where a ``**``
   segment stands for zero or more path segments.
"""

import re
from functools import lru_cache
from typing import Optional


# ============================================================
# Constants
# ============================================================

SEPARATOR = "/"

# Segment that matches zero or more whole path segments
RECURSIVE_WILDCARD = "**"


# ============================================================
# Glob translation
# ============================================================

def _parse_class(pattern: str, start: int) -> tuple[Optional[str], int]:
    """
    Translate a ``[...]`` character class starting at ``pattern[start]``.

    Returns the regex fragment and the index just past the closing ``]``,
    or ``(None, start)`` when the class is malformed.
    """
    i = start + 1
    n = len(pattern)
    negated = False
    if i < n and pattern[i] in "^!":
        negated = True
        i += 1

    items: list[str] = []
    while True:
        if i >= n:
            return None, start
        char = pattern[i]
        if char == "]" and items:
            i += 1
            break
        if char == "]":
            # Empty class
            return None, start

        if char == "\\":
            i += 1
            if i >= n:
                return None, start
            char = pattern[i]
        low = char
        i += 1

        if i + 1 < n and pattern[i] == "-" and pattern[i + 1] != "]":
            i += 1
            high = pattern[i]
            if high == "\\":
                i += 1
                if i >= n:
                    return None, start
                high = pattern[i]
            i += 1
            if low > high:
                return None, start
            items.append(f"{re.escape(low)}-{re.escape(high)}")
        else:
            items.append(re.escape(low))

    body = "".join(items)
    if negated:
        return f"[^{SEPARATOR}{body}]", i
    return f"(?!{SEPARATOR})[{body}]", i


@lru_cache(maxsize=512)
def compile_glob(pattern: str) -> Optional["re.Pattern[str]"]:
    """
    Compile a glob into a regex meant for ``fullmatch``.

    ``*`` matches any run of characters except ``/``, ``?`` matches one
    character except ``/``, ``[...]`` is a character class and ``\\x``
    matches ``x`` literally. Classes are negated with ``^`` or, as in
    gitignore files, with ``!``; Go's ``filepath.Match`` only knows ``^``.

    Returns:
        The compiled regex, or None for a malformed pattern
    """
    parts: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*":
            # Runs of stars collapse into one
            while i + 1 < n and pattern[i + 1] == "*":
                i += 1
            parts.append(f"[^{SEPARATOR}]*")
            i += 1
        elif char == "?":
            parts.append(f"[^{SEPARATOR}]")
            i += 1
        elif char == "\\":
            if i + 1 >= n:
                return None
            parts.append(re.escape(pattern[i + 1]))
            i += 2
        elif char == "[":
            fragment, i = _parse_class(pattern, i)
            if fragment is None:
                return None
            parts.append(fragment)
        else:
            parts.append(re.escape(char))
            i += 1

    try:
        return re.compile("".join(parts))
    except re.error:
        return None


def glob_match(pattern: str, name: str) -> bool:
    """Match ``name`` against a glob; malformed globs never match."""
    regex = compile_glob(pattern)
    if regex is None:
        return False
    return regex.fullmatch(name) is not None


# ============================================================
# Matching
# ============================================================

def _recursive_match(path_parts: list[str], pattern_parts: list[str]) -> bool:
    """
    Match path segments against pattern segments containing ``**``.

    ``table[i][j]`` holds whether ``path_parts[i:]`` matches
    ``pattern_parts[j:]``; it is filled from the end so every lookup refers
    to an already computed cell.
    """
    rows = len(path_parts)
    cols = len(pattern_parts)
    table = [[False] * (cols + 1) for _ in range(rows + 1)]

    # Path exhausted: only trailing ** segments may remain
    table[rows][cols] = True
    for j in range(cols - 1, -1, -1):
        table[rows][j] = pattern_parts[j] == RECURSIVE_WILDCARD and table[rows][j + 1]

    for i in range(rows - 1, -1, -1):
        # Pattern exhausted with path left over
        table[i][cols] = False
        for j in range(cols - 1, -1, -1):
            segment = pattern_parts[j]
            if segment == RECURSIVE_WILDCARD:
                table[i][j] = (
                    table[i + 1][j]
                    or table[i][j + 1]
                    or table[i + 1][j + 1]
                )
            else:
                table[i][j] = (
                    glob_match(segment, path_parts[i]) and table[i + 1][j + 1]
                )

    return table[0][0]


def match(path: str, pattern: str, is_dir: bool = False) -> bool:
    """
    Check whether a relative path matches a single ignore pattern.

    Args:
        path: Slash-separated path relative to the tree root
        pattern: Ignore pattern, already stripped of ``!`` and slashes
        is_dir: Whether the path is a directory (does not affect the result)

    Returns:
        Whether the path matches
    """
    if RECURSIVE_WILDCARD in pattern:
        return _recursive_match(path.split(SEPARATOR), pattern.split(SEPARATOR))

    if glob_match(pattern, path):
        return True

    # Partial path match: "build" also covers "a/build" and "build/x"
    return path.endswith(pattern) or (pattern + SEPARATOR) in path
