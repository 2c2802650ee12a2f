"""
Text reporter - plain tree listing on a text stream
"""

import sys
from pathlib import Path
from typing import Iterable, TextIO

from dirtree.core.models import TreeEntry


# Indentation unit per depth level
INDENT = "│   "

# Glyph in front of every entry name
BRANCH = "├── "


def root_label(root: Path) -> str:
    """Name printed on the first line; ``/`` has no name so use the path."""
    return root.name or str(root)


def format_entry(entry: TreeEntry) -> str:
    return f"{INDENT * entry.depth}{BRANCH}{entry.name}"


class TextTreeReporter:
    """Plain text reporter"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, root: Path, entries: Iterable[TreeEntry]) -> int:
        """Write the root line, then one line per entry as it arrives."""
        print(root_label(root), file=self.output)

        count = 0
        for entry in entries:
            print(format_entry(entry), file=self.output)
            count += 1

        return count
