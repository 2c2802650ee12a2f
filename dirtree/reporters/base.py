"""
Reporter interface
"""

from pathlib import Path
from typing import Iterable, Protocol

from dirtree.core.models import TreeEntry


class Reporter(Protocol):
    """Tree reporter protocol"""

    def report(self, root: Path, entries: Iterable[TreeEntry]) -> int:
        """Render the tree and return the number of entries written"""
        ...
