"""
Reporters Layer

Renders walked entries as a tree listing.
"""

from dirtree.reporters.base import Reporter
from dirtree.reporters.text_reporter import (
    TextTreeReporter,
    format_entry,
    root_label,
)

__all__ = [
    "Reporter",
    "TextTreeReporter",
    "format_entry",
    "root_label",
]
