"""
CLI Layer

Command line entry point.
"""

from dirtree.cli.app import app, main, resolve_root

__all__ = [
    "app",
    "main",
    "resolve_root",
]
