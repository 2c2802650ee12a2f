"""
dirtree - print a directory tree without hidden or ignored entries
"""

__version__ = "0.1.0"
