import logging
from pathlib import Path

import pytest

from dirtree.utils.logging import PACKAGE_LOGGER


def build_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files (and their parent directories) under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        path = root / rel_path
        if rel_path.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def proj(tmp_path):
    """The sample project: sources, a git dir and ignored build output."""
    return build_tree(
        tmp_path / "proj",
        {
            "src/main.go": "package main\n",
            ".git/config": "[core]\n",
            "build/out.bin": "\x00",
            ".gitignore": "build/\n",
        },
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
