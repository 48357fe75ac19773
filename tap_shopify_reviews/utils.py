"""
Shared utilities for file I/O and logging.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from typing import Any


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure and return the package logger."""
    logger = logging.getLogger("tap_shopify_reviews")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    return logger


def load_json(filepath: str) -> Any:
    """Read and decode a UTF-8 JSON document."""
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def read_text(filepath: str) -> str:
    with open(filepath, encoding="utf-8") as f:
        return f.read()


def _target_mode(filepath: str) -> int:
    try:
        return stat.S_IMODE(os.stat(filepath).st_mode)
    except FileNotFoundError:
        pass
    # mkstemp creates files as 0600; os.umask can only be read by setting it.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text(content: str, filepath: str) -> str:
    """
    Write ``content`` to ``filepath`` in one step.

    The text goes to a temporary file in the destination directory first
    and is then moved over the target, so a failed write never leaves a
    truncated output file behind. The result gets the mode a plain
    ``open()`` would give it (0666 minus the umask), or keeps the mode of
    the file it replaces.
    """
    directory = os.path.dirname(os.path.abspath(filepath))
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".part")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp_path, _target_mode(filepath))
        os.replace(tmp_path, filepath)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    return filepath
