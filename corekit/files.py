"""Filesystem helpers."""

from __future__ import annotations

import os
import shutil


def file_exists(filename: str | os.PathLike) -> os.stat_result | None:
    """Stat the path; None when it cannot be stat'ed."""
    try:
        return os.stat(filename)
    except OSError:
        return None


def copy_file(source: str | os.PathLike, dest: str | os.PathLike) -> None:
    """Copy the contents of ``source`` into ``dest``, creating or truncating it."""
    with open(source, "rb") as reader, open(dest, "wb") as writer:
        shutil.copyfileobj(reader, writer)