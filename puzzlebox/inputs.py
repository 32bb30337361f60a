"""Helpers for reading puzzle input files."""

from __future__ import annotations

import os
from pathlib import Path

PathLike = str | os.PathLike[str]


def _read_text(path: PathLike) -> str:
    return Path(path).read_text(encoding="utf-8")


def read_comma_separated(path: PathLike) -> list[str]:
    """Return the comma-separated fields of a file, each stripped of whitespace."""
    return [field.strip() for field in _read_text(path).split(",")]


def read_lines(path: PathLike) -> list[str]:
    """Return the non-blank lines of a file, each stripped of whitespace."""
    stripped = (line.strip() for line in _read_text(path).splitlines())
    return [line for line in stripped if line]