"""Presentation of found files: rows, sizes and summary text."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable
from dataclasses import dataclass

_UNITS = ("bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def to_native_separators(path) -> str:
    """Return ``path`` with ``/`` replaced by the platform's separator."""
    path = os.fspath(path)
    if os.sep != "/":
        return path.replace("/", os.sep)
    return path


def format_data_size(size: int) -> str:
    """Format a byte count with binary units, two decimals above bytes."""
    power = 0 if size == 0 else int(math.log2(abs(size)) / 10)
    power = min(power, len(_UNITS) - 1)
    if power == 0:
        return f"{size} {_UNITS[0]}"
    decimals = min(2, 3 * power)
    return f"{size / 1024 ** power:.{decimals}f} {_UNITS[power]}"


def found_message(count: int) -> str:
    """Summary line shown under the result list."""
    return f"{count} file(s) found (Double click on a file to open it)"


@dataclass(frozen=True)
class FoundFile:
    """One row of search results."""

    path: str
    relative_path: str
    size: int

    @property
    def tooltip(self) -> str:
        return to_native_separators(self.path)

    @property
    def size_text(self) -> str:
        return format_data_size(self.size)

    @classmethod
    def from_path(cls, path, base_dir):
        path = os.fspath(path)
        try:
            relative = os.path.relpath(path, os.fspath(base_dir))
        except ValueError:
            relative = path
        try:
            size = os.path.getsize(path)
        except OSError:
            size = 0
        return cls(path=path, relative_path=to_native_separators(relative), size=size)


def build_rows(paths: Iterable, base_dir) -> list[FoundFile]:
    """Make a result row for every path, relative to ``base_dir``."""
    return [FoundFile.from_path(path, base_dir) for path in paths]