"""Searching directory trees for files by name and by content."""

from __future__ import annotations

import logging
import mimetypes
import os
import string
import sys
import threading
from collections.abc import Callable, Iterable, Iterator

logger = logging.getLogger(__name__)

_TEXTUAL_APPLICATION_TYPES = frozenset(
    {
        "application/json",
        "application/xml",
        "application/javascript",
        "application/x-javascript",
        "application/x-sh",
        "application/x-shellscript",
        "application/x-csh",
        "application/x-tex",
        "application/x-latex",
        "application/sql",
        "application/x-yaml",
        "application/yaml",
        "application/toml",
        "application/x-python",
        "application/x-perl",
        "application/x-ruby",
    }
)
_SNIFF_BYTES = 4096


class FileSearcher(threading.Thread):
    """Thread that walks a directory tree collecting entries with a given name."""

    def __init__(self, dir_path, file_name, results=None, lock=None):
        super().__init__(daemon=True)
        self.dir_path = os.fspath(dir_path)
        self.file_name = file_name
        self.results: list[str] = results if results is not None else []
        self.lock = lock if lock is not None else threading.Lock()
        self._stopped = threading.Event()

    def stop(self) -> None:
        """Ask the search to end before the next entry."""
        self._stopped.set()

    def _entries(self) -> Iterator[str]:
        for dir_path, dir_names, file_names in os.walk(self.dir_path):
            for name in dir_names + file_names:
                yield os.path.join(dir_path, name)

    def run(self) -> None:
        for path in self._entries():
            if self._stopped.is_set():
                break
            if os.path.basename(path) == self.file_name:
                with self.lock:
                    self.results.append(path)


def _sorted_entries(dir_path: str) -> list[os.DirEntry]:
    try:
        with os.scandir(dir_path) as it:
            entries = list(it)
    except OSError:
        return []
    return sorted(entries, key=lambda entry: entry.name.casefold())


def search_file(dir_path, file_name) -> list[str]:
    """Return absolute paths of regular files named ``file_name`` under ``dir_path``."""
    root = os.path.abspath(os.fspath(dir_path))
    if not os.path.isdir(root):
        return []
    found: list[str] = []
    for entry in _sorted_entries(root):
        try:
            is_file = entry.is_file()
            is_dir = entry.is_dir()
        except OSError:
            continue
        if is_file and entry.name == file_name:
            found.append(os.path.abspath(entry.path))
        elif is_dir:
            found.extend(search_file(entry.path, file_name))
    return found


def search_roots(roots: Iterable, file_name) -> list[str]:
    """Search every root on its own thread and return all matches."""
    results: list[str] = []
    lock = threading.Lock()
    searchers = [FileSearcher(root, file_name, results, lock) for root in roots]
    for searcher in searchers:
        searcher.start()
    for searcher in searchers:
        searcher.join()
        searcher.stop()
    return results


def list_drives() -> list[str]:
    """Return the root directories of the file system."""
    if sys.platform == "win32":
        drives = [f"{letter}:\\" for letter in string.ascii_uppercase]
        return [drive for drive in drives if os.path.exists(drive)]
    return ["/"]


def is_text_file(path) -> bool:
    """Tell whether a file looks like plain text and is worth searching."""
    mime_type, _ = mimetypes.guess_type(os.fspath(path))
    if mime_type is not None:
        return (
            mime_type.startswith("text/")
            or mime_type in _TEXTUAL_APPLICATION_TYPES
            or mime_type.endswith(("+xml", "+json"))
        )
    try:
        with open(path, "rb") as handle:
            head = handle.read(_SNIFF_BYTES)
    except OSError:
        return False
    if b"\x00" in head:
        return False
    try:
        head.decode("utf-8")
    except UnicodeDecodeError as exc:
        # A multi-byte sequence cut at the end of the sample is still text.
        return exc.start >= len(head) - 3
    return True


def find_files(files: Iterable, text: str, should_cancel: Callable[[], bool] | None = None) -> list:
    """Return those ``files`` holding ``text`` on some line, ignoring case."""
    cancelled = should_cancel or (lambda: False)
    needle = text.casefold()
    found = []
    for file_name in files:
        if cancelled():
            break
        if not is_text_file(file_name):
            logger.warning("Not searching binary file %s", file_name)
            continue
        try:
            with open(file_name, encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    if cancelled():
                        break
                    if needle in line.rstrip("\r\n").casefold():
                        found.append(file_name)
                        break
        except OSError:
            continue
    return found