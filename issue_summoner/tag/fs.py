"""Filesystem access used by the scanner.

The walker and the ignore compiler only touch the filesystem through a
FileOperator, so tests can substitute an in-memory tree.
"""


import os
from typing import Protocol, TextIO

# (name, is_dir) for one directory entry
DirEntry = tuple[str, bool]


class FileOperator(Protocol):
    """Capability to open files and list directories."""

    def open(self, path: str, encoding: str = "utf-8") -> TextIO:
        """Open ``path`` for line-by-line text reading."""
        ...

    def list_dir(self, path: str) -> list[DirEntry]:
        """Return the entries of ``path`` sorted by name.

        Listing failures must raise OSError rather than being skipped.
        """
        ...


class LocalFileOperator:
    """FileOperator backed by the real filesystem."""

    def __init__(self, follow_symlinks: bool = False):
        self.follow_symlinks = follow_symlinks

    def open(self, path: str, encoding: str = "utf-8") -> TextIO:
        # Binary content must not abort a scan, only real I/O errors do
        return open(path, encoding=encoding, errors="ignore")

    def list_dir(self, path: str) -> list[DirEntry]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                if entry.is_symlink() and not self.follow_symlinks:
                    continue
                entries.append((entry.name, entry.is_dir(follow_symlinks=self.follow_symlinks)))
        return sorted(entries)
