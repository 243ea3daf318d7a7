"""Tag scanning package.

Walks a project tree, prunes it with compiled ignore patterns, and turns
annotated comments into Tag records:
- compile_ignore_file() / is_ignored() for ignore handling
- walk() for the full scan, scan_file() / scan_lines() for one file
- FileOperator to abstract the filesystem
"""

from .exceptions import IgnoreFileError, IgnorePatternError, ScanError, SummonerError
from .fs import FileOperator, LocalFileOperator
from .ignore import (
    IgnorePattern,
    compile_ignore_file,
    compile_ignore_patterns,
    is_ignored,
    parse_ignore_line,
)
from .models import Tag, TagDraft
from .walker import VCS_DIR, scan_file, scan_lines, walk

__all__ = [
    "IgnoreFileError",
    "IgnorePatternError",
    "ScanError",
    "SummonerError",
    "FileOperator",
    "LocalFileOperator",
    "IgnorePattern",
    "compile_ignore_file",
    "compile_ignore_patterns",
    "is_ignored",
    "parse_ignore_line",
    "Tag",
    "TagDraft",
    "VCS_DIR",
    "scan_file",
    "scan_lines",
    "walk",
]
