"""Comment lexing for issue-summoner.

Classifies source lines as code or comment and extracts annotation content
from comment lines:
- CommentRegistry maps file extensions to CommentSyntax
- classify() is the per-line state transition
- CommentScanner owns that state for the duration of one file
"""

from .comment import (
    INITIAL_STATE,
    ClassificationState,
    CommentScanner,
    LineType,
    classify,
    extract_comment_content,
)
from .config import DEFAULT_REGISTRY, CommentRegistry, CommentSyntax, build_default_registry

__all__ = [
    "INITIAL_STATE",
    "ClassificationState",
    "CommentScanner",
    "LineType",
    "classify",
    "extract_comment_content",
    "DEFAULT_REGISTRY",
    "CommentRegistry",
    "CommentSyntax",
    "build_default_registry",
]
