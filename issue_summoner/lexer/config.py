"""Comment syntax registry - file extensions and their comment delimiters.

This module contains the static table that maps a file extension onto the
comment rules of its language family. The registry is built once at import
time and handed to scanners as an immutable object.

CRITICAL: This file should contain ONLY configuration constants and the
lookup object. Classification logic lives in lexer/comment.py.
"""


from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# =============================================================================
# FILE EXTENSIONS
# =============================================================================

EXT_ASM = ".asm"
EXT_BASH = ".sh"
EXT_C = ".c"
EXT_C_HEADER = ".h"
EXT_CPP = ".cpp"
EXT_CSHARP = ".cs"
EXT_GO = ".go"
EXT_HASKELL = ".hs"
EXT_HTML = ".html"
EXT_JAI = ".jai"
EXT_JAVA = ".java"
EXT_JAVASCRIPT = ".js"
EXT_JSX = ".jsx"
EXT_KOTLIN = ".kt"
EXT_LISP = ".lisp"
EXT_LUA = ".lua"
EXT_MARKDOWN = ".md"
EXT_OBJC = ".m"
EXT_OCAML = ".ml"
EXT_PHP = ".php"
EXT_PYTHON = ".py"
EXT_R = ".R"
EXT_RUBY = ".rb"
EXT_RUST = ".rs"
EXT_SCALA = ".scala"
EXT_SWIFT = ".swift"
EXT_TSX = ".tsx"
EXT_TYPESCRIPT = ".ts"
EXT_VIM = ".vim"
EXT_ZIG = ".zig"


@dataclass(frozen=True)
class CommentSyntax:
    """Comment delimiters for one language family.

    Multi-line start and end prefixes are index-aligned: ``multi_line_start[i]``
    is closed by ``multi_line_end[i]``.
    """

    single_line: tuple[str, ...] = ()
    multi_line_start: tuple[str, ...] = ()
    multi_line_end: tuple[str, ...] = ()

    def __post_init__(self):
        if len(self.multi_line_start) != len(self.multi_line_end):
            raise ValueError(
                "multi-line start and end prefixes must be paired: "
                f"{self.multi_line_start!r} vs {self.multi_line_end!r}"
            )

    @property
    def block_pairs(self) -> tuple[tuple[str, str], ...]:
        """(start, end) delimiter pairs in declaration order."""
        return tuple(zip(self.multi_line_start, self.multi_line_end))


# =============================================================================
# LANGUAGE FAMILIES
# =============================================================================

C_STYLE = CommentSyntax(
    single_line=("//",),
    multi_line_start=("/*",),
    multi_line_end=("*/",),
)

PYTHON_STYLE = CommentSyntax(
    single_line=("#",),
    multi_line_start=('"""', "'''"),
    multi_line_end=('"""', "'''"),
)

# Markdown only has HTML comments, no single-line form
MARKDOWN_STYLE = CommentSyntax(
    multi_line_start=("<!--",),
    multi_line_end=("-->",),
)

# Fallback for anything unmapped: '#' doubles as a degenerate block marker
DEFAULT_STYLE = CommentSyntax(
    single_line=("#",),
    multi_line_start=("#",),
    multi_line_end=("#",),
)

# Extensions sharing the C comment rules
C_STYLE_EXTENSIONS: frozenset[str] = frozenset({
    EXT_C,
    EXT_CPP,
    EXT_CSHARP,
    EXT_GO,
    EXT_JAVA,
    EXT_JAVASCRIPT,
    EXT_JSX,
    EXT_KOTLIN,
    EXT_OBJC,
    EXT_PHP,
    EXT_RUST,
    EXT_SCALA,
    EXT_SWIFT,
    EXT_TSX,
    EXT_TYPESCRIPT,
})


class CommentRegistry:
    """Read-only lookup from file extension to CommentSyntax."""

    def __init__(self, table: Mapping[str, CommentSyntax], default: CommentSyntax):
        self._table = MappingProxyType(dict(table))
        self._default = default

    def syntax_for(self, extension: str) -> CommentSyntax:
        """Return the syntax registered for ``extension`` (e.g. ".go").

        Unmapped extensions, including the empty string, resolve to the
        default '#' syntax.
        """
        return self._table.get(extension, self._default)

    def __contains__(self, extension: object) -> bool:
        return extension in self._table

    def __len__(self) -> int:
        return len(self._table)


def build_default_registry() -> CommentRegistry:
    """Build the registry used by the scanner unless another is supplied."""
    table: dict[str, CommentSyntax] = {ext: C_STYLE for ext in C_STYLE_EXTENSIONS}
    table[EXT_PYTHON] = PYTHON_STYLE
    table[EXT_MARKDOWN] = MARKDOWN_STYLE
    return CommentRegistry(table, DEFAULT_STYLE)


DEFAULT_REGISTRY = build_default_registry()
