"""Ignore-file compilation and path matching.

Parses .gitignore-style files into IgnorePattern objects. Each glob is
translated into an anchored regular expression over a POSIX path relative
to the scan root.

Matching is first-match-wins over non-negated patterns. A leading '!' is
parsed and kept on the pattern (``negated``), but it never re-includes a
path that an earlier pattern excluded.
"""


import re
from collections.abc import Iterable
from dataclasses import dataclass

from issue_summoner.utils.logging import logger

from .exceptions import IgnoreFileError, IgnorePatternError
from .fs import FileOperator, LocalFileOperator


@dataclass(frozen=True)
class IgnorePattern:
    """One compiled line of an ignore file.

    Attributes:
        raw: Pattern text as written in the file
        regex: Compiled matcher for a relative POSIX path
        dir_only: Pattern ended with '/' and only matches directories
        negated: Pattern started with '!'
    """

    raw: str
    regex: re.Pattern
    dir_only: bool = False
    negated: bool = False

    def match(self, path: str, is_dir: bool = False) -> bool:
        """Return True if ``path`` or one of its parent directories matches."""
        path = path.replace("\\", "/").strip("/")
        if not path:
            return False

        if self.regex.match(path) and (is_dir or not self.dir_only):
            return True

        parts = path.split("/")
        for i in range(1, len(parts)):
            if self.regex.match("/".join(parts[:i])):
                return True
        return False

    def __str__(self) -> str:
        return self.raw


def _translate_glob(glob: str, raw: str, line_number: int | None) -> str:
    """Translate a gitignore glob body into a regex fragment."""
    out = []
    i, n = 0, len(glob)

    while i < n:
        c = glob[i]

        if c == "*":
            j = i
            while j < n and glob[j] == "*":
                j += 1
            standalone = j - i >= 2 and (i == 0 or glob[i - 1] == "/")
            if standalone and j < n and glob[j] == "/":
                out.append("(?:.*/)?")
                i = j + 1
                continue
            if standalone and j == n:
                out.append(".*")
                i = j
                continue
            out.append("[^/]*")
            i = j
            continue

        if c == "?":
            out.append("[^/]")
        elif c == "[":
            j = i + 1
            if j < n and glob[j] in "!^":
                j += 1
            if j < n and glob[j] == "]":
                j += 1
            while j < n and glob[j] != "]":
                j += 1
            if j >= n:
                raise IgnorePatternError(raw, "unterminated character class", line_number)
            body = glob[i + 1:j].replace("\\", "\\\\")
            if body[0] in "!^":
                body = "^" + body[1:]
            out.append(f"[{body}]")
            i = j
        elif c == "\\" and i + 1 < n:
            i += 1
            out.append(re.escape(glob[i]))
        else:
            out.append(re.escape(c))
        i += 1

    return "".join(out)


def _strip_trailing_spaces(line: str) -> str:
    while line.endswith(" ") and not line.endswith("\\ "):
        line = line[:-1]
    return line


def parse_ignore_line(line: str, line_number: int | None = None) -> IgnorePattern | None:
    """Compile one ignore-file line.

    Returns:
        The compiled pattern, or None for blank lines and comments

    Raises:
        IgnorePatternError: If the glob cannot be compiled
    """
    raw = _strip_trailing_spaces(line.rstrip("\r\n"))
    if not raw.strip() or raw.startswith("#"):
        return None

    body = raw
    negated = False
    if body.startswith("!"):
        negated = True
        body = body[1:]
    elif body.startswith(("\\!", "\\#")):
        body = body[1:]

    dir_only = body.endswith("/")
    body = body.rstrip("/")
    anchored = body.startswith("/")
    body = body.lstrip("/")
    if not body:
        return None

    # Only a leading or inner slash anchors a pattern to the root
    anchored = anchored or "/" in body
    regex = _translate_glob(body, raw, line_number)
    if not anchored:
        regex = "(?:.*/)?" + regex

    try:
        compiled = re.compile(f"^{regex}$", re.DOTALL)
    except re.error as e:
        raise IgnorePatternError(raw, str(e), line_number) from e

    return IgnorePattern(raw=raw, regex=compiled, dir_only=dir_only, negated=negated)


def compile_ignore_patterns(lines: Iterable[str]) -> list[IgnorePattern]:
    """Compile every meaningful line, preserving file order."""
    patterns = []
    for line_number, line in enumerate(lines, 1):
        pattern = parse_ignore_line(line, line_number)
        if pattern is not None:
            patterns.append(pattern)
    return patterns


def compile_ignore_file(
    path: str | None,
    file_operator: FileOperator | None = None,
    encoding: str = "utf-8",
) -> list[IgnorePattern]:
    """Compile the ignore file at ``path``.

    A missing file (or no path at all) yields an empty pattern list, which
    ignores nothing.

    Raises:
        IgnoreFileError: The file exists but cannot be read
        IgnorePatternError: A line cannot be compiled
    """
    if not path:
        return []

    operator = file_operator or LocalFileOperator()
    try:
        with operator.open(path, encoding) as f:
            lines = list(f)
    except FileNotFoundError:
        logger.debug(f"No ignore file at {path}, nothing will be ignored")
        return []
    except OSError as e:
        raise IgnoreFileError(path, e.strerror or str(e)) from e

    patterns = compile_ignore_patterns(lines)
    logger.debug(f"Compiled {len(patterns)} ignore patterns from {path}")
    return patterns


def is_ignored(path: str, patterns: Iterable[IgnorePattern], is_dir: bool = False) -> bool:
    """Return True if the first applicable pattern matches ``path``."""
    for pattern in patterns:
        if pattern.negated:
            continue
        if pattern.match(path, is_dir=is_dir):
            return True
    return False
