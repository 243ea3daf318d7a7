"""Directory walking and tag assembly.

walk() drives the whole scan:

    FileOperator.list_dir -> ignore check (prune dirs / skip files)
        -> FileOperator.open -> CommentScanner per line -> TagDraft -> Tag

The scan is strictly sequential. Every file gets a fresh CommentScanner, and
only walk() appends to the result list.
"""


import os
import posixpath
from collections.abc import Iterable, Iterator, Sequence

from issue_summoner.lexer import DEFAULT_REGISTRY, CommentRegistry, CommentScanner, LineType
from issue_summoner.lexer.config import CommentSyntax
from issue_summoner.utils.logging import logger

from .exceptions import ScanError
from .fs import FileOperator, LocalFileOperator
from .ignore import IgnorePattern, is_ignored
from .models import Tag, TagDraft

# Version control metadata, pruned regardless of ignore patterns
VCS_DIR = ".git"


def _flush(draft: TagDraft | None, tags: list[Tag]) -> None:
    if draft is None:
        return
    tag = draft.finish()
    if tag.is_valid():
        tags.append(tag)
    else:
        logger.trace(f"Dropped {draft.annotation} without title at {draft.source_file}:{draft.line_number}")


def scan_lines(
    lines: Iterable[str], source_file: str, annotation: str, syntax: CommentSyntax
) -> list[Tag]:
    """Assemble tags from the lines of one file.

    The first comment line holding ``annotation`` seeds a tag whose title is
    the rest of that line. Following lines of the same comment become its
    description. A tag ends at the first code line, when its block comment
    closes, when the next annotation starts, or at end of input.
    """
    scanner = CommentScanner(syntax, annotation)
    tags: list[Tag] = []
    draft: TagDraft | None = None
    draft_type: LineType | None = None

    for line_number, raw_line in enumerate(lines, 1):
        line = raw_line.rstrip("\r\n")
        state, content, found = scanner.feed(line)

        if not state.line_type.is_comment:
            _flush(draft, tags)
            draft = None
            continue

        if found:
            _flush(draft, tags)
            draft = TagDraft(annotation, content, source_file, line_number)
            draft_type = state.line_type
        elif draft is not None:
            if draft_type is LineType.SINGLE and state.line_type is not LineType.SINGLE:
                # A different comment started, the single-line run is over
                _flush(draft, tags)
                draft = None
                continue
            draft.add_description(content)

        block_closed = state.line_type is LineType.MULTI_END or (
            state.line_type is LineType.MULTI_START and not state.in_block
        )
        if draft is not None and block_closed:
            _flush(draft, tags)
            draft = None

    _flush(draft, tags)
    return tags


def scan_file(
    path: str,
    source_file: str,
    annotation: str,
    registry: CommentRegistry = DEFAULT_REGISTRY,
    file_operator: FileOperator | None = None,
    encoding: str = "utf-8",
) -> list[Tag]:
    """Open ``path`` and return the tags it contains.

    Raises:
        OSError: The file cannot be opened or read
    """
    operator = file_operator or LocalFileOperator()
    syntax = registry.syntax_for(os.path.splitext(path)[1])
    with operator.open(path, encoding) as f:
        return scan_lines(f, source_file, annotation, syntax)


def _iter_files(
    operator: FileOperator, dirpath: str, rel_dir: str, patterns: Sequence[IgnorePattern]
) -> Iterator[tuple[str, str]]:
    """Yield (path, relative path) of every scannable file, depth-first in name order."""
    for name, is_dir in operator.list_dir(dirpath):
        rel_path = posixpath.join(rel_dir, name)
        path = os.path.join(dirpath, name)

        if is_dir:
            if name == VCS_DIR or is_ignored(rel_path, patterns, is_dir=True):
                logger.debug(f"Pruned directory {rel_path}")
                continue
            yield from _iter_files(operator, path, rel_path, patterns)
        elif is_ignored(rel_path, patterns):
            logger.debug(f"Skipped ignored file {rel_path}")
        else:
            yield path, rel_path


def walk(
    root: str,
    annotation: str,
    patterns: Sequence[IgnorePattern] = (),
    registry: CommentRegistry = DEFAULT_REGISTRY,
    file_operator: FileOperator | None = None,
    encoding: str = "utf-8",
) -> list[Tag]:
    """Scan every file under ``root`` for ``annotation`` tags.

    Entries are visited depth-first in name order, so files and
    subdirectories interleave. Directories named .git or matching an ignore
    pattern are pruned with their whole subtree. Ignored files are never
    opened.

    Args:
        root: Directory to scan
        annotation: Token to search for, e.g. "@TODO"
        patterns: Compiled ignore patterns, matched against paths relative
            to ``root``
        registry: Comment syntax lookup
        file_operator: Filesystem access (defaults to the local disk)
        encoding: Text encoding used to read files

    Returns:
        Tags in traversal order

    Raises:
        ScanError: The first I/O failure, carrying the tags found so far
    """
    operator = file_operator or LocalFileOperator()
    tags: list[Tag] = []
    files_scanned = 0
    current = root

    try:
        for path, rel_path in _iter_files(operator, root, "", patterns):
            current = path
            found = scan_file(path, rel_path, annotation, registry, operator, encoding)
            files_scanned += 1
            if found:
                logger.debug(f"{rel_path}: {len(found)} tag(s)")
            tags.extend(found)
    except OSError as e:
        failed_path = e.filename or current
        raise ScanError(str(failed_path), e.strerror or str(e), tags) from e

    logger.info(f"Scanned {files_scanned} files under {root}, found {len(tags)} {annotation} tag(s)")
    return tags
