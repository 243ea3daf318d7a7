"""Comment classification state machine and annotation extraction.

Actionable annotations only ever live inside comments, so every line of a
scanned file is first classified against the comment syntax of its language:

    SRC_CODE     - not a comment (or outside any comment block)
    SINGLE       - single-line comment, e.g. ``// ...`` or ``# ...``
    MULTI_START  - opens a block comment, e.g. ``/* ...``
    MULTI_END    - closes a block comment, e.g. ``... */``

Classification is a pure transition ``classify(state, line) -> state``. The
state value is owned by a CommentScanner, one per file, and is never shared
across files.

Tie-break: a line that both opens and closes a block (``/* x */``) is
MULTI_START. Extraction therefore keeps the trailing ``*/`` in its content,
since end-stripping only happens for MULTI_END lines.
"""


from dataclasses import dataclass
from enum import Enum

from .config import CommentSyntax


class LineType(str, Enum):
    """Classification of a single source line."""

    SRC_CODE = "src-code"
    SINGLE = "single"
    MULTI_START = "multi-start"
    MULTI_END = "multi-end"

    @property
    def is_comment(self) -> bool:
        return self is not LineType.SRC_CODE


@dataclass(frozen=True)
class ClassificationState:
    """Comment state carried from one line to the next.

    Attributes:
        prefix: Delimiter currently active ("" when none)
        line_type: Classification of the most recent line
        open_block: (start, end) pair of an unclosed block comment, if any
    """

    prefix: str = ""
    line_type: LineType = LineType.SRC_CODE
    open_block: tuple[str, str] | None = None

    @property
    def in_block(self) -> bool:
        return self.open_block is not None


INITIAL_STATE = ClassificationState()


def classify(syntax: CommentSyntax, state: ClassificationState, line: str) -> ClassificationState:
    """Classify ``line`` given the state left behind by the previous line.

    Args:
        syntax: Comment rules for the file being scanned
        state: State after the previous line (INITIAL_STATE for line 1)
        line: Raw line, with or without its terminator

    Returns:
        The new state. When the line continues the current comment, the
        incoming state object itself is returned.
    """
    trimmed = line.strip()

    if state.open_block is not None:
        _, end = state.open_block
        if trimmed.endswith(end):
            return ClassificationState(prefix=end, line_type=LineType.MULTI_END)
        return state

    # Only a single-line run continues on its prefix. A closed block must be
    # re-classified so the next delimiter can open a new one.
    if state.line_type is LineType.SINGLE and (
        trimmed.startswith(state.prefix) or trimmed.endswith(state.prefix)
    ):
        return state

    for prefix in syntax.single_line:
        if trimmed.startswith(prefix):
            return ClassificationState(prefix=prefix, line_type=LineType.SINGLE)

    for start, end in syntax.block_pairs:
        if trimmed.startswith(start):
            # Closed on the same line only if the delimiters don't overlap
            closes = len(trimmed) >= len(start) + len(end) and trimmed.endswith(end)
            return ClassificationState(
                prefix=start,
                line_type=LineType.MULTI_START,
                open_block=None if closes else (start, end),
            )
        if trimmed.endswith(end):
            return ClassificationState(prefix=end, line_type=LineType.MULTI_END)

    return INITIAL_STATE


def extract_comment_content(
    line: str, annotation: str, line_type: LineType, prefix: str
) -> tuple[str, bool]:
    """Pull annotation content out of a classified comment line.

    Args:
        line: The comment line
        annotation: Token to look for, e.g. "@TODO"
        line_type: Classification of ``line``
        prefix: Active delimiter for ``line``

    Returns:
        (content, found). When the annotation is present, content is every
        field after it and found is True. Otherwise content is every field
        after the last occurrence of ``prefix`` (the whole line if the prefix
        never appears) and found is False.
    """
    fields = line.split()
    if not fields:
        return "", False

    if line_type is LineType.MULTI_END and fields[-1] == prefix:
        fields = fields[:-1]

    start = 0
    for i, field in enumerate(fields):
        if field == prefix:
            start = i + 1
        if field == annotation:
            return " ".join(fields[i + 1:]), True

    return " ".join(fields[start:]), False


class CommentScanner:
    """Owns the classification state for one file scan."""

    def __init__(self, syntax: CommentSyntax, annotation: str):
        self.syntax = syntax
        self.annotation = annotation
        self.state = INITIAL_STATE

    def feed(self, line: str) -> tuple[ClassificationState, str, bool]:
        """Classify one line and extract its content.

        Returns:
            (state, content, found). For SRC_CODE lines content is "" and
            found is False.
        """
        self.state = classify(self.syntax, self.state, line)
        if not self.state.line_type.is_comment:
            return self.state, "", False

        content, found = extract_comment_content(
            line, self.annotation, self.state.line_type, self.state.prefix
        )
        return self.state, content, found
