"""Exceptions raised by the tag scanning core.

Every failure is either fatal for the current walk (raised from here) or a
silent drop of one invalid tag. Nothing in the core retries.
"""


class SummonerError(Exception):
    """Base class for issue-summoner failures.

    Attributes:
        message: Human-readable error description
        details: Dict with extra context for debugging
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class IgnoreFileError(SummonerError):
    """Raised when an ignore file exists but cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read ignore file {path}: {reason}", {"path": path})
        self.path = path


class IgnorePatternError(SummonerError):
    """Raised when a line of an ignore file cannot be compiled."""

    def __init__(self, pattern: str, reason: str, line_number: int | None = None):
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            f"Invalid ignore pattern {pattern!r}{where}: {reason}",
            {"pattern": pattern, "line_number": line_number},
        )
        self.pattern = pattern
        self.line_number = line_number


class ScanError(SummonerError):
    """Raised when an I/O failure aborts a walk.

    A partial scan would produce a misleadingly incomplete report, so the
    walk stops at the first failure. Tags collected before it are kept on
    ``partial_tags`` for callers that want them anyway.
    """

    def __init__(self, path: str, reason: str, partial_tags: list | None = None):
        super().__init__(f"Scan aborted at {path}: {reason}", {"path": path})
        self.path = path
        self.partial_tags = partial_tags or []
