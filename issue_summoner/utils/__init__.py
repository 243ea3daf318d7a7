"""issue-summoner utilities package."""

from .constants import (
    DEFAULT_ANNOTATION,
    DEFAULT_ENCODING,
    DEFAULT_IGNORE_FILE,
    ERROR_LOG_FILE,
    OUT_DIR,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "DEFAULT_ANNOTATION",
    "DEFAULT_ENCODING",
    "DEFAULT_IGNORE_FILE",
    "ERROR_LOG_FILE",
    "OUT_DIR",
    "handle_exceptions",
    "ExitCodes",
    "logger",
]
