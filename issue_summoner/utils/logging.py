"""Centralized logging configuration using Loguru.

Usage:
    from issue_summoner.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if ISSUE_SUMMONER_LOG_LEVEL=DEBUG

Environment Variables:
    ISSUE_SUMMONER_LOG_LEVEL: TRACE|DEBUG|INFO|WARNING|ERROR (default: WARNING)
    ISSUE_SUMMONER_LOG_JSON: 0|1 (default: 0, human-readable)
    ISSUE_SUMMONER_LOG_FILE: path to an NDJSON log file (optional)
"""

import json
import os
import sys
from loguru import logger

# Remove default handler
logger.remove()

_log_level = os.environ.get("ISSUE_SUMMONER_LOG_LEVEL", "WARNING").upper()
_json_mode = os.environ.get("ISSUE_SUMMONER_LOG_JSON", "0") == "1"
_log_file = os.environ.get("ISSUE_SUMMONER_LOG_FILE")


def _record_to_json(record) -> str:
    """Serialize a loguru record as one NDJSON line."""
    payload = {
        "level": record["level"].name,
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
        "module": record["name"],
    }
    payload.update(record["extra"])

    if record["exception"]:
        exc_type = record["exception"].type
        payload["err"] = {
            "type": exc_type.__name__ if exc_type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }
    return json.dumps(payload, default=str)


def json_stderr_sink(message):
    """Write records to stderr as NDJSON.

    CRITICAL: Never call logger.* inside a sink - causes infinite recursion
    """
    sys.stderr.write(_record_to_json(message.record) + "\n")
    sys.stderr.flush()


# Human-readable format (ASCII only)
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")

_console_handler_id: int | None = None


def _add_console_handler(level: str) -> int:
    if _json_mode:
        return logger.add(json_stderr_sink, level=level, colorize=False)
    return logger.add(
        sys.stderr,
        level=level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )


_console_handler_id = _add_console_handler(_log_level)

if _log_file:
    def _file_json_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_record_to_json(message.record) + "\n")

    logger.add(_file_json_sink, level="DEBUG")


def set_console_level(level: str) -> None:
    """Re-install the console handler at ``level`` (e.g. for --verbose)."""
    global _console_handler_id, _log_level

    if _console_handler_id is not None:
        try:
            logger.remove(_console_handler_id)
        except ValueError:
            pass  # Already removed

    _log_level = level.upper()
    _console_handler_id = _add_console_handler(_log_level)


__all__ = [
    "logger",
    "set_console_level",
]
