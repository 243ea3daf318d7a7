"""Centralized error handler for issue-summoner commands."""

import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click

from issue_summoner.utils.logging import logger

from .constants import ERROR_LOG_FILE, OUT_DIR


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs command failures and re-raises them for click."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            OUT_DIR.mkdir(parents=True, exist_ok=True)

            error_type = type(e).__name__
            error_msg = str(e)

            logger.opt(exception=True).error(f"Command '{func.__name__}' failed: {error_msg}")

            # Persistent copy for debugging after the terminal is gone
            with open(ERROR_LOG_FILE, "a", encoding="utf-8") as f:
                f.write("\n" + "=" * 80 + "\n")
                f.write(f"[{datetime.now().isoformat()}] Error in command: {func.__name__}\n")
                f.write("=" * 80 + "\n")
                f.write(f"{error_type}: {error_msg}\n\n")
                f.write(traceback.format_exc())
                f.write("=" * 80 + "\n\n")

            raise click.ClickException(
                f"{error_type}: {error_msg}\n\nFull traceback logged to: {ERROR_LOG_FILE}"
            ) from e

    return wrapper
