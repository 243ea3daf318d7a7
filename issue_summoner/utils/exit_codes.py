"""Centralized exit codes for the issue-summoner CLI."""


class ExitCodes:
    """Standard exit codes for CLI commands."""

    SUCCESS = 0

    # click.ClickException exits with 1
    ERROR = 1

    TAGS_FOUND = 2
