"""Centralized constants for the issue-summoner utils package."""

from pathlib import Path

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

# Primary output directory for the error log and config
OUT_DIR = Path("./.summoner")

ERROR_LOG_FILE = OUT_DIR / "error.log"
CONFIG_FILE_NAME = "config.json"

# ============================================================================
# SCAN DEFAULTS
# ============================================================================

DEFAULT_ANNOTATION = "@TODO"
DEFAULT_IGNORE_FILE = ".gitignore"
DEFAULT_ENCODING = "utf-8"

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_PREFIX = "ISSUE_SUMMONER"
