"""Runtime configuration for issue-summoner - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from issue_summoner.utils.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_ANNOTATION,
    DEFAULT_ENCODING,
    DEFAULT_IGNORE_FILE,
    ENV_PREFIX,
    OUT_DIR,
)
from issue_summoner.utils.logging import logger

DEFAULTS = {
    "scan": {
        "annotation": DEFAULT_ANNOTATION,
        "ignore_file": DEFAULT_IGNORE_FILE,
        "encoding": DEFAULT_ENCODING,
    },
}


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .summoner/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (ISSUE_SUMMONER_<SECTION>_<KEY>)
    2. <root>/.summoner/config.json
    3. Built-in defaults

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / OUT_DIR.name / CONFIG_FILE_NAME
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and isinstance(value, type(cfg[section][key])):
                                cfg[section][key] = value
                            else:
                                logger.warning(f"Ignoring unknown or mistyped config key {section}.{key}")
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config file from {path}: {e}")
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                cfg[section][key] = os.environ[env_var]

    return cfg
