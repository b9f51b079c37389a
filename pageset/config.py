"""
Configuration settings for pageset
"""

import copy
import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

import dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "pagination": {
        "capacity": 10,
    },
    "render": {
        "base_url": "www.test.com/",
    },
    "logging": {
        "level": "WARNING",
        "file": None,
    },
}

CONFIG_FILE = os.path.expanduser("~/.pageset_config.json")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


def load_config(config_file: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from file or environment variables

    Args:
        config_file: Explicit JSON file to read. When omitted, the file at
            CONFIG_FILE is used if it exists.

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: If an explicit config file is missing, the file is not
            shaped like DEFAULT_CONFIG, or a value is invalid
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_file is not None:
        path = Path(config_file)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = Path(CONFIG_FILE)

    # Check for config file
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Error loading config file {path}: {e}")
        else:
            if not isinstance(file_config, dict):
                raise ConfigError(f"Config file {path} must hold a JSON object, "
                                  f"got {type(file_config).__name__}")
            _merge(config, file_config)
            for section in DEFAULT_CONFIG:
                if not isinstance(config[section], dict):
                    raise ConfigError(f"Config section '{section}' in {path} must be an object")
            logger.info(f"Loaded configuration from {path}")

    # Override with environment variables (a .env file is honoured too)
    dotenv.load_dotenv()

    if os.environ.get("PAGESET_CAPACITY"):
        raw_capacity = os.environ["PAGESET_CAPACITY"]
        try:
            config["pagination"]["capacity"] = int(raw_capacity)
        except ValueError:
            raise ConfigError(f"PAGESET_CAPACITY must be an integer, got {raw_capacity!r}")

    if os.environ.get("PAGESET_BASE_URL"):
        config["render"]["base_url"] = os.environ["PAGESET_BASE_URL"]

    if os.environ.get("PAGESET_LOG_LEVEL"):
        config["logging"]["level"] = os.environ["PAGESET_LOG_LEVEL"]

    return config
