"""
Configuration loading

Settings come from built-in defaults, optionally overridden by a YAML file.
"""

import copy
import logging
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG = {
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
    'display': {
        'title': 'VENDING MACHINE',
    },
}

logger = logging.getLogger(__name__)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay known keys of override onto base, section by section"""
    for key, value in override.items():
        if key not in base:
            logger.debug("Ignoring unknown config key: %s", key)
            continue
        if isinstance(base[key], dict):
            if not isinstance(value, dict):
                raise ValueError(f"Config section '{key}' must be a mapping")
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration

    Args:
        config_path: Optional path to a YAML file

    Returns:
        Configuration dictionary with every default key present

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the file is not a YAML mapping or a value has the wrong type
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is None:
        return config

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return config
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a YAML mapping")

    _merge(config, data)
    _validate(config)
    logger.info("Configuration loaded from %s", config_path)
    return config


def _validate(config: Dict[str, Any]):
    level = config['logging']['level']
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"logging.level must be a log level name, got {level!r}")

    log_file = config['logging']['file']
    if log_file is not None and (not isinstance(log_file, str) or not log_file):
        raise ValueError(f"logging.file must be a path or null, got {log_file!r}")

    title = config['display']['title']
    if not isinstance(title, str) or not title.strip():
        raise ValueError(f"display.title must be non-empty text, got {title!r}")
