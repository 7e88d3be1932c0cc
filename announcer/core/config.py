"""
Configuration loading and management.

This module handles loading TOML configuration files and validates them
against Pydantic models for type safety and consistency.
"""

import collections.abc
from pathlib import Path
from typing import Any, Dict, Optional

import toml

from .config_models import AnnouncerConfig
from .logging import get_logger

DEFAULT_CONFIG_NAME = "announcer.toml"
LOCAL_CONFIG_NAME = "announcer.local.toml"


def deep_merge(d: Dict[str, Any], u: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively update a dictionary.
    Sub-dictionaries are merged, and other values are overwritten.

    Args:
        d: Base dictionary to update
        u: Dictionary with updates

    Returns:
        Updated dictionary
    """
    for k, v in u.items():
        if isinstance(v, collections.abc.Mapping):
            d[k] = deep_merge(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def load_config(config_path: Optional[Path] = None) -> AnnouncerConfig:
    """
    Loads configuration from TOML files and validates against Pydantic models.

    The base configuration is loaded from `announcer.toml`. If an
    `announcer.local.toml` is found in the same directory, its values are
    deeply merged into the base configuration, overriding matching settings.

    Args:
        config_path: Optional path to config file (defaults to announcer.toml)

    Returns:
        AnnouncerConfig: The validated, typed configuration.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ValidationError: If configuration doesn't match expected schema.
    """
    logger = get_logger()
    config_path = config_path or Path(DEFAULT_CONFIG_NAME)
    local_config_path = config_path.parent / LOCAL_CONFIG_NAME

    if not config_path.is_file():
        raise FileNotFoundError(
            f"Configuration file not found at: {config_path.resolve()}"
        )

    config = toml.load(config_path)

    if local_config_path.is_file():
        logger.debug(f"Loading local configuration overrides from {local_config_path.resolve()}")
        local_config = toml.load(local_config_path)
        config = deep_merge(config, local_config)

    cfg = AnnouncerConfig.model_validate(config)
    cfg.logging = cfg.logging.expand()
    return cfg
