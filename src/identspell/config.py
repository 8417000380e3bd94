"""
Configuration File Loading

Loads linter configuration from a YAML (or JSON) file and applies
environment variable overrides. The spelling rule reads its option from
the ``requireDictionaryWords`` key, so existing ``.jscsrc`` files work
unchanged.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from identspell.errors import ConfigurationError
from identspell.options import OPTION_NAME

logger = logging.getLogger(__name__)


# Configuration file locations (checked in order)
CONFIG_SEARCH_PATHS = [
    Path(".identspell.yaml"),
    Path(".identspell.yml"),
    Path(".jscsrc"),
    Path.home() / ".identspell" / "config.yaml",
]

ENV_DICTIONARIES = "IDENTSPELL_DICTIONARIES"


def find_config(search_paths: Optional[List[Path]] = None) -> Optional[Path]:
    """Return the first existing configuration file, if any."""
    for config_path in search_paths or CONFIG_SEARCH_PATHS:
        if config_path.is_file():
            return config_path
    return None


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load linter configuration.

    Args:
        config_path: Explicit file to load. When omitted the search path is
            used, and no file at all yields an empty configuration.

    Returns:
        Configuration mapping with environment overrides applied.

    Raises:
        ConfigurationError: if an explicit file is missing, or a file is not
            valid YAML or not a mapping.
    """
    if config_path is not None and not Path(config_path).is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    path = Path(config_path) if config_path else find_config()
    config: Dict[str, Any] = {}

    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Config file {path} must be a mapping, got {type(loaded).__name__}")
        config.update(loaded)
        logger.debug("Loaded config from %s", path)

    return apply_env_overrides(config)


def apply_env_overrides(config: Dict[str, Any], environ=None) -> Dict[str, Any]:
    """Apply environment variable overrides to *config* (returns a copy)."""
    environ = os.environ if environ is None else environ
    config = dict(config)

    dictionaries = environ.get(ENV_DICTIONARIES)
    if dictionaries:
        names = [d.strip() for d in dictionaries.split(",") if d.strip()]
        option = config.get(OPTION_NAME, True)
        if option is True:
            option = {}
        # A malformed option is left alone for configure() to reject.
        if isinstance(option, dict):
            config[OPTION_NAME] = dict(option, dictionaries=names)
            logger.debug("%s overrides dictionaries: %s", ENV_DICTIONARIES, names)

    return config


def rule_option(config: Dict[str, Any]) -> Any:
    """The spelling rule's option value; absent means enabled with defaults."""
    return config.get(OPTION_NAME, True)
