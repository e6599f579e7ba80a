"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from segpath.config.models import Config

# A config file may hold segpath settings at the root or under this key,
# so they can live in a shared project YAML.
SECTION_KEY = "segpath"


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping, not {type(data).__name__}")

    section = data.get(SECTION_KEY, data)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{SECTION_KEY}' section must be a mapping, not {type(section).__name__}")
    return section


def load_config(config_path: Path | str | None) -> Config:
    """
    Load configuration from YAML file or return defaults.

    Environment variables prefixed with ``SEGPATH_`` fill in anything
    the file leaves unset.

    Args:
        config_path: Path to YAML config file, or None for defaults.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config_path doesn't exist.
        ValueError: If the YAML is invalid or not a mapping.
    """
    if config_path is None:
        return Config()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = Config(**_read_yaml(config_path))
    logger.debug(
        "Config loaded from {}: folding={} extension={}",
        config_path,
        config.folding.policy,
        config.extension.policy,
    )
    return config
