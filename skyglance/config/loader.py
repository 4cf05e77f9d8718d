"""YAML config loader."""

import logging
from pathlib import Path

import yaml

from skyglance.config.defaults import DEFAULT_LOCATION
from skyglance.config.schema import AppConfig
from skyglance.models.location import Location

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    if not path.exists():
        logger.info("Config %s not found, using defaults", path)
        return AppConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)


def default_location(config: AppConfig) -> Location:
    if config.default_location is None:
        return DEFAULT_LOCATION
    return config.default_location.to_location()
