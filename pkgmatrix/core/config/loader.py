"""
Configuration loader — reads build.yml into a BuildConfig.

It reads YAML, validates against the Pydantic schema, and returns
the typed build flags the resolver is called with.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from pkgmatrix.core.models.build import BuildConfig

logger = logging.getLogger(__name__)

# Default config filename
BUILD_CONFIG_FILE = "build.yml"


class ConfigError(Exception):
    """Raised when build configuration is invalid or missing."""


def find_build_file(start_dir: Path | None = None) -> Path | None:
    """Search for build.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to build.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / BUILD_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_build_config(path: Path) -> BuildConfig:
    """Load and validate build configuration.

    Args:
        path: Path to build.yml.

    Returns:
        Validated BuildConfig model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading build config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "build" key or be flat
    build_data = data.get("build") if "build" in data else data
    if build_data is None:
        build_data = {}
    if not isinstance(build_data, dict):
        raise ConfigError(f"Expected 'build' to be a mapping in {path}")

    try:
        config = BuildConfig.model_validate(build_data)
    except Exception as e:
        raise ConfigError(f"Invalid build configuration: {e}") from e

    logger.info(
        "Loaded build config (trusted_boot=%s, board=%s)",
        config.trusted_boot, config.board.value,
    )
    return config


def load_build_config_or_default(path: Path | None = None) -> BuildConfig:
    """Load build.yml if one is given or found, else the defaults."""
    if path is None:
        path = find_build_file()
    if path is None:
        logger.debug("No %s found, using defaults", BUILD_CONFIG_FILE)
        return BuildConfig()
    return load_build_config(path)
