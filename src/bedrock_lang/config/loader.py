"""
Configuration loader with deep merge.

Precedence (lowest to highest):
1. Defaults (Pydantic schema)
2. YAML file
3. Environment variables
4. CLI arguments
"""

import os
from pathlib import Path
from typing import Any

import yaml

from .schema import LangConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two dictionaries.

    Returns:
        New dictionary. Override wins on leaf conflicts.

    Example:
        >>> deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"b": 99}, "d": 4})
        {'a': {'b': 99, 'c': 2}, 'd': 4}
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_config(config_path: Path | None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Returns:
        Configuration dictionary, or an empty dict if no path was given
        or the file is empty

    Raises:
        FileNotFoundError: If config_path does not exist
    """
    if not config_path:
        return {}

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
        return data if data else {}


def load_env_overrides() -> dict[str, Any]:
    """Load overrides from environment variables.

    Supported variables:
        BEDROCK_LANG_DIR: overrides directory
        BEDROCK_LANG_DEFAULT: overrides default_locale
        BEDROCK_LANG_STRICT: overrides strict (1/true/yes/on)
        BEDROCK_LANG_LOG_LEVEL: overrides logging.level
    """
    overrides: dict[str, Any] = {}

    if directory := os.environ.get("BEDROCK_LANG_DIR"):
        overrides["directory"] = directory

    if default_locale := os.environ.get("BEDROCK_LANG_DEFAULT"):
        overrides["default_locale"] = default_locale

    if strict := os.environ.get("BEDROCK_LANG_STRICT"):
        overrides["strict"] = strict.strip().lower() in _TRUE_VALUES

    if log_level := os.environ.get("BEDROCK_LANG_LOG_LEVEL"):
        overrides.setdefault("logging", {})["level"] = log_level.lower()

    return overrides


def apply_cli_overrides(config_dict: dict[str, Any], cli_args: dict[str, Any]) -> dict[str, Any]:
    """Apply overrides coming from CLI arguments (None values are ignored)."""
    overrides: dict[str, Any] = {}

    if cli_args.get("directory"):
        overrides["directory"] = cli_args["directory"]

    if cli_args.get("default_locale"):
        overrides["default_locale"] = cli_args["default_locale"]

    if cli_args.get("strict") is not None:
        overrides["strict"] = cli_args["strict"]

    if cli_args.get("validate_locales") is not None:
        overrides["validate_locales"] = cli_args["validate_locales"]

    if cli_args.get("log_level"):
        overrides.setdefault("logging", {})["level"] = cli_args["log_level"]

    if cli_args.get("log_file"):
        overrides.setdefault("logging", {})["file"] = cli_args["log_file"]

    return deep_merge(config_dict, overrides)


def load_config(
    config_path: Path | None = None,
    cli_args: dict[str, Any] | None = None,
) -> LangConfig:
    """Load and validate the full configuration.

    Raises:
        FileNotFoundError: If config_path does not exist
        ValidationError: If the merged configuration is invalid
    """
    cli_args = cli_args or {}

    merged = deep_merge(load_yaml_config(config_path), load_env_overrides())
    merged = apply_cli_overrides(merged, cli_args)

    return LangConfig(**merged)
