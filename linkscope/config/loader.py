"""Configuration loader for crawl scope rules with YAML support and environment overrides.

This module provides functionality to load ScopeConfig from YAML files
with support for environment-specific overrides.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
import logging

from pydantic import ValidationError

from ..models.rules import ScopeConfig


logger = logging.getLogger(__name__)

ENV_VAR = "LINKSCOPE_ENV"
DEFAULT_ENVIRONMENT = "production"


class ConfigLoadError(Exception):
    """Exception raised when configuration loading fails."""
    pass


def load_scope_config(
    config_path: Optional[Union[str, Path]] = None,
    environment: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> ScopeConfig:
    """Load ScopeConfig from YAML file with environment overrides.

    Args:
        config_path: Path to YAML config file. If None, uses config/scope.yaml
            in the current working directory.
        environment: Environment name for override selection. If None, uses ENV var.
        overrides: Additional configuration overrides to apply.

    Returns:
        Validated ScopeConfig instance.

    Raises:
        ConfigLoadError: If configuration loading or validation fails.

    Example:
        >>> config = load_scope_config("config/scope.yaml", environment="development")
        >>> config.allowed_hosts
        ['example.com']
    """
    if config_path is None:
        config_path = Path.cwd() / "config" / "scope.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigLoadError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Failed to parse YAML config: {e}") from e
    except IOError as e:
        raise ConfigLoadError(f"Failed to read config file: {e}") from e

    if config_data is None:
        config_data = {}

    if not isinstance(config_data, dict):
        raise ConfigLoadError("Config file must contain a YAML dictionary")

    if environment is None:
        environment = os.getenv(ENV_VAR, DEFAULT_ENVIRONMENT)

    environments = config_data.pop("environments", None) or {}
    if environment in environments:
        config_data = _deep_merge(config_data, environments[environment] or {})
        logger.info(f"Applied environment overrides for: {environment}")

    if overrides:
        config_data = _deep_merge(config_data, overrides)
        logger.debug("Applied additional configuration overrides")

    try:
        config = ScopeConfig(**config_data)
    except ValidationError as e:
        logger.error(f"Invalid scope configuration in {config_path}: {e}")
        raise ConfigLoadError(f"Failed to create ScopeConfig: {e}") from e
    except TypeError as e:
        raise ConfigLoadError(f"Failed to create ScopeConfig: {e}") from e

    logger.info(
        f"Loaded scope config from {config_path}: "
        f"{len(config.include)} include, {len(config.exclude)} exclude rules"
    )
    return config


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Lists are replaced, not concatenated.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def create_default_scope_config() -> Dict[str, Any]:
    """Create a default scope configuration dictionary.

    Returns:
        Default configuration values suitable for YAML serialization.
    """
    return {
        "allowed_hosts": ["example.com"],
        "include": [
            {"pattern": "example.com/*"},
        ],
        "exclude": [
            {"regexp": r"/(admin|login|logout)(/|$)"},
            {"pattern": "*.pdf"},
        ],
        "environments": {
            "development": {
                "allowed_hosts": ["localhost:8000"],
                "include": [
                    {"pattern": "localhost:8000/*"},
                ],
            },
            "staging": {
                "allowed_hosts": ["staging.example.com"],
                "include": [
                    {"pattern": "staging.example.com/*"},
                ],
            },
        }
    }


def save_default_config(output_path: Union[str, Path]) -> None:
    """Save default scope configuration to YAML file.

    Args:
        output_path: Path where to save the configuration file.

    Raises:
        ConfigLoadError: If file writing fails.
    """
    config_data = create_default_scope_config()

    try:
        with open(output_path, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved default scope configuration to: {output_path}")
    except IOError as e:
        raise ConfigLoadError(f"Failed to save config file: {e}") from e
