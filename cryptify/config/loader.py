"""Configuration loading and parsing."""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

DEFAULT_CONFIG_FILENAME = "cryptify.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    'output': {
        'encrypted_suffix': '.enc',
        'decrypted_prefix': 'decrypted_',
        'overwrite': False,
        'directory': None,
    },
    'processing': {
        'chunk_size': 8 * 1024 * 1024,
    },
    'logging': {
        'level': 'INFO',
        'console': True,
        'file': None,
    },
    'ui': {
        'mode': 'rich',
    },
}


class ConfigError(Exception):
    """Configuration-related errors."""
    pass


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration, falling back to built-in defaults.

    Args:
        config_path: Path to a YAML config file. If None, uses cryptify.yaml
            from the current directory when present, else the defaults.

    Returns:
        Configuration dictionary (file values merged over defaults)

    Raises:
        ConfigError: If an explicit config file is missing, or a file cannot
            be read or parsed
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if not config_path.exists():
            return copy.deepcopy(DEFAULT_CONFIG)
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}")
    except Exception as e:
        raise ConfigError(f"Failed to read config file: {e}")

    # Empty file means "all defaults"
    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigError("Configuration file must contain a YAML dictionary")

    return _merge(DEFAULT_CONFIG, config)


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'output.encrypted_suffix')
        default: Default value if path not found

    Returns:
        Configuration value or default

    Example:
        >>> get_config_value(config, 'processing.chunk_size')
        8388608
    """
    keys = path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value
