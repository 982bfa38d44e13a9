"""Configuration loading and parsing."""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union


class ConfigError(Exception):
    """Configuration-related errors."""
    pass


DEFAULT_CONFIG: Dict[str, Any] = {
    'decrypter': {
        'key': None,
    },
    'logging': {
        'level': 'INFO',
        'console': True,
        'file': None,
    },
}


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load and parse configuration file.
    
    Args:
        config_path: Path to config.yaml file. If None, searches current directory.
        
    Returns:
        Parsed configuration dictionary, with defaults for missing sections
        
    Raises:
        ConfigError: If config file cannot be loaded or parsed
    """
    # Determine config file path
    if config_path is None:
        config_path = Path.cwd() / "config.yaml"
    else:
        config_path = Path(config_path)
    
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")
    
    # Load YAML
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}")
    
    # An empty file means "all defaults"
    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigError("Configuration file must contain a YAML dictionary")
    
    return apply_defaults(config)


def apply_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fill in missing sections and keys with default values.

    User-provided values are never overwritten.

    Args:
        config: Configuration dictionary

    Returns:
        New dictionary with defaults applied
    """
    result = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in config.items():
        if isinstance(values, dict) and isinstance(result.get(section), dict):
            result[section].update(values)
        else:
            result[section] = values
    return result


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.
    
    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'logging.level')
        default: Default value if path not found
        
    Returns:
        Configuration value or default
        
    Example:
        >>> get_config_value(config, 'decrypter.key')
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    keys = path.split('.')
    value = config
    
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    
    return value
