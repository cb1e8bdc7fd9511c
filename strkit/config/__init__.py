"""Configuration module for strkit.

The YAML file only feeds the command line; the helpers themselves take
plain arguments. Section accessors check value types up front so a bad
file is reported as a configuration problem instead of failing deep
inside a helper.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type, Union

import yaml

from strkit.constants import DEFAULT_MAX_TEXT_LENGTH
from strkit.digit_grouping import DigitFormat, resolve_format
from strkit.errors import InvalidInputError


DEFAULT_CONFIG_PATH = Path(__file__).parent / 'default.yaml'

_MISSING = object()


class ConfigError(ValueError):
    """Exception raised when a configuration value is missing its expected shape."""

    def __init__(self, message: str, key_path: Optional[str] = None):
        """Initialize the error.

        Args:
            message: Error description.
            key_path: Dotted path of the offending key, if applicable.
        """
        self.key_path = key_path
        super().__init__(message)


@dataclass
class TruncateSettings:
    """Settings from the 'truncate' section.

    Attributes:
        max_length: Characters kept before the ellipsis.
    """
    max_length: int = DEFAULT_MAX_TEXT_LENGTH


@dataclass
class DigitSettings:
    """Settings from the 'digits' section.

    Attributes:
        format: Grouping style used when none is given on the command line.
        separator: Text placed between digit groups.
    """
    format: DigitFormat = DigitFormat.INDIAN
    separator: str = ","


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. Uses default.yaml if not specified.

    Returns:
        Dictionary containing configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If the config file is invalid YAML.
        ConfigError: If the file holds something other than a mapping.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration must be a mapping: {path}")
    return config


def get_config_value(config: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary.
        key_path: Dot-separated path to the value (e.g., 'truncate.max_length').
        default: Default value if key is not found.

    Returns:
        The configuration value or default.
    """
    value = config

    for key in key_path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


def get_typed_value(
    config: Dict[str, Any],
    key_path: str,
    expected: Union[Type, Tuple[Type, ...]],
    default: Any,
) -> Any:
    """Get a nested value and check its type.

    An absent key gives the default. A key that is present, even with a
    null value, must hold an instance of expected. Booleans never pass
    as integers.

    Raises:
        ConfigError: If the stored value has the wrong type.
    """
    value = get_config_value(config, key_path, _MISSING)
    if value is _MISSING:
        return default

    if isinstance(value, bool) and bool not in _as_tuple(expected):
        wrong_type = True
    else:
        wrong_type = not isinstance(value, expected)

    if wrong_type:
        names = ' or '.join(t.__name__ for t in _as_tuple(expected))
        raise ConfigError(f"{key_path} should be {names}, got {value!r}", key_path)
    return value


def _as_tuple(expected: Union[Type, Tuple[Type, ...]]) -> Tuple[Type, ...]:
    return expected if isinstance(expected, tuple) else (expected,)


def get_truncate_settings(config: Dict[str, Any]) -> TruncateSettings:
    """Read and check the 'truncate' section.

    Raises:
        ConfigError: If max_length is not a non-negative integer.
    """
    max_length = get_typed_value(config, 'truncate.max_length', int, DEFAULT_MAX_TEXT_LENGTH)
    if max_length < 0:
        raise ConfigError(
            f"truncate.max_length should be non-negative, got {max_length}",
            'truncate.max_length',
        )
    return TruncateSettings(max_length=max_length)


def get_digit_settings(config: Dict[str, Any]) -> DigitSettings:
    """Read and check the 'digits' section.

    Raises:
        ConfigError: If format names no known style or separator is not a string.
    """
    fmt = get_typed_value(config, 'digits.format', str, DigitFormat.INDIAN.value)
    try:
        style = resolve_format(fmt)
    except InvalidInputError as e:
        raise ConfigError(f"digits.format: {e}", 'digits.format') from e

    separator = get_typed_value(config, 'digits.separator', str, ',')
    return DigitSettings(format=style, separator=separator)


__all__ = [
    'load_config',
    'get_config_value',
    'get_typed_value',
    'get_truncate_settings',
    'get_digit_settings',
    'ConfigError',
    'TruncateSettings',
    'DigitSettings',
    'DEFAULT_CONFIG_PATH',
]
