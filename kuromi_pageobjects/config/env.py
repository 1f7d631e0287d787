"""
Environment variable support for kuromi-pageobjects configuration.

Values are read from variables named after the option with the
``KUROMI_PAGEOBJECTS_`` prefix, e.g. ``KUROMI_PAGEOBJECTS_STRICT_SHAPES=true``.
"""

import os
from typing import Any, Optional, TypeVar, Union, get_args, get_origin

from .defaults import ENV_PREFIX

T = TypeVar("T")


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a configuration key to environment variable name.

    Args:
        key: Configuration key (e.g., "strict_shapes")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "KUROMI_PAGEOBJECTS_STRICT_SHAPES")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Parse string to boolean."""
    return value.lower() in ("true", "1", "yes", "on", "enabled")


def parse_value(value: str, target_type: Any) -> Any:
    """Parse string value to target type.

    Args:
        value: String value
        target_type: Target type, ``Optional[...]`` is unwrapped

    Returns:
        Parsed value
    """
    if get_origin(target_type) is Union:
        non_none_types = [t for t in get_args(target_type) if t is not type(None)]
        if non_none_types:
            return parse_value(value, non_none_types[0])
        return value

    if target_type == bool:
        return parse_bool(value)

    if target_type == int:
        return int(value)

    if target_type == float:
        return float(value)

    return value


def get_env(
    key: str,
    default: Optional[T] = None,
    target_type: Optional[Any] = None,
    prefix: str = ENV_PREFIX,
) -> Optional[Union[T, str]]:
    """Get configuration value from environment variable.

    Args:
        key: Configuration key
        default: Default value if not set
        target_type: Target type for parsing
        prefix: Environment variable prefix

    Returns:
        Parsed value or default
    """
    value = os.environ.get(get_env_key(key, prefix))

    if value is None:
        return default

    if target_type is not None:
        return parse_value(value, target_type)

    # Infer type from default
    if default is not None:
        return parse_value(value, type(default))

    return value


# Option name -> parse type
ENV_MAPPINGS: dict[str, Any] = {
    "strict_shapes": bool,
    "xpath_prefix": str,
    "wait_timeout": Optional[float],
    "log_queries": bool,
}


def load_env_config(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load page object options from environment variables.

    Only variables that are set are returned, so the result can be merged
    over file configuration.
    """
    result: dict[str, Any] = {}

    for key, target_type in ENV_MAPPINGS.items():
        value = get_env(key, target_type=str, prefix=prefix)
        if value is None:
            continue
        if value == "" and key == "wait_timeout":
            result[key] = None
            continue
        result[key] = get_env(key, target_type=target_type, prefix=prefix)

    return result
