"""
Configuration module for kuromi-pageobjects.

Example usage:
    from kuromi_pageobjects.config import configure, load_options

    # Fail loudly on unsupported property shapes
    configure(strict_shapes=True)

    # Load from file with environment overrides
    options = load_options("pageobjects.config.toml")

Environment variables:
    KUROMI_PAGEOBJECTS_STRICT_SHAPES=true
    KUROMI_PAGEOBJECTS_XPATH_PREFIX=xpath=
    KUROMI_PAGEOBJECTS_WAIT_TIMEOUT=5000
    KUROMI_PAGEOBJECTS_LOG_QUERIES=true
"""

from .defaults import (
    CONFIG_SECTION,
    DEFAULT_LOG_QUERIES,
    DEFAULT_STRICT_SHAPES,
    DEFAULT_WAIT_TIMEOUT,
    DEFAULT_XPATH_PREFIX,
    ENV_PREFIX,
    get_default_options,
)
from .env import ENV_MAPPINGS, get_env, get_env_key, load_env_config
from .loader import (
    configure,
    find_config_file,
    get_options,
    load_file,
    load_options,
    reset_options,
)
from .options import PageObjectOptions

__all__ = [
    "PageObjectOptions",
    # Current options
    "get_options",
    "configure",
    "reset_options",
    "load_options",
    # Loader functions
    "load_file",
    "find_config_file",
    # Environment functions
    "get_env",
    "get_env_key",
    "load_env_config",
    "ENV_MAPPINGS",
    "ENV_PREFIX",
    # Default values
    "CONFIG_SECTION",
    "DEFAULT_STRICT_SHAPES",
    "DEFAULT_XPATH_PREFIX",
    "DEFAULT_WAIT_TIMEOUT",
    "DEFAULT_LOG_QUERIES",
    "get_default_options",
]
