"""
Default configuration values for kuromi-pageobjects.

This module contains all default values used throughout the configuration system.
"""

from typing import Any, Optional

# Resolution defaults
DEFAULT_STRICT_SHAPES = False
DEFAULT_XPATH_PREFIX = "xpath="
DEFAULT_WAIT_TIMEOUT: Optional[float] = None
DEFAULT_LOG_QUERIES = False

# File config defaults
DEFAULT_CONFIG_FILENAME = "pageobjects.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/kuromi-pageobjects",
]
CONFIG_SECTION = "pageobjects"

# Environment variable prefix
ENV_PREFIX = "KUROMI_PAGEOBJECTS_"


def get_default_options() -> dict[str, Any]:
    """Get default page object options as a dictionary."""
    return {
        "strict_shapes": DEFAULT_STRICT_SHAPES,
        "xpath_prefix": DEFAULT_XPATH_PREFIX,
        "wait_timeout": DEFAULT_WAIT_TIMEOUT,
        "log_queries": DEFAULT_LOG_QUERIES,
    }
