"""Configuration module."""

from .settings import (
    Config,
    ChangelogConfig,
    ChangelogFilters,
    get_config,
    load_json_config,
    find_config_file,
    create_sample_config,
)

__all__ = [
    "Config",
    "ChangelogConfig",
    "ChangelogFilters",
    "get_config",
    "load_json_config",
    "find_config_file",
    "create_sample_config",
]
