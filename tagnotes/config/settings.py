"""Configuration management for tagnotes."""

import json
import logging
import os
from pathlib import Path
from typing import Optional, List
from pydantic import BaseModel, validator
from pydantic_settings import BaseSettings


logger = logging.getLogger(__name__)


class ChangelogFilters(BaseModel):
    """Filters applied to changelog entries."""

    exclude: List[str] = []


class ChangelogConfig(BaseModel):
    """Changelog section of the configuration."""

    filters: ChangelogFilters = ChangelogFilters()


class Config(BaseSettings):
    """Configuration settings for tagnotes."""

    repo_path: str = "."
    git_binary: str = "git"
    changelog: ChangelogConfig = ChangelogConfig()

    @validator('repo_path')
    def expand_repo_path(cls, v):
        """Expand a leading ~ in the repository path."""
        if v and v.startswith('~'):
            return str(Path(v).expanduser())
        return v

    class Config:
        env_prefix = "TAGNOTES_"
        case_sensitive = False


def load_json_config(config_path: str) -> dict:
    """Load configuration from JSON file.

    Args:
        config_path: Path to JSON configuration file

    Returns:
        Configuration dictionary
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        raise ValueError(f"Error loading config file {config_path}: {e}")


def find_config_file() -> Optional[str]:
    """Find configuration file in common locations.

    Returns:
        Path to config file or None if not found
    """
    search_paths = [
        "tagnotes.json",
        ".tagnotes.json",
        "~/.tagnotes.json",
        "~/.config/tagnotes/config.json",
    ]

    for path_str in search_paths:
        path = Path(path_str).expanduser()
        if path.exists() and path.is_file():
            return str(path)

    return None


def get_config(config_file: Optional[str] = None) -> Config:
    """Load configuration from a JSON file and environment variables.

    Args:
        config_file: Optional path to JSON config file

    Returns:
        Configuration object
    """
    config_data = {}

    json_config_path = config_file or find_config_file()
    if json_config_path:
        try:
            config_data.update(load_json_config(json_config_path))
        except ValueError as e:
            # Unreadable file: fall back to defaults and environment
            logger.warning(str(e))

    # Environment variables override JSON config
    env_config = {
        'repo_path': os.getenv('TAGNOTES_REPO_PATH'),
        'git_binary': os.getenv('TAGNOTES_GIT_BINARY'),
    }
    env_config = {k: v for k, v in env_config.items() if v is not None}
    config_data.update(env_config)

    return Config(**config_data)


def create_sample_config(path: str = "tagnotes.json") -> None:
    """Create a sample configuration file.

    Args:
        path: Path where to create the sample config file
    """
    sample_config = {
        "repo_path": ".",
        "git_binary": "git",
        "changelog": {
            "filters": {
                "exclude": ["^docs:", "^test:", "typo"],
            },
        },
    }

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(sample_config, f, indent=2)

    print(f"Sample configuration file created at: {path}")
    print("Edit the exclude patterns to match the commits you want to hide.")
