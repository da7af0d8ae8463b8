"""Git adapter module."""

from .client import GitClient

__all__ = ["GitClient"]
