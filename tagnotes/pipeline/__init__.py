"""Release pipeline step module."""

from .context import Context
from .outcome import Outcome, Success, Skipped, Failed
from .changelog import ChangelogPipe

__all__ = [
    "Context",
    "Outcome",
    "Success",
    "Skipped",
    "Failed",
    "ChangelogPipe",
]
