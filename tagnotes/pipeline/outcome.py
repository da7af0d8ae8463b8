"""Results a pipeline step reports back to the pipeline."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Success:
    """The step ran and produced its output."""


@dataclass(frozen=True)
class Skipped:
    """The step intentionally did nothing."""

    reason: str


@dataclass(frozen=True)
class Failed:
    """The step aborted; nothing was written to the context."""

    error: Exception


Outcome = Union[Success, Skipped, Failed]
