"""Exceptions raised while computing a changelog."""

from typing import Sequence


class ChangelogError(Exception):
    """Base class for failures that abort changelog generation."""


class GitError(ChangelogError):
    """A git command could not be run or exited with an error."""

    def __init__(self, args: Sequence[str], output: str = "", returncode: int = -1):
        self.command = list(args)
        self.output = output.strip()
        self.returncode = returncode
        message = f"git {' '.join(self.command)} failed"
        if self.output:
            message = f"{message}: {self.output}"
        super().__init__(message)


class ResolutionError(ChangelogError):
    """Neither a previous tag nor the root commit could be resolved."""


class InvalidPatternError(ChangelogError):
    """An exclusion pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid exclude pattern {pattern!r}: {reason}")
