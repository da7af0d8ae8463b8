"""Git client wrapper around the git command line."""

import logging
import subprocess
from typing import Optional

from ..config import Config
from ..errors import GitError


class GitClient:
    """Runs git commands against a local repository."""

    def __init__(self, repo_path: str = ".", git_binary: str = "git",
                 logger: Optional[logging.Logger] = None):
        """Initialize git client.

        Args:
            repo_path: Working directory the commands run in
            git_binary: Name or path of the git executable
            logger: Logger instance
        """
        self.repo_path = repo_path
        self.git_binary = git_binary
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: Config, logger: Optional[logging.Logger] = None) -> "GitClient":
        """Build a client from the loaded configuration."""
        return cls(config.repo_path, config.git_binary, logger)

    def run(self, *args: str) -> str:
        """Run a git command and return its standard output.

        Args:
            *args: Arguments passed to git

        Returns:
            Raw command output

        Raises:
            GitError: If git cannot be started or exits non-zero
        """
        cmd = [
            self.git_binary,
            "-c", "log.showSignature=false",
            "-c", "i18n.logOutputEncoding=UTF-8",
            *args,
        ]
        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            proc = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise GitError(args, str(e)) from e

        if proc.returncode != 0:
            raise GitError(args, proc.stderr or proc.stdout, proc.returncode)
        return proc.stdout

    @staticmethod
    def clean(output: str) -> str:
        """Reduce command output to its first line, trimmed and unquoted."""
        lines = output.strip().splitlines()
        if not lines:
            return ""
        return lines[0].replace("'", "").strip()

    def current_tag(self) -> str:
        """Return the most recent tag reachable from HEAD."""
        return self.clean(self.run("describe", "--tags", "--abbrev=0"))
