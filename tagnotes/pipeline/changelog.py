"""Changelog pipeline step."""

import logging
from typing import Optional

from ..changelog import get_changelog
from ..errors import ChangelogError
from .context import Context
from .outcome import Outcome, Success, Skipped, Failed


class ChangelogPipe:
    """Generates the release notes from the commits since the last tag."""

    description = "Generating changelog"

    def __init__(self, git, logger: Optional[logging.Logger] = None):
        self.git = git
        self.logger = logger or logging.getLogger(__name__)

    def run(self, ctx: Context) -> Outcome:
        """Run the step against a release context.

        Args:
            ctx: Release context; release_notes is set on success

        Returns:
            Success, Skipped with the reason, or Failed with the error
        """
        if ctx.release_notes:
            return self._skip("release notes already provided via --release-notes")
        if ctx.snapshot:
            return self._skip("not available for snapshots")

        self.logger.info(f"{self.description} for {ctx.current_tag}")
        try:
            notes = get_changelog(self.git, ctx.current_tag, ctx.exclude)
        except ChangelogError as e:
            self.logger.error(f"Changelog generation failed: {e}")
            return Failed(e)

        ctx.release_notes = notes
        return Success()

    def _skip(self, reason: str) -> Skipped:
        self.logger.info(f"Skipping changelog: {reason}")
        return Skipped(reason)
