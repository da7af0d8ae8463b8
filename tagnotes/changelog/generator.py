"""Changelog generation logic."""

import re
import logging
from dataclasses import dataclass
from typing import List, Sequence, Union

from ..errors import GitError, InvalidPatternError, ResolutionError


# Constants
CHANGELOG_HEADER = "## Changelog\n\n"

LOG_FORMAT_ARGS = ["log", "--pretty=oneline", "--abbrev-commit"]


@dataclass(frozen=True)
class PriorTag:
    """The nearest release tag before the one being built."""

    sha: str
    is_tag = True


@dataclass(frozen=True)
class RootFallback:
    """The repository's first commit, used when no earlier tag exists."""

    sha: str
    is_tag = False


Reference = Union[PriorTag, RootFallback]


def resolve_previous(git, tag: str) -> Reference:
    """Find the reference that bounds the changelog range for a tag.

    Args:
        git: Git client instance
        tag: Tag of the release being built

    Returns:
        PriorTag for the nearest tag reachable from the tag's parent, or
        RootFallback for the root commit when there is none

    Raises:
        ResolutionError: If the root commit cannot be resolved either
    """
    logger = logging.getLogger(__name__)

    # git would read such a tag as an option, and git refuses to create one
    if tag.startswith("-"):
        raise ResolutionError(f"invalid tag name {tag!r}")

    try:
        return PriorTag(git.clean(git.run("describe", "--tags", "--abbrev=0", f"{tag}^")))
    except GitError as e:
        logger.info(f"No tag found before {tag}, using the root commit ({e})")

    try:
        root = git.clean(git.run("rev-list", "--max-parents=0", "HEAD"))
    except GitError as e:
        raise ResolutionError(f"could not resolve a previous tag or root commit for {tag}: {e}") from e
    if not root:
        raise ResolutionError(f"repository has no commits to build a changelog for {tag}")
    return RootFallback(root)


def fetch_log(git, tag: str, previous: Reference) -> str:
    """Get the one-line commit log between a previous reference and a tag.

    Args:
        git: Git client instance
        tag: Tag of the release being built
        previous: Reference returned by resolve_previous

    Returns:
        Raw log output, newest commit first
    """
    if isinstance(previous, PriorTag):
        # Commits reachable from the tag but not from the previous tag
        return git.run(*LOG_FORMAT_ARGS, f"{previous.sha}..{tag}")
    if isinstance(previous, RootFallback):
        # The root commit is not an exclusion boundary: list history from both ends
        return git.run(*LOG_FORMAT_ARGS, previous.sha, tag)
    raise TypeError(f"unsupported reference: {previous!r}")


def split_entries(log: str) -> List[str]:
    """Split raw log output into commit entries."""
    log = log.rstrip("\n")
    if not log:
        return []
    return log.split("\n")


def subject_of(entry: str) -> str:
    """Return everything after the abbreviated hash of a log entry.

    The entry is split at its first space and the remainder keeps its
    original spacing. An entry with no space has an empty subject.
    """
    _, _, subject = entry.partition(" ")
    return subject


def compile_patterns(patterns: Sequence[str]) -> List[re.Pattern]:
    """Compile every exclusion pattern before any of them is applied.

    Raises:
        InvalidPatternError: For the first pattern that does not compile
    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e
    return compiled


def matches_exclude_filter(entry: str, patterns: Sequence[re.Pattern]) -> bool:
    """Check if an entry's subject matches any exclusion pattern."""
    subject = subject_of(entry)
    for filter_re in patterns:
        if filter_re.search(subject):
            return True
    return False


def filter_entries(entries: Sequence[str], patterns: Sequence[re.Pattern]) -> List[str]:
    """Drop entries whose subject matches any of the compiled patterns.

    Args:
        entries: Commit entries in log order
        patterns: Compiled exclusion patterns

    Returns:
        Kept entries, in their original order
    """
    return [entry for entry in entries if not matches_exclude_filter(entry, patterns)]


def format_changelog(entries: Sequence[str]) -> str:
    """Assemble the release notes text from the kept entries."""
    return CHANGELOG_HEADER + "\n".join(entries)


def get_changelog(git, tag: str, exclude: Sequence[str]) -> str:
    """Build the changelog for a tag.

    Args:
        git: Git client instance
        tag: Tag of the release being built
        exclude: Exclusion patterns, as regular expression strings

    Returns:
        Changelog text
    """
    logger = logging.getLogger(__name__)

    previous = resolve_previous(git, tag)
    logger.debug(f"Changelog range for {tag} starts at {previous}")
    entries = split_entries(fetch_log(git, tag, previous))

    patterns = compile_patterns(exclude)
    kept = filter_entries(entries, patterns)
    if len(kept) != len(entries):
        logger.info(f"Excluded {len(entries) - len(kept)} of {len(entries)} changelog entries")
    return format_changelog(kept)
