"""Changelog generation module."""

from .generator import (
    CHANGELOG_HEADER,
    PriorTag,
    RootFallback,
    Reference,
    resolve_previous,
    fetch_log,
    split_entries,
    subject_of,
    compile_patterns,
    matches_exclude_filter,
    filter_entries,
    format_changelog,
    get_changelog,
)

__all__ = [
    "CHANGELOG_HEADER",
    "PriorTag",
    "RootFallback",
    "Reference",
    "resolve_previous",
    "fetch_log",
    "split_entries",
    "subject_of",
    "compile_patterns",
    "matches_exclude_filter",
    "filter_entries",
    "format_changelog",
    "get_changelog",
]
