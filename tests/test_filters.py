import pytest

from tagnotes.changelog import (
    compile_patterns,
    filter_entries,
    format_changelog,
    split_entries,
    subject_of,
)
from tagnotes.errors import InvalidPatternError


ENTRIES = [
    "aaa111 feat: add X",
    "bbb222 WIP: tmp",
    "ccc333 fix: resolve WIP issue",
    "ddd444 docs: update readme",
]


def test_subject_of_strips_hash_token():
    assert subject_of("abc123 fix: resolve WIP issue") == "fix: resolve WIP issue"


def test_subject_of_keeps_original_spacing():
    assert subject_of("abc123 fix:  two  spaces ") == "fix:  two  spaces "


def test_subject_of_hash_only_entry_is_empty():
    assert subject_of("abc123") == ""


def test_empty_pattern_list_is_identity():
    assert filter_entries(ENTRIES, compile_patterns([])) == ENTRIES


def test_anchored_pattern_excludes_matching_subject():
    kept = filter_entries(ENTRIES, compile_patterns(["^WIP"]))
    assert kept == ["aaa111 feat: add X", "ccc333 fix: resolve WIP issue", "ddd444 docs: update readme"]


def test_unanchored_pattern_matches_anywhere_in_subject():
    kept = filter_entries(ENTRIES, compile_patterns(["WIP"]))
    assert kept == ["aaa111 feat: add X", "ddd444 docs: update readme"]


def test_hash_token_is_never_matched():
    assert filter_entries(["abc123 fix: resolve WIP issue"], compile_patterns(["abc123"])) == [
        "abc123 fix: resolve WIP issue"
    ]


def test_any_pattern_excludes_and_order_is_preserved():
    kept = filter_entries(ENTRIES, compile_patterns(["^docs:", "^WIP"]))
    assert kept == ["aaa111 feat: add X", "ccc333 fix: resolve WIP issue"]


def test_hash_only_entry_is_matched_as_empty_subject():
    assert filter_entries(["abc123"], compile_patterns(["^$"])) == []
    assert filter_entries(["abc123"], compile_patterns(["x"])) == ["abc123"]


@pytest.mark.parametrize("patterns", [["("], ["^WIP", "("], ["^WIP", "docs", "[unclosed"]])
def test_invalid_pattern_is_named_regardless_of_position(patterns):
    with pytest.raises(InvalidPatternError) as excinfo:
        compile_patterns(patterns)
    assert excinfo.value.pattern == patterns[-1]
    assert repr(patterns[-1]) in str(excinfo.value)


def test_split_entries_drops_trailing_newline():
    assert split_entries("aaa111 feat: add X\nbbb222 WIP: tmp\n") == ["aaa111 feat: add X", "bbb222 WIP: tmp"]


def test_split_entries_empty_log():
    assert split_entries("") == []
    assert split_entries("\n") == []


def test_format_empty_changelog():
    assert format_changelog([]) == "## Changelog\n\n"


def test_format_changelog_joins_entries():
    assert format_changelog(["a1 msg one", "b2 msg two"]) == "## Changelog\n\na1 msg one\nb2 msg two"
