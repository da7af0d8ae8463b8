"""State shared by the steps of a release run."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Context:
    """Release run state read and written by pipeline steps.

    Attributes:
        current_tag: Tag of the release being built
        release_notes: Release description; pre-set when supplied externally
        snapshot: True for unpublished snapshot builds
        exclude: Exclusion patterns for changelog entries
    """

    current_tag: str
    release_notes: str = ""
    snapshot: bool = False
    exclude: List[str] = field(default_factory=list)
