from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Tuple, Union

import pytest

from tagnotes.errors import GitError
from tagnotes.git import GitClient


class FakeGit:
    """Answers git commands from a table instead of running git."""

    clean = staticmethod(GitClient.clean)

    def __init__(self, responses: Dict[Tuple[str, ...], Union[str, Exception]]):
        self.responses = responses
        self.calls: List[Tuple[str, ...]] = []

    def run(self, *args: str) -> str:
        self.calls.append(args)
        response = self.responses.get(args)
        if response is None:
            raise GitError(args, f"fatal: unexpected command {' '.join(args)}", 128)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture()
def fake_git():
    def build(responses):
        return FakeGit(responses)

    return build


def _git(root: Path, *args: str) -> str:
    proc = subprocess.run(
        ["git", *args],
        cwd=root,
        check=True,
        capture_output=True,
        encoding="utf-8",
        errors="replace",
    )
    return proc.stdout.strip()


class GitRepo:
    def __init__(self, root: Path):
        self.root = root

    def commit(self, message: str) -> str:
        marker = self.root / "history.txt"
        with marker.open("a", encoding="utf-8") as fh:
            fh.write(message + "\n")
        _git(self.root, "add", "history.txt")
        _git(self.root, "commit", "-m", message)
        return _git(self.root, "rev-parse", "--short", "HEAD")

    def commit_raw(self, message: bytes) -> str:
        """Commit with a message written verbatim, whatever its encoding."""
        message_file = self.root.parent / "message.txt"
        message_file.write_bytes(message)
        marker = self.root / "history.txt"
        with marker.open("ab") as fh:
            fh.write(message + b"\n")
        _git(self.root, "add", "history.txt")
        _git(self.root, "commit", "-F", str(message_file))
        return _git(self.root, "rev-parse", "--short", "HEAD")

    def config(self, key: str, value: str) -> None:
        _git(self.root, "config", key, value)

    def tag(self, name: str) -> None:
        _git(self.root, "tag", name)

    def root_commit(self) -> str:
        return _git(self.root, "rev-list", "--max-parents=0", "HEAD")


@pytest.fixture()
def git_repo(tmp_path: Path) -> GitRepo:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    root = tmp_path / "repo"
    root.mkdir()
    _git(root, "init")
    _git(root, "config", "user.name", "CI")
    _git(root, "config", "user.email", "ci@example.com")
    _git(root, "config", "commit.gpgsign", "false")
    _git(root, "config", "tag.gpgsign", "false")
    return GitRepo(root)
