"""Shared test fixtures — fake collaborators, porcelain samples, temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest
from loguru import logger

from gitstage.errors import ExecutionError, FilesystemError, RepositoryError
from gitstage.git.models import Origin, RawChange


class FakeRepository:
    """In-memory Repository that records every query."""

    def __init__(
        self,
        unstaged: Sequence[RawChange] = (),
        staged: Sequence[RawChange] = (),
    ) -> None:
        self.changes: Dict[Origin, List[RawChange]] = {
            Origin.WORKDIR_VS_INDEX: list(unstaged),
            Origin.INDEX_VS_HEAD: list(staged),
        }
        self.queries: List[Origin] = []
        self.fail = False

    def query_status(self, mode: Origin) -> List[RawChange]:
        self.queries.append(mode)
        if self.fail:
            raise RepositoryError("status unavailable")
        return list(self.changes[mode])


class FakeExecutor:
    """Executor that records calls as ``(verb, args)`` tuples."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[str, ...]]] = []
        self.fail_on: set[str] = set()

    def _record(self, verb: str, *paths: str) -> None:
        self.calls.append((verb, tuple(paths)))
        if verb in self.fail_on:
            if verb == "delete":
                raise FilesystemError(paths[0], "permission denied")
            raise ExecutionError(verb, paths, "boom")

    def add(self, paths: Sequence[str]) -> None:
        self._record("add", *paths)

    def checkout(self, path: str) -> None:
        self._record("checkout", path)

    def restore_staged(self, path: str) -> None:
        self._record("restore_staged", path)

    def reset_path(self, path: str) -> None:
        self._record("reset_path", path)

    def delete(self, path: str) -> None:
        self._record("delete", path)


def raw(new_path: str, code: str = "M", old_path: str = "") -> RawChange:
    return RawChange(old_path, new_path, code)


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def porcelain_mixed() -> str:
    """Status output with one record of every type."""
    return "\0".join([
        "1 .M N... 100644 100644 100644 abc1234 abc1234 src/app.py",
        "1 A. N... 000000 100644 100644 0000000 def5678 new file.txt",
        "1 D. N... 100644 000000 000000 abc1234 0000000 gone.txt",
        "2 R. N... 100644 100644 100644 abc1234 abc1234 R100 docs/new.md",
        "docs/old.md",
        "1 MM N... 100644 100644 100644 abc1234 def5678 both.py",
        "u UU N... 100644 100644 100644 100644 a1 b2 c3 conflict.py",
        "? notes/todo.txt",
        "",
    ])


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    (tmp_path / "tracked.txt").write_text("original\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True,
    )
    return result.stdout


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop sinks added by CLI runs so later tests never write to closed streams."""
    yield
    logger.remove()
