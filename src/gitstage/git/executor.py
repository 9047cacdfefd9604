"""Mutation backend — the git verbs behind stage, unstage and discard."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Protocol, Sequence

from loguru import logger

from gitstage.errors import ExecutionError, FilesystemError
from gitstage.git.adapter import GitError, _run_git, has_head


class CommandExecutor(Protocol):
    def add(self, paths: Sequence[str]) -> None:
        ...

    def checkout(self, path: str) -> None:
        ...

    def restore_staged(self, path: str) -> None:
        ...

    def reset_path(self, path: str) -> None:
        ...

    def delete(self, path: str) -> None:
        ...


class GitCommandExecutor:
    """Runs each verb as one git invocation rooted at *root*.

    Paths are relative to the repository root, as reported by status.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def _git(self, verb: str, args: List[str], paths: Sequence[str]) -> None:
        try:
            _run_git([*args, "--", *paths], cwd=self.root)
        except GitError as exc:
            logger.warning("{} failed for {}: {}", verb, list(paths), exc)
            raise ExecutionError(verb, paths, exc.stderr or str(exc)) from exc

    def add(self, paths: Sequence[str]) -> None:
        self._git("add", ["add"], paths)

    def checkout(self, path: str) -> None:
        """Restore *path*'s working tree content from the index."""
        self._git("checkout", ["checkout"], [path])

    def restore_staged(self, path: str) -> None:
        """Put the index entry for *path* back from HEAD, leaving the working tree alone."""
        self._git("restore_staged", ["reset", "-q", "HEAD"], [path])

    def reset_path(self, path: str) -> None:
        """Make the index entry for *path* match HEAD again."""
        if has_head(self.root):
            self._git("reset_path", ["reset", "-q", "HEAD"], [path])
        else:
            # Nothing committed yet: unstaging means dropping the index entry.
            self._git("reset_path", ["rm", "--cached", "-q"], [path])

    def delete(self, path: str) -> None:
        """Remove *path* from disk. There is no backup."""
        target = self.root / path
        logger.debug("deleting {}", target)
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as exc:
            raise FilesystemError(path, exc.strerror or str(exc)) from exc
