"""Exception hierarchy shared by the repository, executor and control loop."""

from __future__ import annotations

from typing import Sequence, Tuple


class GitStageError(Exception):
    """Base class for every error the control loop reports to the user."""


class RepositoryError(GitStageError):
    """Raised when the working tree cannot be located or its status read."""


class ExecutionError(GitStageError):
    """Raised when a stage / unstage / checkout verb fails."""

    def __init__(self, verb: str, paths: Sequence[str], detail: str = "") -> None:
        self.verb = verb
        self.paths: Tuple[str, ...] = tuple(paths)
        self.detail = detail
        message = f"{verb} failed for {', '.join(self.paths)}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class FilesystemError(GitStageError):
    """Raised when discard cannot delete a file from disk."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        message = f"could not delete {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
