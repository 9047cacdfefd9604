"""Git subprocess wrapper — repository discovery and checked command runs."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from loguru import logger

_TIMEOUT = 60


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


def _run_git(args: List[str], cwd: Path, timeout: int = _TIMEOUT) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    logger.debug("git {} (cwd={})", " ".join(args), cwd)
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="surrogateescape",
        )
    except (FileNotFoundError, NotADirectoryError):
        if not Path(cwd).is_dir():
            raise GitError(f"not a directory: {cwd}")
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git {args[0]} exited with {result.returncode}: {stderr}", stderr)
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def has_head(repo_root: Path) -> bool:
    """Return False on an unborn branch (no commit yet)."""
    try:
        _run_git(["rev-parse", "--verify", "--quiet", "HEAD"], cwd=repo_root)
    except GitError:
        return False
    return True
