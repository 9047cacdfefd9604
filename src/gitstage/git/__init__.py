"""Git interface layer — adapter, status queries, mutation verbs."""

from gitstage.git.adapter import GitError, get_repo_root, has_head
from gitstage.git.executor import CommandExecutor, GitCommandExecutor
from gitstage.git.models import Origin, RawChange
from gitstage.git.repository import GitRepository, Repository, parse_porcelain_v2

__all__ = [
    "CommandExecutor",
    "GitCommandExecutor",
    "GitError",
    "GitRepository",
    "Origin",
    "RawChange",
    "Repository",
    "get_repo_root",
    "has_head",
    "parse_porcelain_v2",
]
