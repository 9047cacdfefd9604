"""Status queries against a git working tree.

``git status --porcelain=v2 -z`` reports both comparisons at once; each
record carries an ``XY`` pair where ``X`` is index vs HEAD and ``Y`` is
working tree vs index. :class:`GitRepository` picks the column for the
requested mode.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Protocol

from loguru import logger

from gitstage.errors import RepositoryError
from gitstage.git.adapter import GitError, _run_git, get_repo_root
from gitstage.git.models import Origin, RawChange

_STATUS_ARGS = ["status", "--porcelain=v2", "-z", "--untracked-files=all"]


class Repository(Protocol):
    def query_status(self, mode: Origin) -> List[RawChange]:
        ...


def parse_porcelain_v2(output: str, mode: Origin) -> List[RawChange]:
    """Turn NUL-separated porcelain v2 records into raw changes for *mode*."""
    return list(_iter_records(output, mode))


def _iter_records(output: str, mode: Origin) -> Iterator[RawChange]:
    tokens = output.split("\0")
    column = 0 if mode is Origin.INDEX_VS_HEAD else 1
    i = 0
    while i < len(tokens):
        record = tokens[i]
        i += 1
        if not record or record.startswith("#"):
            continue
        tag = record[0]

        if tag == "1":
            # 1 XY sub mH mI mW hH hI path
            fields = record.split(" ", 8)
            code = fields[1][column]
            if code != ".":
                yield RawChange("", fields[8], code)
        elif tag == "2":
            # 2 XY sub mH mI mW hH hI Xscore path, then origPath as its own token
            fields = record.split(" ", 9)
            orig_path = tokens[i] if i < len(tokens) else ""
            i += 1
            code = fields[1][column]
            if code != ".":
                yield RawChange(orig_path, fields[9], code)
        elif tag == "u":
            # u XY sub m1 m2 m3 mW h1 h2 h3 path
            if mode is Origin.WORKDIR_VS_INDEX:
                fields = record.split(" ", 10)
                yield RawChange("", fields[10], "U")
        elif tag == "?":
            if mode is Origin.WORKDIR_VS_INDEX:
                yield RawChange("", record[2:], "?")
        elif tag == "!":
            if mode is Origin.WORKDIR_VS_INDEX:
                yield RawChange("", record[2:], "!")
        else:
            logger.warning("unrecognised porcelain record: {!r}", record)


class GitRepository:
    """Repository collaborator backed by the git CLI."""

    def __init__(self, root: Path) -> None:
        self.root = root

    @classmethod
    def discover(cls, cwd: Optional[Path] = None) -> "GitRepository":
        """Locate the repository containing *cwd*. Raises RepositoryError."""
        try:
            root = get_repo_root(cwd)
        except GitError as exc:
            raise RepositoryError(f"not inside a git repository: {exc}") from exc
        logger.debug("repository root: {}", root)
        return cls(root)

    def query_status(self, mode: Origin) -> List[RawChange]:
        try:
            output = _run_git(_STATUS_ARGS, cwd=self.root)
        except GitError as exc:
            raise RepositoryError(f"cannot read status of {self.root}: {exc}") from exc
        return parse_porcelain_v2(output, mode)
