"""Data models shared between the git layer and the status core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Origin(str, Enum):
    """Which comparison produced a change record."""

    WORKDIR_VS_INDEX = "workdir_vs_index"
    INDEX_VS_HEAD = "index_vs_head"


@dataclass(frozen=True, slots=True)
class RawChange:
    """A change record exactly as the repository reported it."""

    old_path: str
    new_path: str
    native_kind: str  # porcelain status letter, e.g. "M", "R", "?"
