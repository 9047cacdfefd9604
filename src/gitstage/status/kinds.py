"""Change classifications, their display glyphs and colors."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class ChangeKind(str, Enum):
    UNMODIFIED = "unmodified"
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"
    IGNORED = "ignored"
    UNTRACKED = "untracked"
    CONFLICTED = "conflicted"
    TYPE_CHANGED = "type_changed"
    UNREADABLE = "unreadable"

    @property
    def glyph(self) -> str:
        """One-character marker shown in front of the path."""
        return _GLYPHS[self]

    @property
    def color(self) -> str:
        """Rich color name used when rendering entries of this kind."""
        return _COLORS[self]

    @classmethod
    def from_native(cls, code: str) -> "ChangeKind":
        """Translate a git porcelain status letter. Unknown codes are UNREADABLE."""
        return _NATIVE.get(code, cls.UNREADABLE)


_GLYPHS: Dict[ChangeKind, str] = {
    ChangeKind.UNMODIFIED: " ",
    ChangeKind.ADDED: "A",
    ChangeKind.DELETED: "D",
    ChangeKind.MODIFIED: "M",
    ChangeKind.RENAMED: "R",
    ChangeKind.COPIED: "C",
    ChangeKind.IGNORED: "!",
    ChangeKind.UNTRACKED: "U",
    ChangeKind.CONFLICTED: "X",
    ChangeKind.TYPE_CHANGED: "T",
    ChangeKind.UNREADABLE: "?",
}

_COLORS: Dict[ChangeKind, str] = {
    ChangeKind.UNMODIFIED: "white",
    ChangeKind.ADDED: "bright_green",
    ChangeKind.DELETED: "red",
    ChangeKind.MODIFIED: "yellow",
    ChangeKind.RENAMED: "cyan",
    ChangeKind.COPIED: "bright_blue",
    ChangeKind.IGNORED: "grey50",
    ChangeKind.UNTRACKED: "green",
    ChangeKind.CONFLICTED: "bright_red",
    ChangeKind.TYPE_CHANGED: "magenta",
    ChangeKind.UNREADABLE: "default",
}

# `git status --porcelain=v2` letters; "?" and "!" come from the untracked
# and ignored record types, "U" from unmerged records.
_NATIVE: Dict[str, ChangeKind] = {
    ".": ChangeKind.UNMODIFIED,
    "A": ChangeKind.ADDED,
    "D": ChangeKind.DELETED,
    "M": ChangeKind.MODIFIED,
    "R": ChangeKind.RENAMED,
    "C": ChangeKind.COPIED,
    "T": ChangeKind.TYPE_CHANGED,
    "?": ChangeKind.UNTRACKED,
    "!": ChangeKind.IGNORED,
    "U": ChangeKind.CONFLICTED,
}
