"""Actionable status entries.

Which mutations an entry supports depends on the comparison that produced
it, so each origin gets its own type:

* :class:`UnstagedEntry` (working tree vs index) can be staged or discarded.
* :class:`StagedEntry` (index vs HEAD) can only be unstaged.

Entries are immutable. A refresh builds new ones from the repository's raw
change records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from loguru import logger

from gitstage.git.executor import CommandExecutor
from gitstage.git.models import Origin, RawChange
from gitstage.status.kinds import ChangeKind

_OLD_PATH_KINDS = (ChangeKind.RENAMED, ChangeKind.COPIED)


@dataclass(frozen=True)
class StatusEntry:
    """One file change: where it came from, where it is, and what happened."""

    old_path: str
    new_path: str
    kind: ChangeKind

    origin: ClassVar[Origin]

    @classmethod
    def from_raw(cls, raw: RawChange):
        kind = ChangeKind.from_native(raw.native_kind)
        old_path = raw.old_path if kind in _OLD_PATH_KINDS else ""
        return cls(old_path=old_path, new_path=raw.new_path, kind=kind)

    def display_text(self) -> str:
        if self.kind is ChangeKind.RENAMED:
            return f"{self.kind.glyph} {self.old_path} -> {self.new_path}"
        return f"{self.kind.glyph} {self.new_path}"


@dataclass(frozen=True)
class UnstagedEntry(StatusEntry):
    """A working tree change that is not in the index yet."""

    origin: ClassVar[Origin] = Origin.WORKDIR_VS_INDEX

    def stage_to_index(self, executor: CommandExecutor) -> None:
        """Add the change to the index.

        A rename shows up as delete-old + add-new, so both paths are staged.
        """
        if self.kind is ChangeKind.RENAMED:
            paths = [self.old_path, self.new_path]
        else:
            paths = [self.new_path]
        logger.debug("staging {}", paths)
        executor.add(paths)

    def reset_from_workdir(self, executor: CommandExecutor) -> None:
        """Throw the working tree change away.

        Untracked files are deleted outright. For a rename the new file is
        deleted first and the old one restored afterwards; if the second step
        fails neither file is left in place.
        """
        logger.debug("discarding {} ({})", self.new_path, self.kind.value)
        if self.kind is ChangeKind.UNTRACKED:
            executor.delete(self.new_path)
        elif self.kind is ChangeKind.RENAMED:
            executor.delete(self.new_path)
            executor.checkout(self.old_path)
        else:
            executor.checkout(self.new_path)


@dataclass(frozen=True)
class StagedEntry(StatusEntry):
    """A change recorded in the index but not yet committed."""

    origin: ClassVar[Origin] = Origin.INDEX_VS_HEAD

    def unstage_to_workdir(self, executor: CommandExecutor) -> None:
        """Move the index entry back to HEAD without touching the working tree.

        A staged deletion is pulled back from HEAD instead, since resetting
        it would leave the file deleted.
        """
        logger.debug("unstaging {} ({})", self.new_path, self.kind.value)
        if self.kind is ChangeKind.DELETED:
            executor.restore_staged(self.new_path)
        else:
            executor.reset_path(self.new_path)


ENTRY_TYPES = {
    Origin.WORKDIR_VS_INDEX: UnstagedEntry,
    Origin.INDEX_VS_HEAD: StagedEntry,
}
