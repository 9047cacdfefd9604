"""Two-view navigation state machine.

The controller owns the unstaged and staged lists, knows which one is
active, and turns user actions into a mutation on the selected entry
followed by a refresh of the active list.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from loguru import logger

from gitstage.errors import GitStageError, RepositoryError
from gitstage.git.executor import CommandExecutor
from gitstage.git.models import Origin
from gitstage.git.repository import Repository
from gitstage.status.entry import ENTRY_TYPES, StagedEntry, StatusEntry, UnstagedEntry
from gitstage.status.status_list import StatusList


class View(str, Enum):
    UNSTAGED = "unstaged"
    STAGED = "staged"

    @property
    def origin(self) -> Origin:
        return _VIEW_ORIGIN[self]

    @property
    def title(self) -> str:
        return "Unstaged changes" if self is View.UNSTAGED else "Staged changes"


_VIEW_ORIGIN: Dict[View, Origin] = {
    View.UNSTAGED: Origin.WORKDIR_VS_INDEX,
    View.STAGED: Origin.INDEX_VS_HEAD,
}


class Action(str, Enum):
    QUIT = "quit"
    MOVE_NEXT = "move_next"
    MOVE_PREVIOUS = "move_previous"
    CLEAR_SELECTION = "clear_selection"
    SWITCH_VIEW = "switch_view"
    STAGE = "stage"
    DISCARD = "discard"
    UNSTAGE = "unstage"


def load_entries(repository: Repository, origin: Origin) -> List[StatusEntry]:
    """Query the repository and build entries of the type matching *origin*."""
    entry_type = ENTRY_TYPES[origin]
    raw = repository.query_status(origin)
    logger.debug("{} reported {} change(s)", origin.value, len(raw))
    return [entry_type.from_raw(change) for change in raw]


class ViewController:
    """Active view plus one StatusList per view."""

    def __init__(self, repository: Repository, executor: CommandExecutor) -> None:
        self.repository = repository
        self.executor = executor
        self.active_view = View.UNSTAGED
        self.unstaged: StatusList[UnstagedEntry] = StatusList.with_items(
            load_entries(repository, Origin.WORKDIR_VS_INDEX)
        )
        self.staged: StatusList[StagedEntry] = StatusList.with_items(
            load_entries(repository, Origin.INDEX_VS_HEAD)
        )

    # -------------------- views --------------------

    def list_for(self, view: View) -> StatusList:
        return self.unstaged if view is View.UNSTAGED else self.staged

    @property
    def active_list(self) -> StatusList:
        return self.list_for(self.active_view)

    def refresh(self, view: View) -> None:
        """Re-query *view*'s list. On RepositoryError the list is left as is."""
        entries = load_entries(self.repository, view.origin)
        self.list_for(view).refresh(entries)

    def switch_to(self, view: View) -> None:
        """Enter *view*, refreshing its list first. No-op if already active."""
        if view is self.active_view:
            return
        self.refresh(view)
        logger.debug("switching view {} -> {}", self.active_view.value, view.value)
        self.active_view = view

    def switch_view(self) -> None:
        other = View.STAGED if self.active_view is View.UNSTAGED else View.UNSTAGED
        self.switch_to(other)

    # -------------------- actions --------------------

    def dispatch(self, action: Action) -> None:
        """Apply *action* to the active view.

        Actions that do not belong to the active view are ignored, as are
        mutations with nothing selected. A failed mutation still refreshes
        the list before the error propagates.
        """
        handler = self._handlers().get((self.active_view, action))
        if handler is not None:
            handler()
            return
        if action is Action.SWITCH_VIEW:
            self.switch_view()
        elif action is Action.MOVE_NEXT:
            self.active_list.move_next()
        elif action is Action.MOVE_PREVIOUS:
            self.active_list.move_previous()
        elif action is Action.CLEAR_SELECTION:
            self.active_list.clear_selection()
        else:
            logger.debug("ignoring {} in {} view", action.value, self.active_view.value)

    def _handlers(self) -> Dict[Tuple[View, Action], Callable[[], None]]:
        return {
            (View.UNSTAGED, Action.STAGE): self.stage_current,
            (View.UNSTAGED, Action.DISCARD): self.discard_current,
            (View.STAGED, Action.UNSTAGE): self.unstage_current,
        }

    def _apply(self, view: View, mutation: Callable[[CommandExecutor], None]) -> None:
        """Run *mutation*, then refresh *view* whether or not it succeeded.

        When both fail, the mutation's error is the one raised.
        """
        try:
            mutation(self.executor)
        except GitStageError:
            try:
                self.refresh(view)
            except RepositoryError as exc:
                logger.warning("refresh after failed action also failed: {}", exc)
            raise
        self.refresh(view)

    def stage_current(self) -> None:
        entry: Optional[UnstagedEntry] = self.unstaged.current()
        if entry is not None:
            self._apply(View.UNSTAGED, entry.stage_to_index)

    def discard_current(self) -> None:
        entry: Optional[UnstagedEntry] = self.unstaged.current()
        if entry is not None:
            self._apply(View.UNSTAGED, entry.reset_from_workdir)

    def unstage_current(self) -> None:
        entry: Optional[StagedEntry] = self.staged.current()
        if entry is not None:
            self._apply(View.STAGED, entry.unstage_to_workdir)
