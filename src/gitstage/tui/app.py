"""Curses control loop: draw the active view, read a key, dispatch it."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from loguru import logger

from gitstage.config.schema import GitStageConfig
from gitstage.errors import GitStageError
from gitstage.status.controller import Action, View, ViewController
from gitstage.tui.keys import KeyMap

HEADER_ROWS = 2
FOOTER_ROWS = 2

# Rich color name -> (curses color, extra attribute)
_CURSES_COLORS: Dict[str, Tuple[int, int]] = {
    "white": (curses.COLOR_WHITE, curses.A_NORMAL),
    "bright_green": (curses.COLOR_GREEN, curses.A_BOLD),
    "red": (curses.COLOR_RED, curses.A_NORMAL),
    "yellow": (curses.COLOR_YELLOW, curses.A_NORMAL),
    "cyan": (curses.COLOR_CYAN, curses.A_NORMAL),
    "bright_blue": (curses.COLOR_BLUE, curses.A_BOLD),
    "grey50": (curses.COLOR_WHITE, curses.A_DIM),
    "green": (curses.COLOR_GREEN, curses.A_NORMAL),
    "bright_red": (curses.COLOR_RED, curses.A_BOLD),
    "magenta": (curses.COLOR_MAGENTA, curses.A_NORMAL),
    "default": (-1, curses.A_NORMAL),
}

_HELP_ACTIONS = {
    View.UNSTAGED: (Action.STAGE, Action.DISCARD, Action.SWITCH_VIEW, Action.QUIT),
    View.STAGED: (Action.UNSTAGE, Action.SWITCH_VIEW, Action.QUIT),
}


@dataclass(frozen=True)
class Line:
    text: str
    color: str = "default"
    selected: bool = False


def visible_window(cursor: Optional[int], total: int, height: int, offset: int) -> int:
    """Return the scroll offset that keeps *cursor* inside *height* rows."""
    if height <= 0 or total <= height:
        return 0
    if cursor is not None:
        if cursor < offset:
            offset = cursor
        elif cursor >= offset + height:
            offset = cursor - height + 1
    return max(0, min(offset, total - height))


def entry_lines(controller: ViewController) -> List[Line]:
    """One line per entry of the active list, the cursor row marked."""
    active = controller.active_list
    return [
        Line(entry.display_text(), entry.kind.color, index == active.cursor)
        for index, entry in enumerate(active)
    ]


def help_text(view: View, keymap: KeyMap) -> str:
    return "  ".join(
        f"{keymap.label(action)}:{action.value.replace('_', ' ')}"
        for action in _HELP_ACTIONS[view]
    )


class StatusApp:
    """Owns the curses screen for the lifetime of one session."""

    def __init__(
        self,
        stdscr,
        controller: ViewController,
        config: GitStageConfig,
        keymap: KeyMap,
    ) -> None:
        self.stdscr = stdscr
        self.controller = controller
        self.config = config
        self.keymap = keymap
        self.message = ""
        self.offset = 0
        self._pairs: Dict[str, int] = {}
        self._init_curses()

    def _init_curses(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.noecho()
        curses.cbreak()
        self.stdscr.keypad(True)
        self.stdscr.timeout(self.config.ui.tick_rate_ms)

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            for number, (name, (color, _)) in enumerate(_CURSES_COLORS.items(), start=1):
                curses.init_pair(number, color, -1)
                self._pairs[name] = number

    def _attr(self, line: Line) -> int:
        _, extra = _CURSES_COLORS.get(line.color, _CURSES_COLORS["default"])
        attr = extra
        if line.color in self._pairs:
            attr |= curses.color_pair(self._pairs[line.color])
        if line.selected:
            attr |= curses.A_REVERSE | curses.A_BOLD
        return attr

    def _safe_addstr(self, row: int, col: int, text: str, attr: int = curses.A_NORMAL) -> None:
        height, width = self.stdscr.getmaxyx()
        if row < 0 or row >= height or col >= width:
            return
        max_len = width - col - 1
        if max_len <= 0:
            return
        try:
            self.stdscr.addstr(row, col, text[:max_len].replace("\t", "    "), attr)
        except curses.error:
            pass

    def draw(self) -> None:
        self.stdscr.erase()
        height, _ = self.stdscr.getmaxyx()
        view = self.controller.active_view
        active = self.controller.active_list

        self._safe_addstr(0, 0, f"{view.title} ({len(active)})", curses.A_BOLD)

        lines = entry_lines(self.controller)
        rows = height - HEADER_ROWS - FOOTER_ROWS
        self.offset = visible_window(active.cursor, len(lines), rows, self.offset)
        if not lines:
            self._safe_addstr(HEADER_ROWS, 2, "nothing to show", curses.A_DIM)
        for i, line in enumerate(lines[self.offset:self.offset + max(rows, 0)]):
            self._safe_addstr(HEADER_ROWS + i, 0, line.text, self._attr(line))

        if self.message:
            self._safe_addstr(height - 2, 0, self.message, curses.A_BOLD)
        if self.config.ui.show_help:
            self._safe_addstr(height - 1, 0, help_text(view, self.keymap), curses.A_DIM)
        self.stdscr.refresh()

    def read_action(self) -> Optional[Action]:
        """Wait up to one tick for a key. None on timeout or unbound key."""
        try:
            key = self.stdscr.get_wch()
        except curses.error:
            return None
        return self.keymap.decode(key)

    def handle(self, action: Action) -> bool:
        """Apply *action*. Returns False when the session should end."""
        if action is Action.QUIT:
            return False
        try:
            self.controller.dispatch(action)
        except GitStageError as exc:
            logger.warning("{} failed: {}", action.value, exc)
            self.message = str(exc)
        else:
            if action not in (Action.MOVE_NEXT, Action.MOVE_PREVIOUS, Action.CLEAR_SELECTION):
                self.message = ""
        return True

    def run(self) -> None:
        while True:
            self.draw()
            action = self.read_action()
            if action is None:
                continue
            if not self.handle(action):
                logger.debug("quit requested")
                return


def run(controller: ViewController, config: GitStageConfig, keymap: KeyMap) -> None:
    """Take over the terminal until the user quits."""

    def _main(stdscr) -> None:
        StatusApp(stdscr, controller, config, keymap).run()

    curses.wrapper(_main)
