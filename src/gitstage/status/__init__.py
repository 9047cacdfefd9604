"""Status core — change kinds, entries, selectable lists, view controller."""

from gitstage.status.controller import Action, View, ViewController, load_entries
from gitstage.status.entry import StagedEntry, StatusEntry, UnstagedEntry
from gitstage.status.kinds import ChangeKind
from gitstage.status.status_list import StatusList

__all__ = [
    "Action",
    "ChangeKind",
    "StagedEntry",
    "StatusEntry",
    "StatusList",
    "UnstagedEntry",
    "View",
    "ViewController",
    "load_entries",
]
