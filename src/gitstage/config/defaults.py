"""Starter .gitstage.toml template."""

DEFAULT_TOML = """\
# gitstage configuration

[ui]
tick_rate_ms = 250        # how long to wait for a key before redrawing
show_help = true

[keys]
# A single character, or a curses key name (KEY_UP, KEY_DOWN, KEY_LEFT, ...)
quit = "q"
move_next = "KEY_DOWN"
move_previous = "KEY_UP"
clear_selection = "KEY_LEFT"
switch_view = "t"
stage = "s"
discard = "r"
unstage = "u"

[log]
level = "WARNING"         # TRACE | DEBUG | INFO | WARNING | ERROR
# file = "gitstage.log"   # the interactive UI only logs to a file
"""
