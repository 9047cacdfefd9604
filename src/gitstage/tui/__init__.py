"""Curses front-end for the view controller."""
