"""Renderers for the non-interactive status command."""
