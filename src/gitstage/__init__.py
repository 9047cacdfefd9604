"""gitstage — stage, unstage and discard working tree changes from the terminal."""

__version__ = "0.1.0"
