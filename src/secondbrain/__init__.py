"""Second Brain: markdown notes, search and personal trackers."""

__version__ = "0.1.0"
