"""Task Tracker CLI - a small file-backed task tracker for the terminal."""

__version__ = "0.1.0"
