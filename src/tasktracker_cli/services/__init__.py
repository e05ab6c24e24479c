"""Service layer for Task Tracker CLI."""
