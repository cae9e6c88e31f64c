"""Deadline-themed pygame games, with their rules kept apart from the windows that show them."""

__version__ = "0.1.0"