"""Ezra: a text-command task manager."""

__version__ = "0.1.0"
