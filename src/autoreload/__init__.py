"""Autoreload - keep an editable in-memory view of a file in sync with disk."""

__version__ = "0.1.0"
