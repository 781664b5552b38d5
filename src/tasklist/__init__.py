"""Tasklist: a small in-memory task HTTP service."""

__version__ = "1.0.0"
