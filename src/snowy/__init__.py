"""Snowy: a personal task tracker backed by a plain-text task file."""

__version__ = "0.1.0"
