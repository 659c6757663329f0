"""Helpers for status output and rust-analyzer project files, plus worked exercise solutions."""

__version__ = "5.0.0"