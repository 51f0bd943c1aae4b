"""Hookify - authenticated webhook receiver."""

__version__ = "0.1.0"
