"""Trackademic study helpers: markdown text formatting and AI math solving."""

__version__ = "0.1.0"
