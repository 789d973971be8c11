"""Generates the tlang visual editor's node registry from tlang TypeScript sources."""

__version__ = "0.1.0"
