"""Build helpers for the WCAG documentation site."""

__version__ = "0.1.0"
