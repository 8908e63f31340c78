"""Utility for formatting compact WCAG version codes."""


def resolve_decimal_version(version: str) -> str:
    """Given a string "xy", return "x.y"."""
    return ".".join(version)
