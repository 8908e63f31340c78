"""Data models for representing WCAG guideline items."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WcagItem:
    """A numbered principle, guideline or success criterion."""

    num: str  # dotted, e.g. "1.4.10"
    name: str = ""
    id: str = ""
