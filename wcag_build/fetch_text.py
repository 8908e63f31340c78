"""Fetch a URL and return its body as text."""

from typing import Any

from wcag_build.fetch_and_expect_2xx import fetch_and_expect_2xx


def fetch_text(url: str, **kwargs: Any) -> str:
    """Fetch a URL, failing on status >= 400, and return the decoded body."""
    return fetch_and_expect_2xx(url, **kwargs).text
