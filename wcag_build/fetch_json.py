"""Fetch a URL and decode its body as JSON, with an optional fallback."""

import logging
from typing import Any

import requests

from wcag_build.fetch_and_expect_2xx import fetch_and_expect_2xx
from wcag_build.fetch_status_error import FetchStatusError
from wcag_build.run_mode import is_build_mode

logger = logging.getLogger(__name__)

# Distinguishes "no default" from an explicit default of None.
_MISSING: Any = object()


def fetch_json(
    url: str,
    *,
    default_response: Any = _MISSING,
    run_mode: str | None = None,
    **kwargs: Any,
) -> Any:
    """Fetch a URL and return the parsed JSON body.

    If the request fails (transport error or status >= 400) and a
    ``default_response`` was given, the failure is logged and the default is
    returned instead, except in build mode where failures always propagate.
    Decoding errors on a successful response are never replaced by the default.
    """
    try:
        response = fetch_and_expect_2xx(url, **kwargs)
    except (FetchStatusError, requests.RequestException) as exc:
        if default_response is not _MISSING and not is_build_mode(run_mode):
            logger.warning("Fetch error: %s", exc)
            return default_response
        raise
    return response.json()
