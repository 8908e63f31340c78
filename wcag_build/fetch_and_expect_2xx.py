"""Logic for issuing HTTP requests that must succeed."""

import logging
from typing import Any

import requests

from wcag_build.fetch_status_error import FetchStatusError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


def fetch_and_expect_2xx(
    url: str,
    *,
    method: str = "GET",
    session: requests.Session | None = None,
    **kwargs: Any,
) -> requests.Response:
    """Send a request and raise FetchStatusError for any status >= 400.

    Extra keyword arguments (headers, data, json, timeout...) are handed to
    requests unchanged.
    """
    url = str(url)
    kwargs.setdefault("timeout", DEFAULT_TIMEOUT)
    logger.debug("%s %s", method, url)
    if session is not None:
        response = session.request(method, url, **kwargs)
    else:
        response = requests.request(method, url, **kwargs)
    if response.status_code >= 400:
        raise FetchStatusError(response.status_code, url)
    return response
