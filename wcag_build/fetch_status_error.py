"""Exception raised when a fetched response reports failure."""


class FetchStatusError(Exception):
    """A response arrived with a status code of 400 or above."""

    def __init__(self, status: int, url: str) -> None:
        """Record the failing status and the URL that produced it."""
        super().__init__(f"Status {status} received from {url}")
        self.status = status
        self.url = url
