"""
Exception taxonomy for the image spider.

Only :class:`InvalidSeedURLError` is fatal to a crawl.  Everything derived
from :class:`FetchError` or :class:`DownloadError` is caught by the crawler
at the page or image it concerns, logged, and turned into a result.
"""


class SpiderError(Exception):
    """Base class for every error raised by this package."""


class InvalidSeedURLError(SpiderError, ValueError):
    """The seed URL cannot be parsed as an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "not an absolute http(s) URL") -> None:
        super().__init__(f"Invalid seed URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class FetchError(SpiderError):
    """A page or image could not be retrieved."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url


class TransportError(FetchError):
    """Connection failure, TLS error, or timeout."""


class HTTPStatusError(FetchError):
    """The server answered with a non-success status."""

    def __init__(self, url: str, status: int, reason: str | None = None) -> None:
        text = f"HTTP {status}"
        if reason:
            text += f" {reason}"
        super().__init__(url, text)
        self.status = status


class BodyDecodeError(FetchError):
    """The response body could not be decoded as text."""


class DownloadError(SpiderError):
    """An image could not be persisted to disk."""

    def __init__(self, url: str, path, message: str) -> None:
        super().__init__(f"{message}: {path} ({url})")
        self.url = url
        self.path = path
