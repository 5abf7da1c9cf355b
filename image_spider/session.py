"""
HTTP session creation for the image spider.

One ``aiohttp.ClientSession`` is shared by every task of a crawl so that
connections are pooled.  Timeouts are applied per request, not per session.
"""

import aiohttp

from image_spider.config import USER_AGENT


def build_session(user_agent: str = USER_AGENT, verify_ssl: bool = True) -> aiohttp.ClientSession:
    """Return a ``ClientSession`` with browser-like default headers.

    Must be called from inside a running event loop.  The connector places
    no limit on simultaneous connections; concurrency is bounded, when at
    all, by the crawler's own semaphore.
    """
    connector = aiohttp.TCPConnector(limit=0, ssl=verify_ssl)
    return aiohttp.ClientSession(
        connector=connector,
        headers={
            "User-Agent": user_agent,
            "Accept": (
                "text/html,application/xhtml+xml,application/xml;q=0.9,"
                "image/avif,image/webp,image/apng,*/*;q=0.8"
            ),
            "Accept-Language": "en-US,en;q=0.9",
        },
    )


def request_timeout(seconds: float) -> aiohttp.ClientTimeout:
    """Total per-request timeout covering connect, headers and body."""
    return aiohttp.ClientTimeout(total=seconds)
