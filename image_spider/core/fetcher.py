"""
Page fetching with classified, non-fatal failures.
"""

import asyncio
import contextlib

import aiohttp

from image_spider.errors import BodyDecodeError, HTTPStatusError, TransportError
from image_spider.session import request_timeout


def limited(limiter: asyncio.Semaphore | None):
    """Async context manager acquiring *limiter* when one is configured."""
    return limiter if limiter is not None else contextlib.nullcontext()


async def fetch_page(
    session: aiohttp.ClientSession,
    url: str,
    timeout: float,
    limiter: asyncio.Semaphore | None = None,
) -> str:
    """
    GET *url* and return the decoded body.

    Raises :class:`TransportError` for connection failures and timeouts,
    :class:`HTTPStatusError` for non-success statuses and
    :class:`BodyDecodeError` when the body is not valid text.
    """
    try:
        async with limited(limiter):
            async with session.get(url, timeout=request_timeout(timeout)) as resp:
                if not resp.ok:
                    raise HTTPStatusError(url, resp.status, resp.reason)
                try:
                    return await resp.text()
                except (UnicodeDecodeError, LookupError) as exc:
                    raise BodyDecodeError(url, f"cannot decode body: {exc}") from exc
    except asyncio.TimeoutError as exc:
        raise TransportError(url, f"timed out after {timeout:g}s") from exc
    except aiohttp.ClientError as exc:
        raise TransportError(url, f"{type(exc).__name__}: {exc}") from exc
