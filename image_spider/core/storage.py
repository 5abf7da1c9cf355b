"""
Image download and file storage helpers.
"""

import asyncio
import logging
import os
import tempfile
from pathlib import Path

import aiohttp

from image_spider.config import PARTIAL_SUFFIX
from image_spider.core.fetcher import limited
from image_spider.errors import DownloadError, FetchError, HTTPStatusError, TransportError
from image_spider.models import DownloadResult
from image_spider.session import request_timeout
from image_spider.utils.url import url_basename

log = logging.getLogger("image-spider")


def image_local_path(url: str, output_dir: Path) -> Path:
    """Flat destination for *url*: ``output_dir / <last path segment>``."""
    return output_dir / url_basename(url)


def save_file(local_path: Path, content: bytes) -> None:
    """Write *content* to *local_path*, creating parent directories.

    The bytes go to a uniquely named ``.part`` sibling first and are renamed
    into place, so the final name only ever refers to a complete file, even
    when several downloads target the same name at once.
    """
    local_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=local_path.parent, prefix=local_path.name + ".", suffix=PARTIAL_SUFFIX,
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
        # mkstemp creates owner-only files
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, local_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    log.debug("Saved → %s (%d bytes)", local_path, len(content))


async def _fetch_bytes(
    session: aiohttp.ClientSession,
    url: str,
    timeout: float,
    limiter: asyncio.Semaphore | None,
) -> bytes:
    try:
        async with limited(limiter):
            async with session.get(url, timeout=request_timeout(timeout)) as resp:
                if not resp.ok:
                    raise HTTPStatusError(url, resp.status, resp.reason)
                return await resp.read()
    except asyncio.TimeoutError as exc:
        raise TransportError(url, f"timed out after {timeout:g}s") from exc
    except aiohttp.ClientError as exc:
        raise TransportError(url, f"{type(exc).__name__}: {exc}") from exc


async def download_image(
    session: aiohttp.ClientSession,
    url: str,
    output_dir: Path,
    timeout: float,
    limiter: asyncio.Semaphore | None = None,
) -> DownloadResult:
    """
    Download *url* into *output_dir* and report the outcome.

    Never raises for network or filesystem problems: they are returned in
    :attr:`DownloadResult.error` so sibling downloads carry on.  A later
    image with the same file name overwrites an earlier one.
    """
    local = image_local_path(url, output_dir)
    try:
        content = await _fetch_bytes(session, url, timeout, limiter)
        try:
            await asyncio.to_thread(save_file, local, content)
        except OSError as exc:
            raise DownloadError(url, local, f"cannot write file ({exc.strerror or exc})") from exc
    except (FetchError, DownloadError) as exc:
        return DownloadResult(url=url, error=str(exc))
    except Exception as exc:
        # e.g. UnicodeError from the resolver for an over-long host label
        return DownloadResult(url=url, error=f"{type(exc).__name__}: {exc} ({url})")
    return DownloadResult(url=url, path=local, size=len(content))
