"""
Recursive, depth-bounded image crawler.

Starting from a seed URL the crawler fetches a page, downloads every image
it references, then follows same-host links one level deeper.  Work is a
tree of asyncio tasks:

* each page is handled by one ``_crawl_page`` call,
* images of a page download concurrently,
* child pages are crawled concurrently and awaited by their parent,
* a shared :class:`VisitedRegistry` guarantees that every URL is fetched
  at most once, however many pages link to it.

Page and image failures are logged and recorded in the report; they never
abort sibling work.
"""

import asyncio
import time
from dataclasses import dataclass

import aiohttp
from bs4.builder import ParserRejectedMarkup
from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from image_spider.config import CrawlSettings
from image_spider.core.fetcher import fetch_page
from image_spider.core.registry import VisitedRegistry
from image_spider.core.storage import download_image
from image_spider.errors import FetchError, InvalidSeedURLError
from image_spider.extraction.html_parser import extract_images_and_links
from image_spider.models import CrawlReport, PageResult
from image_spider.session import build_session
from image_spider.utils.log import log
from image_spider.utils.url import is_http_url


@dataclass
class _CrawlContext:
    """State owned by one crawl invocation and shared by all its tasks."""

    session: aiohttp.ClientSession
    registry: VisitedRegistry
    report: CrawlReport
    limiter: asyncio.Semaphore | None = None
    progress: tqdm | None = None

    def page_done(self) -> None:
        if self.progress is None:
            return
        self.progress.update(1)
        self.progress.set_postfix(
            images=self.report.images_saved,
            err=self.report.pages_failed + self.report.images_failed,
        )


class Crawler:
    """
    Image crawler for one seed URL.

    Every call to :meth:`crawl` is an independent invocation with its own
    visited registry; nothing is shared between runs.
    """

    def __init__(
        self,
        start_url: str,
        settings: CrawlSettings | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        if not is_http_url(start_url):
            raise InvalidSeedURLError(start_url)
        self.start_url = start_url
        self.settings = settings or CrawlSettings()
        self._session = session

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, progress: bool = True) -> CrawlReport:
        """Crawl synchronously, logging a summary when done."""
        s = self.settings
        log.info("Target URL       : %s", self.start_url)
        log.info("Output directory : %s", s.output_dir.resolve())
        if s.recursive:
            log.info("Mode             : recursive, max depth %d", s.max_depth)
        else:
            log.info("Mode             : single page")
        if s.max_concurrency:
            log.info("Concurrency cap  : %d", s.max_concurrency)

        t0 = time.monotonic()
        if progress:
            with logging_redirect_tqdm(loggers=[log]), tqdm(
                desc="Crawling", unit="page", dynamic_ncols=True,
            ) as bar:
                report = asyncio.run(self.crawl(progress=bar))
        else:
            report = asyncio.run(self.crawl())

        log.info(
            "[DONE] Crawl complete in %.1f s. pages=%d  failed=%d  "
            "images=%d  image_err=%d",
            time.monotonic() - t0,
            report.pages_ok,
            report.pages_failed,
            report.images_saved,
            report.images_failed,
        )
        log.info("Images saved in: %s", s.output_dir.resolve())
        return report

    async def crawl(self, progress: tqdm | None = None) -> CrawlReport:
        """Run one crawl invocation and return its flattened results."""
        s = self.settings
        report = CrawlReport(start_url=self.start_url)
        registry = VisitedRegistry()
        limiter = asyncio.Semaphore(s.max_concurrency) if s.max_concurrency else None

        session = self._session or build_session(s.user_agent, verify_ssl=s.verify_ssl)
        ctx = _CrawlContext(
            session=session,
            registry=registry,
            report=report,
            limiter=limiter,
            progress=progress,
        )
        try:
            await self._crawl_page(ctx, self.start_url, 0)
        finally:
            if self._session is None:
                await session.close()

        report.visited = len(registry)
        return report

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _crawl_page(self, ctx: _CrawlContext, url: str, depth: int) -> None:
        s = self.settings
        if not s.should_process(depth):
            log.debug("[SKIP] Depth %d beyond limit: %s", depth, url)
            return
        if not await ctx.registry.claim(url):
            log.debug("[DUP] Already visited: %s", url)
            return

        log.info("[PAGE] Processing %s (depth: %d)", url, depth)
        page = PageResult(url=url, depth=depth)
        ctx.report.pages.append(page)

        try:
            html = await fetch_page(ctx.session, url, s.timeout, ctx.limiter)
            page.images, page.links = extract_images_and_links(html, url)
        except FetchError as exc:
            page.error = str(exc)
            log.warning("[ERR] Page failed: %s", exc)
            ctx.page_done()
            return
        except ParserRejectedMarkup as exc:
            page.error = f"unparseable HTML: {exc}"
            log.warning("[ERR] Cannot parse %s – %s", url, exc)
            ctx.page_done()
            return
        except Exception as exc:
            page.error = f"{type(exc).__name__}: {exc}"
            log.warning("[ERR] Page %s failed – %s", url, page.error)
            ctx.page_done()
            return

        log.debug("  %d image(s), %d link(s) on %s",
                  len(page.images), len(page.links), url)

        await asyncio.gather(*(self._download(ctx, img) for img in page.images))
        ctx.page_done()

        if s.should_recurse(depth):
            await asyncio.gather(
                *(self._crawl_page(ctx, link, depth + 1) for link in page.links)
            )

    async def _download(self, ctx: _CrawlContext, url: str) -> None:
        s = self.settings
        result = await download_image(
            ctx.session, url, s.output_dir, s.timeout, ctx.limiter,
        )
        ctx.report.downloads.append(result)
        if result.ok:
            log.info("[SAVE] %s → %s (%d bytes)", url, result.path, result.size)
        else:
            log.warning("[ERR] Image failed: %s", result.error)
