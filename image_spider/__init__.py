"""
image_spider
============
Recursive image crawler: downloads every ``jpg``/``jpeg``/``png``/``gif``/
``bmp`` image reachable from a seed URL, following links on the same host
up to a depth limit.

Package structure
-----------------
image_spider/
├── __init__.py       – package init and public API
├── config.py         – defaults and the immutable CrawlSettings
├── errors.py         – exception taxonomy
├── models.py         – PageResult / DownloadResult / CrawlReport
├── session.py        – aiohttp.ClientSession factory
├── cli.py            – argparse CLI (``python -m image_spider``)
├── core/             – orchestrator, registry, page fetcher, image storage
├── extraction/       – image and link extraction from HTML
└── utils/            – URL helpers and logging setup

Quick start
-----------
    from pathlib import Path
    from image_spider import Crawler, CrawlSettings

    settings = CrawlSettings(recursive=True, max_depth=2, output_dir=Path("data"))
    report = Crawler("https://example.com", settings).run()
"""

from .config import CrawlSettings
from .core import Crawler, VisitedRegistry
from .errors import InvalidSeedURLError, SpiderError
from .extraction import extract_images_and_links
from .models import CrawlReport, DownloadResult, PageResult

__version__ = "1.0.0"

__all__ = [
    "Crawler",
    "CrawlSettings",
    "CrawlReport",
    "DownloadResult",
    "PageResult",
    "VisitedRegistry",
    "InvalidSeedURLError",
    "SpiderError",
    "extract_images_and_links",
]
