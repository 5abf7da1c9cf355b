"""Core crawler logic: orchestration, fetching, storage and dedup."""

from image_spider.core.crawler import Crawler
from image_spider.core.fetcher import fetch_page
from image_spider.core.registry import VisitedRegistry
from image_spider.core.storage import download_image, save_file

__all__ = ["Crawler", "fetch_page", "VisitedRegistry", "download_image", "save_file"]
