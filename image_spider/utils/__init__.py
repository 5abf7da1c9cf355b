"""Utility helpers for URL handling and logging."""

from image_spider.utils.url import (
    has_image_extension,
    resolve_url,
    same_host,
    url_basename,
)
from image_spider.utils.log import setup_logging, log

__all__ = [
    "has_image_extension",
    "resolve_url",
    "same_host",
    "url_basename",
    "setup_logging",
    "log",
]
