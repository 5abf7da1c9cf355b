"""HTML extraction of image sources and same-host links."""

from image_spider.extraction.html_parser import extract_images_and_links

__all__ = ["extract_images_and_links"]
