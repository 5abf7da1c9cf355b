"""
HTML image and link extraction via BeautifulSoup.
"""

from bs4 import BeautifulSoup

from image_spider.config import DATA_URL_PREFIX, RESPONSIVE_IMAGE_CLASSES
from image_spider.utils.url import has_image_extension, resolve_url, same_host

_BS4_PARSER = "lxml"

# ``<img src>`` plus any element tagged with a responsive-image class.
# soupsieve yields each element once, in document order.
IMAGE_SELECTOR = ", ".join(
    ["img[src]"] + [f".{cls}[src]" for cls in RESPONSIVE_IMAGE_CLASSES]
)
LINK_SELECTOR = "a[href]"


def extract_image_urls(soup: BeautifulSoup, base_url: str) -> list[str]:
    """
    Return absolute URLs of downloadable images, in document order.

    Inline ``data:`` sources are skipped, as is anything whose path does
    not end in a known image extension.
    """
    images: list[str] = []
    for el in soup.select(IMAGE_SELECTOR):
        src = el.get("src")
        if not isinstance(src, str):
            continue
        src = src.strip()
        if src.lower().startswith(DATA_URL_PREFIX):
            continue
        resolved = resolve_url(src, base_url)
        if resolved and has_image_extension(resolved):
            images.append(resolved)
    return images


def extract_page_links(soup: BeautifulSoup, base_url: str) -> list[str]:
    """Return absolute same-host ``<a href>`` targets, in document order."""
    links: list[str] = []
    for el in soup.select(LINK_SELECTOR):
        href = el.get("href")
        if not isinstance(href, str):
            continue
        resolved = resolve_url(href, base_url)
        if resolved and same_host(resolved, base_url):
            links.append(resolved)
    return links


def extract_images_and_links(html: str, base_url: str) -> tuple[list[str], list[str]]:
    """
    Parse *html* fetched from *base_url* into ``(images, links)``.

    Both lists may contain duplicates; deduplication is the crawler's job.
    Raises :class:`bs4.builder.ParserRejectedMarkup` when the document cannot be
    parsed at all.
    """
    soup = BeautifulSoup(html, _BS4_PARSER)
    return extract_image_urls(soup, base_url), extract_page_links(soup, base_url)
