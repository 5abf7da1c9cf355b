"""
URL resolution and path-mapping helpers.
"""

import posixpath
import urllib.parse

from image_spider.config import FALLBACK_FILENAME, IMAGE_EXTENSIONS


def _split(url: str) -> urllib.parse.SplitResult | None:
    """``urlsplit`` that returns ``None`` instead of raising on bad input."""
    try:
        parsed = urllib.parse.urlsplit(url)
        parsed.port  # raises ValueError on a malformed port
    except ValueError:
        return None
    return parsed


def resolve_url(raw: str, base_url: str) -> str | None:
    """
    Resolve *raw* against *base_url* and return the absolute URL.

    No normalisation beyond what :func:`urllib.parse.urljoin` performs:
    trailing slashes, query order and fragments are kept as written.
    Returns ``None`` when the reference is empty or malformed.
    """
    raw = raw.strip()
    if not raw:
        return None
    try:
        resolved = urllib.parse.urljoin(base_url, raw)
    except ValueError:
        return None
    parsed = _split(resolved)
    if parsed is None or not parsed.scheme:
        return None
    return resolved


def host_of(url: str) -> str | None:
    """Return the host component of *url* (lower-cased, no port)."""
    parsed = _split(url)
    return parsed.hostname if parsed else None


def same_host(url: str, base_url: str) -> bool:
    """True when *url* and *base_url* share the exact same host."""
    host = host_of(url)
    return host is not None and host == host_of(base_url)


def url_extension(url: str) -> str:
    """
    Return the lower-cased text after the last ``.`` of the URL path,
    or an empty string when the path has no dot.
    """
    parsed = _split(url)
    if parsed is None or "." not in parsed.path:
        return ""
    return parsed.path.rsplit(".", 1)[1].lower()


def has_image_extension(url: str) -> bool:
    return url_extension(url) in IMAGE_EXTENSIONS


def url_basename(url: str) -> str:
    """
    Map an image URL to a flat file name.

    The last path segment is used as-is; a root path, a trailing slash
    or an unparseable URL falls back to ``unknown.jpg``.
    """
    parsed = _split(url)
    if parsed is None:
        return FALLBACK_FILENAME
    name = posixpath.basename(parsed.path)
    if name in ("", ".", ".."):
        return FALLBACK_FILENAME
    return name


def is_http_url(url: str) -> bool:
    """True for absolute ``http``/``https`` URLs that name a resolvable host."""
    parsed = _split(url)
    if parsed is None or parsed.scheme not in ("http", "https") or not parsed.hostname:
        return False
    try:
        # empty or over-long (> 63 chars) labels cannot be looked up
        parsed.hostname.encode("idna")
    except UnicodeError:
        return False
    return True
