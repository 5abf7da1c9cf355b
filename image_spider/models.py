"""Result types produced by a crawl."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class PageResult:
    """Outcome of fetching and parsing one page."""

    url: str
    depth: int
    images: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DownloadResult:
    """Outcome of downloading one image."""

    url: str
    path: Path | None = None
    size: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CrawlReport:
    """Flattened results of one crawl invocation."""

    start_url: str
    pages: list[PageResult] = field(default_factory=list)
    downloads: list[DownloadResult] = field(default_factory=list)
    visited: int = 0

    @property
    def pages_ok(self) -> int:
        return sum(1 for p in self.pages if p.ok)

    @property
    def pages_failed(self) -> int:
        return sum(1 for p in self.pages if not p.ok)

    @property
    def images_saved(self) -> int:
        return sum(1 for d in self.downloads if d.ok)

    @property
    def images_failed(self) -> int:
        return sum(1 for d in self.downloads if not d.ok)

    def fetched_urls(self) -> list[str]:
        """URLs of every page the crawl attempted to fetch."""
        return [p.url for p in self.pages]
