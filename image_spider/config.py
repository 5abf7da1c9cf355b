"""
Configuration constants and crawl settings for the image spider.
"""

from dataclasses import dataclass, field
from pathlib import Path

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_OUTPUT = "./data"
DEFAULT_MAX_DEPTH = 5
REQUEST_TIMEOUT = 10.0         # seconds, applied to every page and image GET

USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36 image-spider/1.0"
)

# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------
# Image extensions accepted for download (compared lower-case, no dot)
IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp"})

# Marker classes used by common CSS frameworks for responsive images.
# Elements carrying one of these and a ``src`` attribute are image candidates
# even when they are not ``<img>`` tags.
RESPONSIVE_IMAGE_CLASSES = ("img-responsive", "responsive-img")

# Inline-encoded sources are never downloaded
DATA_URL_PREFIX = "data:"

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------
FALLBACK_FILENAME = "unknown.jpg"
PARTIAL_SUFFIX = ".part"


@dataclass(frozen=True)
class CrawlSettings:
    """Immutable settings shared by every task of one crawl.

    ``max_depth`` only matters when ``recursive`` is true; a non-recursive
    crawl processes the seed page alone.  ``max_concurrency`` of ``None``
    leaves network fan-out unbounded.
    """

    recursive: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    output_dir: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT))
    timeout: float = REQUEST_TIMEOUT
    max_concurrency: int | None = None
    user_agent: str = USER_AGENT
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError(
                f"max_concurrency must be >= 1, got {self.max_concurrency}"
            )
        # Accept plain strings for convenience; frozen, so bypass __setattr__
        if not isinstance(self.output_dir, Path):
            object.__setattr__(self, "output_dir", Path(self.output_dir))

    def should_process(self, depth: int) -> bool:
        """Whether a task at *depth* passes the depth/mode gate."""
        if not self.recursive:
            return depth < 1
        return depth <= self.max_depth

    def should_recurse(self, depth: int) -> bool:
        """Whether a page processed at *depth* spawns child tasks."""
        return self.recursive and depth < self.max_depth
