"""
Visited-URL registry shared by the tasks of a single crawl.
"""

import asyncio


class VisitedRegistry:
    """
    Set of URLs already handled (or in flight) during one crawl.

    The only mutation is :meth:`claim`, which tests and inserts under a
    single lock, so two tasks racing on the same URL can never both win.
    URLs are compared as exact strings.
    """

    def __init__(self) -> None:
        self._urls: set[str] = set()
        self._lock = asyncio.Lock()

    async def claim(self, url: str) -> bool:
        """Return ``True`` the first time *url* is claimed, ``False`` after."""
        async with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def __len__(self) -> int:
        return len(self._urls)
