from collections import deque
from typing import Deque, NamedTuple, Optional, Set


class FrontierEntry(NamedTuple):
    url: str
    depth: int


class Frontier:
    """
    Breadth-first queue of URLs awaiting a visit, plus visit bookkeeping.

    A URL is admitted at most once (`_seen` covers both queued and visited
    URLs), so no URL can be fetched twice within one crawl even on cyclic
    link graphs.
    """

    def __init__(self, seed_url: str):
        self._queue: Deque[FrontierEntry] = deque()
        self._seen: Set[str] = set()
        self._visited: Set[str] = set()
        self.pages_crawled: int = 0
        self.enqueue(seed_url, 1)

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def enqueue(self, url: str, depth: int) -> bool:
        """Queue `url` at `depth` unless it was already queued or visited."""
        if url in self._seen:
            return False
        self._seen.add(url)
        self._queue.append(FrontierEntry(url, depth))
        return True

    def pop(self) -> Optional[FrontierEntry]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def mark_visited(self, url: str) -> None:
        self._visited.add(url)
        self._seen.add(url)

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    def record_page(self) -> int:
        self.pages_crawled += 1
        return self.pages_crawled

    def clear(self) -> int:
        """Drop every queued entry; returns how many were discarded."""
        dropped = len(self._queue)
        self._queue.clear()
        return dropped
