"""Crawl result aggregate."""
from typing import List, Optional

from markcrawl.domain.page_result import PageResult

DEFAULT_TITLE = "Multi-page Crawl Results"
PAGE_BOUNDARY_TEMPLATE = "\n\n--- Page {ordinal}: {url} ---\n\n"


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


class CrawlResult:
    """Aggregate output of one traversal.

    Created empty when traversal starts, grown with `add_page`/`add_failure`
    while pages complete, and frozen by `finalize` once traversal ends (by
    exhaustion, a limit, timeout or cancellation).
    """

    def __init__(self, seed_url: str, strategy: Optional[str] = None):
        self.seed_url = seed_url
        self.strategy = strategy
        self.pages: List[PageResult] = []
        self.failed_pages: List[PageResult] = []
        self.stopped = False
        self._title: Optional[str] = None
        self._parts: List[str] = []
        self._markdown: Optional[str] = None

    @property
    def pages_crawled(self) -> int:
        return len(self.pages)

    @property
    def success(self) -> bool:
        return self.pages_crawled > 0

    @property
    def title(self) -> str:
        return self._title if self._title is not None else DEFAULT_TITLE

    @property
    def finalized(self) -> bool:
        return self._markdown is not None

    @property
    def markdown(self) -> str:
        if self._markdown is not None:
            return self._markdown
        return self._join()

    @property
    def character_count(self) -> int:
        return len(self.markdown)

    @property
    def word_count(self) -> int:
        return count_words(self.markdown)

    def add_page(self, page: PageResult) -> None:
        if self.finalized:
            raise RuntimeError("cannot add pages to a finalized crawl result")
        if not self.pages:
            self._title = page.title
        if page.ordinal is not None and page.ordinal > 1:
            self._parts.append(PAGE_BOUNDARY_TEMPLATE.format(ordinal=page.ordinal, url=page.source_url))
        self._parts.append(page.markdown.strip())
        self.pages.append(page)

    def add_failure(self, page: PageResult) -> None:
        self.failed_pages.append(page)

    def finalize(self) -> "CrawlResult":
        if self._markdown is None:
            self._markdown = self._join()
        return self

    def _join(self) -> str:
        return "\n\n".join(part for part in self._parts if part)

    def __repr__(self):
        return (
            f"<CrawlResult seed={self.seed_url} pages={self.pages_crawled} "
            f"failed={len(self.failed_pages)} stopped={self.stopped}>"
        )
