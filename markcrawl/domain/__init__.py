"""Domain objects for markcrawl - explicit re-exports to satisfy linters."""
from .crawl_policy import CrawlPolicy as CrawlPolicy
from .crawl_result import CrawlResult as CrawlResult
from .crawl_session import CrawlSession as CrawlSession
from .frontier import Frontier as Frontier
from .http_response import HttpResponse as HttpResponse
from .page_result import PageResult as PageResult
from .stored_crawl_result import StoredCrawlResult as StoredCrawlResult

__all__ = [
    "CrawlPolicy",
    "CrawlResult",
    "CrawlSession",
    "Frontier",
    "HttpResponse",
    "PageResult",
    "StoredCrawlResult",
]
