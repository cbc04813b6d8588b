from .crawl_results import CrawlResultsRepository

__all__ = ["CrawlResultsRepository"]
