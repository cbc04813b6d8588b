import logging
from typing import List, Optional

from markcrawl.domain.crawl_policy import CrawlPolicy
from markcrawl.domain.crawl_result import CrawlResult
from markcrawl.domain.crawl_session import CrawlSession
from markcrawl.domain.frontier import Frontier, FrontierEntry
from markcrawl.domain.http_response import HttpResponse
from markcrawl.domain.page_result import PageResult
from markcrawl.exceptions import FatalSeedError, HttpFetchError, PageFetchError
from markcrawl.services.fetcher import Fetcher
from markcrawl.services.link_extractor import LinkExtractor
from markcrawl.services.page_processor import PageProcessor

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Breadth-first traversal of one crawl.

    This class owns the crawl control-flow (frontier, limits, cancellation
    checks, page numbering) and delegates fetching, link extraction and
    markdown production. It intentionally does NOT construct the fetcher: the
    calling strategy supplies it, so the same traversal runs over plain HTTP
    or a rendering session.
    """

    def __init__(
        self,
        *,
        link_extractor: LinkExtractor,
        page_processor: PageProcessor,
    ):
        self.link_extractor = link_extractor
        self.page_processor = page_processor

    def fetch_page(self, fetcher: Fetcher, url: str, policy: CrawlPolicy, stop_event=None) -> HttpResponse:
        """Fetch `url`, turning transport errors and non-2xx answers into PageFetchError."""
        try:
            response = fetcher.fetch(url, policy, stop_event=stop_event)
        except HttpFetchError as e:
            raise PageFetchError(url, str(e.original)) from e
        if not response.ok:
            raise PageFetchError(url, f"HTTP {response.status_code}", status_code=response.status_code)
        return response

    def crawl(self, session: CrawlSession, fetcher: Fetcher, strategy_name: Optional[str] = None) -> CrawlResult:
        policy = session.policy
        result = CrawlResult(policy.url, strategy=strategy_name)
        frontier = Frontier(policy.url)

        logger.info(
            "Starting crawl of %s: max_pages=%s, max_depth=%s, strategy=%s",
            policy.url,
            policy.max_pages,
            policy.max_depth,
            strategy_name,
        )

        while frontier and frontier.pages_crawled < policy.max_pages:
            reason = session.stop_reason()
            if reason is not None:
                dropped = frontier.clear()
                logger.info("Crawl of %s %s; dropping %d queued URLs", policy.url, reason, dropped)
                result.stopped = True
                break

            entry = frontier.pop()
            if frontier.is_visited(entry.url):
                logger.debug("Skipping (visited) %s", entry.url)
                continue

            is_seed = entry.depth == 1
            try:
                response = self.fetch_page(fetcher, entry.url, policy, session.stop_event)
            except PageFetchError as e:
                if is_seed:
                    raise FatalSeedError(entry.url, str(e)) from e
                logger.warning("Fetch failed for %s: %s", entry.url, e)
                result.add_failure(PageResult(source_url=entry.url, depth=entry.depth, error=str(e)))
                continue
            except Exception as e:
                if is_seed:
                    raise FatalSeedError(entry.url, f"Could not fetch {entry.url}: {e}") from e
                logger.error("Fetch error for %s: %s", entry.url, e, exc_info=True)
                result.add_failure(PageResult(source_url=entry.url, depth=entry.depth, error=str(e)))
                continue

            frontier.mark_visited(entry.url)
            if response.url and response.url != entry.url:
                frontier.mark_visited(response.url)
            ordinal = frontier.pages_crawled + 1
            try:
                page, links = self._process_page(entry, ordinal, response, policy)
            except Exception as e:
                if is_seed:
                    raise FatalSeedError(entry.url, f"Could not parse {entry.url}: {e}") from e
                logger.error("Processing error for %s: %s", entry.url, e, exc_info=True)
                result.add_failure(PageResult(source_url=entry.url, depth=entry.depth, error=str(e)))
                continue

            frontier.record_page()
            logger.info("Crawled page %d: %s", ordinal, entry.url)
            queued = sum(1 for link_url in links if frontier.enqueue(link_url, entry.depth + 1))
            if links:
                logger.debug("Queued %d new links from %s (depth %d)", queued, entry.url, entry.depth)
            result.add_page(page)

        result.finalize()
        logger.info(
            "Crawl completed: %d pages processed, %d failed, %d characters",
            result.pages_crawled,
            len(result.failed_pages),
            result.character_count,
        )
        return result

    def _process_page(
        self,
        entry: FrontierEntry,
        ordinal: int,
        response: HttpResponse,
        policy: CrawlPolicy,
    ) -> tuple[PageResult, List[str]]:
        """Build the PageResult for a fetched page and list the links it contributes."""
        document = self.page_processor.parse(response.text)

        title = self.page_processor.extract_title(document) if ordinal == 1 else None
        self.page_processor.check_wait_selector(document, entry.url, policy)

        links: List[str] = []
        if ordinal < policy.max_pages and entry.depth < policy.max_depth:
            links = self.link_extractor.extract(document, entry.url, policy)

        markdown = self.page_processor.to_markdown(document, policy)
        page = PageResult(
            source_url=entry.url,
            markdown=markdown,
            title=title,
            ordinal=ordinal,
            depth=entry.depth,
        )
        return page, links
