import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

from markcrawl.domain.crawl_policy import CrawlPolicy
from markcrawl.domain.dom import DomNode
from markcrawl.services.content_filter import ContentFilter
from markcrawl.services.content_locator import ContentLocator
from markcrawl.services.markdown_converter import HtmlMarkdownConverter
from markcrawl.services.sanitizer import Sanitizer

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


class PageProcessor:
    """Parse fetched HTML and run locate -> sanitize -> convert -> filter on it."""

    def __init__(
        self,
        locator: Optional[ContentLocator] = None,
        sanitizer: Optional[Sanitizer] = None,
        converter: Optional[HtmlMarkdownConverter] = None,
        content_filter: Optional[ContentFilter] = None,
        soup_factory: Optional[Callable[[str], DomNode]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))
        self.locator = locator or ContentLocator()
        self.sanitizer = sanitizer or Sanitizer(soup_factory=self._soup_factory)
        self.converter = converter or HtmlMarkdownConverter()
        self.content_filter = content_filter or ContentFilter()

    def parse(self, html: str) -> DomNode:
        return self._soup_factory(html or "")

    def extract_title(self, document: DomNode) -> str:
        title = document.find("title")
        if title is None:
            return UNTITLED
        text = title.get_text().strip()
        return text or UNTITLED

    def check_wait_selector(self, document: DomNode, url: str, policy: CrawlPolicy) -> bool:
        """Static pages cannot be waited on; report when the selector is absent."""
        selector = policy.wait_for_selector
        if not selector:
            return True
        try:
            found = bool(document.select(selector))
        except Exception:
            logger.warning("Invalid wait selector %r for %s", selector, url)
            return False
        if not found:
            logger.warning("Selector %r not found on %s", selector, url)
        return found

    def to_markdown(self, document: DomNode, policy: CrawlPolicy) -> str:
        root = self.locator.locate(document, policy.only_main_content)
        cleaned = self.sanitizer.sanitize(root, policy)
        markdown = self.converter.convert(
            cleaned,
            remove_links=policy.remove_links,
            remove_images=policy.remove_images,
        )
        return self.content_filter.filter(markdown, policy.word_count_threshold)
