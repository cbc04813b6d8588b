import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

from markcrawl.domain.crawl_policy import CrawlPolicy
from markcrawl.domain.dom import DomNode, class_tokens

logger = logging.getLogger(__name__)

ALWAYS_REMOVED_TAGS = ["script", "style", "noscript"]
FURNITURE_TAGS = ["nav", "footer", "aside", "header"]
FURNITURE_CLASSES = ("nav", "navigation", "sidebar", "footer", "header", "menu")


class Sanitizer:
    """Strip non-content elements from a content subtree.

    The input node is copied first, so the parsed source document stays intact.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], DomNode]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def sanitize(self, node: DomNode, policy: CrawlPolicy) -> DomNode:
        # Clone to avoid mutating the original
        cleaned = self._soup_factory(str(node))

        self._remove_tags(cleaned, ALWAYS_REMOVED_TAGS)

        if policy.only_main_content:
            self._remove_tags(cleaned, FURNITURE_TAGS)
            for element in cleaned.find_all(True):
                if getattr(element, "decomposed", False):
                    continue
                if any(token in FURNITURE_CLASSES for token in class_tokens(element)):
                    element.decompose()

        if not policy.extract_tables:
            self._remove_tags(cleaned, ["table"])

        # Images go only when extraction is off and removal is requested.
        if not policy.extract_images and policy.remove_images:
            self._remove_tags(cleaned, ["img"])

        return cleaned

    def _remove_tags(self, node: DomNode, names: list) -> None:
        for element in node.find_all(names):
            # Nested matches go away with their ancestor.
            if getattr(element, "decomposed", False):
                continue
            element.decompose()
