import fnmatch
import logging
from typing import Iterable, List, Optional
from urllib.parse import urldefrag, urljoin, urlparse

from markcrawl.domain.crawl_policy import CrawlPolicy
from markcrawl.domain.dom import DomNode

logger = logging.getLogger(__name__)

IGNORED_PREFIXES = ("#", "mailto:", "tel:", "javascript:")
CRAWLABLE_SCHEMES = ("http", "https")
_WILDCARDS = set("*?[")


def _host(url: str) -> Optional[str]:
    return urlparse(url).hostname


def matches_pattern(url: str, pattern: str) -> bool:
    """Glob match when the pattern has wildcards, substring match otherwise."""
    if not pattern:
        return False
    if _WILDCARDS.intersection(pattern):
        return fnmatch.fnmatchcase(url, pattern)
    return pattern in url


class LinkExtractor:
    """Collect crawlable links from a parsed page and apply the crawl policy.

    Host rules are evaluated against the seed URL of the policy, not the page
    being scanned, so following a subdomain does not widen the crawl further.
    """

    def extract(self, document: DomNode, page_url: str, policy: CrawlPolicy) -> List[str]:
        seed_host = _host(policy.url)
        admitted: List[str] = []
        seen = set()
        for href in self._hrefs(document):
            link_url = self._resolve(page_url, href)
            if link_url is None or link_url in seen:
                continue
            seen.add(link_url)
            if not self._host_allowed(seed_host, _host(link_url), policy):
                logger.debug("Skipping (host policy) %s", link_url)
                continue
            if not self._patterns_allow(link_url, policy):
                logger.debug("Skipping (pattern policy) %s", link_url)
                continue
            admitted.append(link_url)
        return admitted

    def _hrefs(self, document: DomNode) -> Iterable[str]:
        for a in document.find_all("a", href=True):
            href = a.attrs.get("href")
            if isinstance(href, str):
                yield href.strip()

    def _resolve(self, page_url: str, href: str) -> Optional[str]:
        if not href or href.lower().startswith(IGNORED_PREFIXES):
            return None
        try:
            absolute, _fragment = urldefrag(urljoin(page_url, href))
            parsed = urlparse(absolute)
        except ValueError:
            logger.debug("Dropping malformed link %r on %s", href, page_url)
            return None
        if parsed.scheme not in CRAWLABLE_SCHEMES or not parsed.hostname:
            return None
        return absolute

    def _host_allowed(self, seed_host: Optional[str], link_host: Optional[str], policy: CrawlPolicy) -> bool:
        if not link_host:
            return False
        if link_host == seed_host:
            return True
        if policy.include_subdomains and seed_host and (
            link_host.endswith("." + seed_host) or seed_host.endswith("." + link_host)
        ):
            return True
        return bool(policy.follow_external_links)

    def _patterns_allow(self, url: str, policy: CrawlPolicy) -> bool:
        if any(matches_pattern(url, p) for p in policy.exclude_patterns):
            return False
        if policy.include_patterns:
            return any(matches_pattern(url, p) for p in policy.include_patterns)
        return True
