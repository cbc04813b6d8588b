from bs4 import BeautifulSoup

from markcrawl.domain import CrawlPolicy
from markcrawl.services.link_extractor import LinkExtractor, matches_pattern


def _doc(*hrefs):
    body = "".join(f'<a href="{h}">link</a>' for h in hrefs)
    return BeautifulSoup(f"<html><body>{body}</body></html>", "html.parser")


def _extract(hrefs, page_url="https://example.com/", **policy_kwargs):
    policy = CrawlPolicy(url=policy_kwargs.pop("seed", "https://example.com/"), **policy_kwargs)
    return LinkExtractor().extract(_doc(*hrefs), page_url, policy)


def test_relative_links_resolve_against_page_url():
    links = _extract(["/a", "b"], page_url="https://example.com/docs/")
    assert links == ["https://example.com/a", "https://example.com/docs/b"]


def test_ignored_prefixes_are_skipped():
    links = _extract(["#top", "mailto:me@example.com", "tel:123", "javascript:void(0)", "/ok"])
    assert links == ["https://example.com/ok"]


def test_fragments_are_dropped_and_duplicates_collapsed():
    links = _extract(["/a#one", "/a#two", "/a"])
    assert links == ["https://example.com/a"]


def test_non_http_schemes_are_skipped():
    links = _extract(["ftp://example.com/file", "data:text/plain,hi", "/ok"])
    assert links == ["https://example.com/ok"]


def test_same_host_only_by_default():
    links = _extract(["https://other.org/x", "https://blog.example.com/y", "https://example.com/z"])
    assert links == ["https://example.com/z"]


def test_subdomains_allowed_when_requested():
    links = _extract(
        ["https://blog.example.com/y", "https://other.org/x"],
        include_subdomains=True,
    )
    assert links == ["https://blog.example.com/y"]


def test_parent_domain_allowed_from_subdomain_seed():
    links = _extract(
        ["https://example.com/root"],
        seed="https://docs.example.com/",
        page_url="https://docs.example.com/",
        include_subdomains=True,
    )
    assert links == ["https://example.com/root"]


def test_external_links_followed_when_requested():
    links = _extract(["https://other.org/x"], follow_external_links=True)
    assert links == ["https://other.org/x"]


def test_host_rules_use_seed_not_current_page():
    # The page lives on a subdomain but the seed host stays authoritative.
    links = _extract(
        ["https://blog.example.com/next", "https://example.com/home"],
        page_url="https://blog.example.com/post",
    )
    assert links == ["https://example.com/home"]


def test_exclude_patterns_win_over_include_patterns():
    links = _extract(
        ["/docs/a", "/docs/private/b", "/blog/c"],
        include_patterns=("/docs/",),
        exclude_patterns=("private",),
    )
    assert links == ["https://example.com/docs/a"]


def test_glob_patterns():
    links = _extract(["/a.pdf", "/a.html"], exclude_patterns=("*.pdf",))
    assert links == ["https://example.com/a.html"]


def test_matches_pattern_substring_and_glob():
    assert matches_pattern("https://example.com/docs/x", "/docs/")
    assert not matches_pattern("https://example.com/blog/x", "/docs/")
    assert matches_pattern("https://example.com/x.pdf", "*.pdf")
    assert not matches_pattern("https://example.com/x", "")
