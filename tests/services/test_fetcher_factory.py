import pytest

from markcrawl.exceptions import PolicyViolation
from markcrawl.services.fetcher_factory import FetcherFactory
from markcrawl.services.strategies import RenderingStrategy, StaticFetchStrategy


class _DummyFetcher:
    def fetch(self, url: str, policy, stop_event=None):
        return url


def _factory():
    return FetcherFactory(executor=object(), http_fetcher=_DummyFetcher(), headless_fetcher=_DummyFetcher())


def test_fetcher_factory_requires_fetch_mode():
    with pytest.raises(PolicyViolation, match="fetch_mode is required"):
        _factory().get("")


def test_fetcher_factory_selects_http():
    assert isinstance(_factory().get(" http "), StaticFetchStrategy)


def test_fetcher_factory_selects_headless():
    assert isinstance(_factory().get("HEADLESS_CHROMIUM"), RenderingStrategy)


def test_fetcher_factory_unknown_mode_raises():
    with pytest.raises(PolicyViolation, match="Unknown fetch_mode"):
        _factory().get("nope")


def test_selector_keeps_order_and_drops_repeats():
    selector = _factory().selector(["headless_chromium", "http", "http"])
    assert [s.name for s in selector.strategies] == ["headless_chromium", "http"]


def test_selector_requires_a_mode():
    with pytest.raises(PolicyViolation):
        _factory().selector([])
