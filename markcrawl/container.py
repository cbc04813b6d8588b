"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from markcrawl.db.engine import init_orm, make_engine
from markcrawl.repository.crawl_results import CrawlResultsRepository
from markcrawl.services.content_filter import ContentFilter
from markcrawl.services.content_locator import ContentLocator
from markcrawl.services.crawl_executor import CrawlExecutor
from markcrawl.services.crawl_service import CrawlService
from markcrawl.services.fetcher import HttpServiceFetcher
from markcrawl.services.fetcher_factory import FetcherFactory
from markcrawl.services.headless_browser_fetcher import PlaywrightHeadlessFetcher, PlaywrightHeadlessOptions
from markcrawl.services.http_service import HttpService
from markcrawl.services.link_extractor import LinkExtractor
from markcrawl.services.markdown_converter import HtmlMarkdownConverter
from markcrawl.services.page_processor import PageProcessor
from markcrawl.services.sanitizer import Sanitizer
from markcrawl import config as env
from sqlalchemy.orm import sessionmaker


# Environment variables used by the container (read via `markcrawl.config` helpers).
#
# DATABASE_URL (str, default: "sqlite:///markcrawl.db")
#   SQLAlchemy URL of the crawl results store. Tables are created on startup.
#
# USER_AGENT (str, default: desktop Chrome UA string)
#   User-Agent header for outbound HTTP requests and the headless browser.
#   Per-crawl custom headers are layered on top.
#
# HTTP_TIMEOUT (int seconds, default: 30)
#   Fallback per-fetch timeout; crawl requests normally carry their own.
#
# MARKCRAWL_STRATEGIES (comma-separated, default: "headless_chromium,http")
#   Fetch modes tried in order for every crawl. The first one producing pages wins.
#
# MARKCRAWL_CRAWL_TIMEOUT (float seconds, default: 300)
#   Wall-clock bound for one crawl invocation; pages completed before it fires are kept.
#   Zero or a negative value disables it.
#
# MARKCRAWL_HEADLESS_WAIT_UNTIL (str, default: "networkidle")
#   Playwright navigation event to wait for before reading the rendered DOM.
#
# MARKCRAWL_HOST / MARKCRAWL_PORT (default: 0.0.0.0 / 8000)
#   Bind address of the API server started by run.py.
#
# MARKCRAWL_LOG_LEVEL (str, default: "INFO")
ENV = {
    "DATABASE_URL": env.get_str_env("DATABASE_URL", "sqlite:///markcrawl.db"),
    "USER_AGENT": env.get_str_env("USER_AGENT", env.DEFAULT_USER_AGENT),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 30),
    "MARKCRAWL_STRATEGIES": env.get_list_env("MARKCRAWL_STRATEGIES", ["headless_chromium", "http"]),
    "MARKCRAWL_CRAWL_TIMEOUT": env.get_float_env("MARKCRAWL_CRAWL_TIMEOUT", 300.0),
    "MARKCRAWL_HEADLESS_WAIT_UNTIL": env.get_str_env("MARKCRAWL_HEADLESS_WAIT_UNTIL", "networkidle"),
    "MARKCRAWL_HOST": env.get_str_env("MARKCRAWL_HOST", "0.0.0.0"),
    "MARKCRAWL_PORT": env.get_int_env("MARKCRAWL_PORT", 8000),
    "MARKCRAWL_LOG_LEVEL": env.get_str_env("MARKCRAWL_LOG_LEVEL", "INFO").strip().upper(),
}


def build_strategy_selector(fetcher_factory: FetcherFactory, fetch_modes):
    if isinstance(fetch_modes, str):
        fetch_modes = [m for m in fetch_modes.split(",") if m.strip()]
    return fetcher_factory.selector(fetch_modes)


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the markcrawl application."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Database engine - Singleton to reuse connection pool; tables created on first use
    db_engine = providers.Singleton(
        init_orm,
        engine=providers.Singleton(make_engine, database_url=config.DATABASE_URL),
    )
    # Session factory bound to the engine
    session_factory = providers.Factory(
        sessionmaker,
        bind=db_engine,
        future=True
    )

    crawl_results_repository = providers.Singleton(
        CrawlResultsRepository,
        session_factory=session_factory
    )

    # Fetching
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int)
    )

    page_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    headless_fetcher = providers.Singleton(
        PlaywrightHeadlessFetcher,
        user_agent=config.USER_AGENT.as_(str),
        options=providers.Factory(
            PlaywrightHeadlessOptions,
            wait_until=config.MARKCRAWL_HEADLESS_WAIT_UNTIL.as_(str),
        ),
    )

    # Page pipeline
    page_processor = providers.Singleton(
        PageProcessor,
        locator=providers.Singleton(ContentLocator),
        sanitizer=providers.Singleton(Sanitizer),
        converter=providers.Singleton(HtmlMarkdownConverter),
        content_filter=providers.Singleton(ContentFilter),
    )

    link_extractor = providers.Singleton(LinkExtractor)

    crawl_executor = providers.Singleton(
        CrawlExecutor,
        link_extractor=link_extractor,
        page_processor=page_processor,
    )

    fetcher_factory = providers.Singleton(
        FetcherFactory,
        executor=crawl_executor,
        http_fetcher=page_fetcher,
        headless_fetcher=headless_fetcher,
    )

    strategy_selector = providers.Singleton(
        build_strategy_selector,
        fetcher_factory=fetcher_factory,
        fetch_modes=config.MARKCRAWL_STRATEGIES,
    )

    crawl_service = providers.Singleton(
        CrawlService,
        selector=strategy_selector,
        results_repo=crawl_results_repository,
        crawl_timeout_seconds=config.MARKCRAWL_CRAWL_TIMEOUT.as_(float),
    )
