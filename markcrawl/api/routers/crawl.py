import logging
import re
from typing import Dict, List, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from markcrawl.domain import CrawlPolicy
from markcrawl.exceptions import FatalSeedError

logger = logging.getLogger(__name__)

DEFAULT_RESULTS_LIMIT = 5
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class CrawlRequest(BaseModel):
    """Crawl request body. Field names follow the public camelCase API."""

    model_config = ConfigDict(populate_by_name=True)

    url: HttpUrl
    remove_images: bool = Field(False, alias="removeImages")
    remove_links: bool = Field(False, alias="removeLinks")
    crawl_depth: int = Field(1, ge=1, le=5, alias="crawlDepth")
    max_pages: int = Field(1, ge=1, le=100, alias="maxPages")
    include_subdomains: bool = Field(False, alias="includeSubdomains")
    follow_external_links: bool = Field(False, alias="followExternalLinks")
    wait_for_selector: Optional[str] = Field(None, alias="waitForSelector")
    exclude_patterns: List[str] = Field(default_factory=list, alias="excludePatterns")
    include_patterns: List[str] = Field(default_factory=list, alias="includePatterns")
    custom_headers: Dict[str, str] = Field(default_factory=dict, alias="customHeaders")
    timeout: int = Field(30, ge=5, le=120)
    extract_images: bool = Field(False, alias="extractImages")
    extract_tables: bool = Field(True, alias="extractTables")
    word_count_threshold: int = Field(1, ge=0, le=1000, alias="wordCountThreshold")
    only_main_content: bool = Field(True, alias="onlyMainContent")

    def to_policy(self) -> CrawlPolicy:
        return CrawlPolicy(
            url=str(self.url),
            max_depth=self.crawl_depth,
            max_pages=self.max_pages,
            include_subdomains=self.include_subdomains,
            follow_external_links=self.follow_external_links,
            wait_for_selector=self.wait_for_selector or None,
            exclude_patterns=tuple(self.exclude_patterns),
            include_patterns=tuple(self.include_patterns),
            custom_headers=dict(self.custom_headers),
            timeout_seconds=self.timeout,
            extract_images=self.extract_images,
            extract_tables=self.extract_tables,
            word_count_threshold=self.word_count_threshold,
            only_main_content=self.only_main_content,
            remove_images=self.remove_images,
            remove_links=self.remove_links,
        )


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def parse_limit(raw) -> int:
    """Leading integer of `raw`; anything unparsable or below 1 gives the default."""
    match = _LEADING_INT.match(str(raw)) if raw is not None else None
    if not match:
        return DEFAULT_RESULTS_LIMIT
    value = int(match.group(1))
    return value if value >= 1 else DEFAULT_RESULTS_LIMIT


def create_crawl_router(crawl_service, results_repo):
    router = APIRouter(prefix="/api", tags=["Crawl"])

    @router.post("/crawl")
    def crawl(req: CrawlRequest):
        policy = req.to_policy()
        try:
            stored = crawl_service.crawl_and_store(policy)
        except FatalSeedError as e:
            logger.warning("Crawl failed for %s: %s", policy.url, e)
            return _message(500, str(e) or "Failed to crawl the page")
        except Exception:
            logger.exception("Crawl error for %s", policy.url)
            return _message(500, "Failed to crawl the page")
        return stored.to_dict()

    @router.get("/crawl-results")
    def list_results(limit: Optional[str] = None):
        limit = parse_limit(limit)
        try:
            results = results_repo.list_recent(limit=limit)
        except Exception:
            logger.exception("Get crawl results error")
            return _message(500, "Failed to fetch crawl results")
        return [r.to_dict() for r in results]

    @router.get("/crawl-results/{result_id}")
    def get_result(result_id: int):
        try:
            result = results_repo.get_result(result_id)
        except Exception:
            logger.exception("Get crawl result error for %s", result_id)
            return _message(500, "Failed to fetch crawl result")
        if not result:
            return _message(404, "Crawl result not found")
        return result.to_dict()

    return router
