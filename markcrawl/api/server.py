from fastapi import FastAPI

from markcrawl.api.routers import create_crawl_router, create_systems_router


def create_app(crawl_service, results_repo, container_env: dict) -> FastAPI:
    """Return the FastAPI application exposing the crawl endpoints."""
    app = FastAPI(title="markcrawl", description="Crawl web pages into markdown")
    app.include_router(create_crawl_router(crawl_service, results_repo))
    app.include_router(create_systems_router(container_env))
    return app
