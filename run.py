import logging
from typing import Optional

import uvicorn

from markcrawl.api.server import create_app
from markcrawl.container import Container


logger = logging.getLogger("markcrawl")


def build_app(container: Optional[Container] = None):
    container = container or Container()
    env = container.config()
    return create_app(
        crawl_service=container.crawl_service(),
        results_repo=container.crawl_results_repository(),
        container_env=env,
    )


def main(container: Optional[Container] = None):
    container = container or Container()
    env = container.config()
    logging.basicConfig(
        level=getattr(logging, str(env.get("MARKCRAWL_LOG_LEVEL", "INFO")), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = build_app(container)
    host = env.get("MARKCRAWL_HOST", "0.0.0.0")
    port = int(env.get("MARKCRAWL_PORT", 8000))
    logger.info("markcrawl API listening on %s:%s (strategies=%s)", host, port, env.get("MARKCRAWL_STRATEGIES"))
    uvicorn.run(app, host=host, port=port)


if __name__ == '__main__':
    main()
