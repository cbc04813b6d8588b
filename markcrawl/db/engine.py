from typing import Dict, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from markcrawl import config
from markcrawl.db.models import Base

# Simple cache to avoid creating multiple Engine objects per URL in the same process.
_ENGINES: Dict[str, Engine] = {}


def make_engine(database_url: Optional[str] = None) -> Engine:
    """Create or return a cached SQLAlchemy Engine for `database_url`.

    Caches one Engine instance per URL to avoid the cost of creating many
    engines when repository instances are created.
    """
    database_url = database_url or config.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not set")
    engine = _ENGINES.get(database_url)
    if engine is None:
        kwargs = {}
        if database_url.startswith("sqlite"):
            # API requests run in a worker thread pool.
            kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, otherwise every thread sees an empty database.
                kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, **kwargs)
        _ENGINES[database_url] = engine
    return engine


def init_orm(engine: Engine) -> Engine:
    """Create missing tables for the declarative models."""
    Base.metadata.create_all(engine)
    return engine
