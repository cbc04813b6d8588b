from .engine import make_engine, init_orm
from .models import Base, CrawlResultRecord

__all__ = [
    "make_engine",
    "init_orm",
    "Base",
    "CrawlResultRecord",
]
