from __future__ import annotations


from sqlalchemy import Column, Integer, Text, DateTime, func
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class CrawlResultRecord(Base):
    __tablename__ = "crawl_results"

    id = Column(Integer, primary_key=True)
    url = Column(Text, nullable=False)
    markdown = Column(Text, nullable=False)
    title = Column(Text, nullable=True)
    crawled_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    character_count = Column(Integer, nullable=False)
    word_count = Column(Integer, nullable=False)
