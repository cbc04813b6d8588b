import threading
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from markcrawl.db.models import CrawlResultRecord
from markcrawl.domain import StoredCrawlResult


class CrawlResultsRepository:
    """Repository for stored crawl results.

    Requires an explicit `session_factory` (callable returning a `Session`).
    Writes are serialized with a lock; reads are not.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory
        self._write_lock = threading.Lock()

    @staticmethod
    def _sanitize_text(val: Optional[str]) -> Optional[str]:
        """Remove NUL (\x00) characters from text fields to satisfy DB constraints.

        Postgres TEXT columns cannot contain NULs; binary responses misclassified
        as text may produce them in the markdown.
        """
        if isinstance(val, str):
            return val.replace("\x00", "")
        return val

    def get_session(self) -> Session:
        return self.session_factory()

    def _to_domain(self, row: CrawlResultRecord) -> StoredCrawlResult:
        return StoredCrawlResult(
            result_id=row.id,
            url=row.url,
            markdown=row.markdown,
            title=row.title,
            character_count=row.character_count,
            word_count=row.word_count,
            crawled_at=row.crawled_at,
        )

    def create_result(self, url: str, markdown: str, title: Optional[str], character_count: int, word_count: int) -> StoredCrawlResult:
        with self._write_lock:
            with self.get_session() as session:
                row = CrawlResultRecord(
                    url=url,
                    markdown=self._sanitize_text(markdown),
                    title=self._sanitize_text(title),
                    character_count=character_count,
                    word_count=word_count,
                    crawled_at=datetime.now(timezone.utc),
                )
                session.add(row)
                session.commit()
                session.refresh(row)
                return self._to_domain(row)

    def list_recent(self, limit: int = 5) -> List[StoredCrawlResult]:
        """Return up to `limit` results, most recent first."""
        with self.get_session() as session:
            q = (
                select(CrawlResultRecord)
                .order_by(CrawlResultRecord.crawled_at.desc(), CrawlResultRecord.id.desc())
                .limit(limit)
            )
            rows = session.execute(q).scalars().all()
            return [self._to_domain(r) for r in rows]

    def get_result(self, result_id: int) -> Optional[StoredCrawlResult]:
        with self.get_session() as session:
            q = select(CrawlResultRecord).where(CrawlResultRecord.id == result_id)
            row = session.execute(q).scalars().first()
            if not row:
                return None
            return self._to_domain(row)
