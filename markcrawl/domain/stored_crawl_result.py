from datetime import datetime
from typing import Optional


class StoredCrawlResult:
    def __init__(self, result_id: Optional[int], url: str, markdown: str, title: Optional[str], character_count: int, word_count: int, crawled_at: Optional[datetime] = None):
        self.result_id = result_id
        self.url = url
        self.markdown = markdown
        self.title = title
        self.character_count = character_count
        self.word_count = word_count
        self.crawled_at = crawled_at

    def to_dict(self) -> dict:
        return {
            "id": self.result_id,
            "url": self.url,
            "markdown": self.markdown,
            "title": self.title,
            "crawledAt": self.crawled_at.isoformat() if self.crawled_at else None,
            "characterCount": self.character_count,
            "wordCount": self.word_count,
        }

    def __repr__(self):
        return f"<StoredCrawlResult id={self.result_id} url={self.url}>"
