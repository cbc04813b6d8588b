from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import pytest

from markcrawl.db.models import Base
from markcrawl.repository.crawl_results import CrawlResultsRepository


@pytest.fixture
def repo():
    engine = create_engine("sqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    session_factory = sessionmaker(bind=engine, future=True)
    return CrawlResultsRepository(session_factory)


def _create(repo, url="https://example.com/", markdown="# Hi"):
    return repo.create_result(url=url, markdown=markdown, title="Hi", character_count=len(markdown), word_count=2)


def test_create_assigns_id_and_timestamp(repo):
    stored = _create(repo)
    assert stored.result_id is not None
    assert stored.crawled_at is not None
    assert stored.markdown == "# Hi"


def test_get_result_round_trip(repo):
    stored = _create(repo)
    fetched = repo.get_result(stored.result_id)
    assert fetched.url == "https://example.com/"
    assert fetched.title == "Hi"
    assert fetched.character_count == 4


def test_get_missing_result_returns_none(repo):
    assert repo.get_result(999) is None


def test_list_recent_newest_first_and_limited(repo):
    ids = [_create(repo, url=f"https://example.com/{i}").result_id for i in range(4)]
    recent = repo.list_recent(limit=2)
    assert [r.result_id for r in recent] == [ids[3], ids[2]]


def test_nul_characters_are_stripped(repo):
    stored = _create(repo, markdown="a\x00b")
    assert repo.get_result(stored.result_id).markdown == "ab"


def test_to_dict_uses_public_field_names(repo):
    data = _create(repo).to_dict()
    assert set(data) == {"id", "url", "markdown", "title", "crawledAt", "characterCount", "wordCount"}
    assert isinstance(data["crawledAt"], str)
