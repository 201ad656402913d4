import asyncio

import pytest

from bookhub.interfaces.book_search import BookSearchClient
from bookhub.models import BookRecord, SearchField


class MockBookSearchClient(BookSearchClient):
    def __init__(
        self,
        results: list[BookRecord] | None = None,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ):
        self._results = results or []
        self._error = error
        self._gate = gate
        self.calls: list[tuple[str, SearchField]] = []

    async def search(self, query: str, field: SearchField) -> list[BookRecord]:
        self.calls.append((query, field))
        if self._gate is not None:
            await self._gate.wait()
        if self._error:
            raise self._error
        return self._results


@pytest.fixture
def tolkien_docs() -> list[dict]:
    return [
        {
            "key": "/works/OL27448W",
            "title": "The Lord of the Rings",
            "author_name": ["J.R.R. Tolkien"],
            "cover_i": 14625765,
            "first_publish_year": 1954,
        },
        {
            "key": "/works/OL262758W",
            "title": "The Hobbit",
            "author_name": "J.R.R. Tolkien",
            "cover_i": 14627509,
            "first_publish_year": 1937,
        },
        {
            "key": "/works/OL27513W",
            "title": "The Silmarillion",
            "author_name": ["J.R.R. Tolkien", "Christopher Tolkien"],
            "first_publish_year": 1977,
        },
    ]


@pytest.fixture
def tolkien_records(tolkien_docs) -> list[BookRecord]:
    return [BookRecord.model_validate(doc) for doc in tolkien_docs]
