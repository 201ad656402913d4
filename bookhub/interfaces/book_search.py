from abc import ABC, abstractmethod

from bookhub.models import BookRecord, SearchField


class CatalogError(Exception):
    """The catalog could not be queried or its response could not be read."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BookSearchClient(ABC):
    @abstractmethod
    async def search(self, query: str, field: SearchField) -> list[BookRecord]:
        """Return the catalog's records for ``query`` in the order received.

        Raises ``CatalogError`` on any transport, status or parse failure.
        """
        ...
