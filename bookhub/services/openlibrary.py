import logging
from typing import Any
from urllib.parse import quote

import httpx

from bookhub.config import settings
from bookhub.interfaces.book_search import BookSearchClient, CatalogError
from bookhub.models import BookRecord, SearchField

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone; everything else is percent-encoded.
_UNRESERVED = "-_.!~*'()"


class OpenLibraryClient(BookSearchClient):
    SEARCH_PATH = "/search.json"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._client = client
        self._base_url = (base_url or settings.catalog_base_url).rstrip("/")
        self._timeout = httpx.Timeout(timeout if timeout is not None else settings.request_timeout)
        self._headers = {
            "User-Agent": user_agent or settings.user_agent,
            "Accept": "application/json",
        }

    def build_url(self, query: str, field: SearchField) -> str:
        return f"{self._base_url}{self.SEARCH_PATH}?{field.value}={quote(query, safe=_UNRESERVED)}"

    async def search(self, query: str, field: SearchField) -> list[BookRecord]:
        url = self.build_url(query, field)
        payload = await self._get_json(url)
        return self.parse_docs(payload)

    async def _get_json(self, url: str) -> Any:
        try:
            if self._client is not None:
                response = await self._client.get(url, headers=self._headers)
            else:
                async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                    response = await client.get(url, headers=self._headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("Catalog request to %s returned status %s", url, status_code)
            raise CatalogError("Catalog request failed", status_code=status_code) from exc
        except httpx.RequestError as exc:
            logger.warning("Catalog request to %s failed: %s", url, exc)
            raise CatalogError("Catalog is unavailable") from exc
        except ValueError as exc:
            logger.warning("Catalog response from %s is not valid JSON: %s", url, exc)
            raise CatalogError("Catalog returned a malformed response") from exc

    @staticmethod
    def parse_docs(payload: Any) -> list[BookRecord]:
        """Turn a search.json body into records, preserving order.

        A missing or null ``docs`` means no matches. Only a body that is not an
        object, or a ``docs`` that is not a list, is a malformed response; odd
        individual docs are kept with their unreadable fields left empty.
        """
        if not isinstance(payload, dict):
            raise CatalogError("Catalog response is not a JSON object")
        docs = payload.get("docs")
        if docs is None:
            return []
        if not isinstance(docs, list):
            raise CatalogError("Catalog response 'docs' is not a list")
        return [BookRecord.model_validate(doc) if isinstance(doc, dict) else BookRecord() for doc in docs]
