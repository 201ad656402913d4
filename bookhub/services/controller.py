import logging

from bookhub.interfaces.book_search import BookSearchClient, CatalogError
from bookhub.models import SearchField, SearchState
from bookhub.services.state import (
    EditField,
    EditQuery,
    ReceiveEmpty,
    ReceiveError,
    ReceiveSuccess,
    RejectEmptyQuery,
    SearchStore,
    StartSearch,
)

logger = logging.getLogger(__name__)


class SearchController:
    def __init__(self, book_search: BookSearchClient, store: SearchStore | None = None) -> None:
        self._search = book_search
        self._store = store or SearchStore()

    @property
    def store(self) -> SearchStore:
        return self._store

    @property
    def state(self) -> SearchState:
        return self._store.state

    def set_query(self, query: str) -> SearchState:
        return self._store.dispatch(EditQuery(query))

    def set_field(self, field: SearchField) -> SearchState:
        return self._store.dispatch(EditField(field))

    async def search(self, query: str | None = None, field: SearchField | None = None) -> SearchState:
        """Run one search and return the snapshot current once it settles.

        ``query`` and ``field`` default to what the session already holds. If a
        newer search was started while this one was in flight, its outcome is
        discarded and the newer snapshot is returned instead.
        """
        query = self.state.query if query is None else query
        field = self.state.field if field is None else field

        if not query.strip():
            return self._store.dispatch(RejectEmptyQuery(query, field))

        request_id = self._store.dispatch(StartSearch(query, field)).request_id
        try:
            records = await self._search.search(query, field)
        except CatalogError as e:
            logger.info("Search for %r by %s failed: %s", query, field.value, e)
            self._store.dispatch(ReceiveError(request_id))
        except Exception:
            logger.exception("Unexpected failure searching for %r by %s", query, field.value)
            self._store.dispatch(ReceiveError(request_id))
        else:
            if records:
                self._store.dispatch(ReceiveSuccess(request_id, tuple(records)))
            else:
                self._store.dispatch(ReceiveEmpty(request_id))
        finally:
            # Cancellation skips the handlers above; never leave this request loading.
            if self.state.loading and self.state.request_id == request_id:
                self._store.dispatch(ReceiveError(request_id))
        return self.state
