from collections.abc import Callable
from dataclasses import dataclass

from bookhub.models import BookRecord, SearchField, SearchState, SearchStatus

EMPTY_QUERY_MESSAGE = "Please enter a search query."
NO_RESULTS_MESSAGE = "No books found. Try a different search term."
GENERIC_ERROR_MESSAGE = "An error occurred. Please try again later."


@dataclass(frozen=True)
class EditQuery:
    query: str


@dataclass(frozen=True)
class EditField:
    field: SearchField


@dataclass(frozen=True)
class StartSearch:
    query: str
    field: SearchField


@dataclass(frozen=True)
class RejectEmptyQuery:
    query: str
    field: SearchField


@dataclass(frozen=True)
class ReceiveSuccess:
    request_id: int
    records: tuple[BookRecord, ...]


@dataclass(frozen=True)
class ReceiveEmpty:
    request_id: int


@dataclass(frozen=True)
class ReceiveError:
    request_id: int


Event = (
    EditQuery | EditField | StartSearch | RejectEmptyQuery | ReceiveSuccess | ReceiveEmpty | ReceiveError
)
Listener = Callable[[SearchState], None]


def reduce(state: SearchState, event: Event) -> SearchState:
    """Return the snapshot that follows ``state`` after ``event``.

    Result events for anything other than the latest started search are
    dropped and the current snapshot is returned unchanged.
    """
    if isinstance(event, EditQuery):
        return state.model_copy(update={"query": event.query})

    if isinstance(event, EditField):
        return state.model_copy(update={"field": event.field})

    if isinstance(event, StartSearch):
        return state.model_copy(
            update={
                "query": event.query,
                "field": event.field,
                "results": (),
                "message": "",
                "loading": True,
                "status": SearchStatus.LOADING,
                "request_id": state.request_id + 1,
            }
        )

    if isinstance(event, RejectEmptyQuery):
        # Bumps the id so a search still in flight cannot land afterwards.
        return state.model_copy(
            update={
                "query": event.query,
                "field": event.field,
                "results": (),
                "message": EMPTY_QUERY_MESSAGE,
                "loading": False,
                "status": SearchStatus.ERROR,
                "request_id": state.request_id + 1,
            }
        )

    if isinstance(event, (ReceiveSuccess, ReceiveEmpty, ReceiveError)):
        if event.request_id != state.request_id:
            return state
        if isinstance(event, ReceiveSuccess):
            update = {"results": event.records, "message": "", "status": SearchStatus.SUCCESS}
        elif isinstance(event, ReceiveEmpty):
            update = {"results": (), "message": NO_RESULTS_MESSAGE, "status": SearchStatus.EMPTY}
        else:
            update = {"results": (), "message": GENERIC_ERROR_MESSAGE, "status": SearchStatus.ERROR}
        return state.model_copy(update={**update, "loading": False})

    raise TypeError(f"Unknown search event: {event!r}")


class SearchStore:
    """Holds the current snapshot and tells subscribers about each new one."""

    def __init__(self, initial: SearchState | None = None) -> None:
        self._state = initial or SearchState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> SearchState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> SearchState:
        new_state = reduce(self._state, event)
        if new_state is self._state:
            return new_state
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state
