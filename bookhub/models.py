from enum import Enum

from pydantic import BaseModel, ConfigDict, computed_field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class SearchField(str, Enum):
    """Which search.json parameter carries the query. Values are the wire keys."""

    GENERAL = "q"
    TITLE = "title"
    AUTHOR = "author"
    SUBJECT = "subject"
    PUBLISHER = "publisher"
    ISBN = "isbn"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]

    @property
    def placeholder(self) -> str:
        return PLACEHOLDERS[self]


FIELD_LABELS: dict[SearchField, str] = {
    SearchField.GENERAL: "General",
    SearchField.TITLE: "Title",
    SearchField.AUTHOR: "Author",
    SearchField.SUBJECT: "Subject",
    SearchField.PUBLISHER: "Publisher",
    SearchField.ISBN: "ISBN",
}

PLACEHOLDERS: dict[SearchField, str] = {
    SearchField.GENERAL: "Search for books by title, author, or keyword...",
    SearchField.TITLE: "Search by book title...",
    SearchField.AUTHOR: "Search by author name...",
    SearchField.SUBJECT: 'Search by subject (e.g., "science fiction" or "history")...',
    SearchField.PUBLISHER: "Search by publisher...",
    SearchField.ISBN: "Search by ISBN (e.g., 9780321765723)...",
}


class BookRecord(BaseModel):
    """One doc from the catalog's search.json response, keyed as on the wire.

    Parsing never rejects a doc: a field of an unexpected type is coerced to
    text where that makes sense and dropped to ``None`` otherwise.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    key: str | None = None
    title: str | None = None
    author_name: tuple[str, ...] = ()
    cover_i: int | None = None
    first_publish_year: int | None = None

    @field_validator("key", "title", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return None

    @field_validator("author_name", mode="before")
    @classmethod
    def _coerce_author_name(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (int, float)):
            return (str(value),)
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(
            name if isinstance(name, str) else str(name)
            for name in value
            if isinstance(name, (str, int, float))
        )

    @field_validator("cover_i", "first_publish_year", mode="before")
    @classmethod
    def _coerce_number(cls, value):
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


class SearchState(CamelModel):
    model_config = ConfigDict(frozen=True)

    query: str = ""
    field: SearchField = SearchField.GENERAL
    results: tuple[BookRecord, ...] = ()
    loading: bool = False
    message: str = ""
    status: SearchStatus = SearchStatus.IDLE
    request_id: int = 0

    @computed_field
    @property
    def placeholder(self) -> str:
        return self.field.placeholder


class BookCard(CamelModel):
    key: str | None = None
    title: str
    author_text: str
    year_text: str
    cover_url: str
    fallback_url: str
    alt_text: str


class SearchResponse(CamelModel):
    state: SearchState
    cards: list[BookCard] = []


class PlaceholderResponse(CamelModel):
    field: SearchField
    placeholder: str


class HealthResponse(CamelModel):
    status: str
    version: str
