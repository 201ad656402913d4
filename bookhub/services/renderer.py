from collections.abc import Iterable

from bookhub.config import settings
from bookhub.models import BookCard, BookRecord

UNKNOWN_AUTHOR = "Unknown Author"
UNKNOWN_YEAR = "N/A"
UNTITLED = "Untitled"


class ResultRenderer:
    """Maps catalog records to display cards. Every optional field has a fallback."""

    def __init__(self, cover_base_url: str | None = None, placeholder_url: str | None = None) -> None:
        self._cover_base_url = (cover_base_url or settings.cover_base_url).rstrip("/")
        self.placeholder_url = placeholder_url or settings.placeholder_cover_url

    def cover_url(self, record: BookRecord) -> str:
        if not record.cover_i:
            return self.placeholder_url
        return f"{self._cover_base_url}/{record.cover_i}-M.jpg"

    @staticmethod
    def author_text(record: BookRecord) -> str:
        return ", ".join(record.author_name) if record.author_name else UNKNOWN_AUTHOR

    @staticmethod
    def year_text(record: BookRecord) -> str:
        return str(record.first_publish_year) if record.first_publish_year else UNKNOWN_YEAR

    def render_card(self, record: BookRecord) -> BookCard:
        title = record.title or UNTITLED
        return BookCard(
            key=record.key,
            title=title,
            author_text=self.author_text(record),
            year_text=self.year_text(record),
            cover_url=self.cover_url(record),
            fallback_url=self.placeholder_url,
            alt_text=f"Cover of {title}",
        )

    def render_grid(self, records: Iterable[BookRecord]) -> list[BookCard]:
        return [self.render_card(record) for record in records]

    @staticmethod
    def with_image_fallback(card: BookCard) -> BookCard:
        """The card as shown once its cover image has failed to load."""
        return card.model_copy(update={"cover_url": card.fallback_url})
