import pytest

from bookhub.models import BookRecord
from bookhub.services.renderer import ResultRenderer

PLACEHOLDER = "https://placehold.co/180x250/cbd5e1/475569?text=No+Cover"


@pytest.fixture
def renderer() -> ResultRenderer:
    return ResultRenderer(
        cover_base_url="https://covers.openlibrary.org/b/id",
        placeholder_url=PLACEHOLDER,
    )


class TestCoverUrl:
    def test_with_cover_id(self, renderer):
        record = BookRecord(cover_i=14625765)
        assert renderer.cover_url(record) == "https://covers.openlibrary.org/b/id/14625765-M.jpg"

    def test_missing_cover_id(self, renderer):
        assert renderer.cover_url(BookRecord(title="No cover")) == PLACEHOLDER

    def test_zero_cover_id_uses_placeholder(self, renderer):
        assert renderer.cover_url(BookRecord(cover_i=0)) == PLACEHOLDER

    def test_image_failure_swaps_to_placeholder(self, renderer):
        card = renderer.render_card(BookRecord(title="Broken", cover_i=1))
        assert card.cover_url != PLACEHOLDER

        failed = renderer.with_image_fallback(card)

        assert failed.cover_url == PLACEHOLDER
        assert failed.title == card.title

    def test_image_failure_on_placeholder_is_stable(self, renderer):
        card = renderer.render_card(BookRecord(title="No cover"))
        assert renderer.with_image_fallback(card).cover_url == PLACEHOLDER


class TestDisplayText:
    def test_single_author(self, renderer):
        assert renderer.author_text(BookRecord(author_name=["Octavia E. Butler"])) == "Octavia E. Butler"

    def test_multiple_authors_joined(self, renderer):
        record = BookRecord(author_name=["Terry Pratchett", "Neil Gaiman"])
        assert renderer.author_text(record) == "Terry Pratchett, Neil Gaiman"

    def test_no_authors(self, renderer):
        assert renderer.author_text(BookRecord()) == "Unknown Author"

    def test_year(self, renderer):
        assert renderer.year_text(BookRecord(first_publish_year=1965)) == "1965"

    def test_missing_year(self, renderer):
        assert renderer.year_text(BookRecord()) == "N/A"

    def test_zero_year_shows_not_available(self, renderer):
        assert renderer.year_text(BookRecord(first_publish_year=0)) == "N/A"


class TestRenderCard:
    def test_full_record(self, renderer, tolkien_records):
        card = renderer.render_card(tolkien_records[0])
        assert card.key == "/works/OL27448W"
        assert card.title == "The Lord of the Rings"
        assert card.author_text == "J.R.R. Tolkien"
        assert card.year_text == "1954"
        assert card.alt_text == "Cover of The Lord of the Rings"
        assert card.fallback_url == PLACEHOLDER

    def test_empty_record(self, renderer):
        card = renderer.render_card(BookRecord())
        assert card.title == "Untitled"
        assert card.author_text == "Unknown Author"
        assert card.year_text == "N/A"
        assert card.cover_url == PLACEHOLDER

    def test_grid_keeps_order_and_count(self, renderer, tolkien_records):
        cards = renderer.render_grid(tolkien_records)
        assert [c.title for c in cards] == [r.title for r in tolkien_records]
        assert cards[2].cover_url == PLACEHOLDER

    def test_default_settings(self):
        card = ResultRenderer().render_card(BookRecord(cover_i=7))
        assert card.cover_url == "https://covers.openlibrary.org/b/id/7-M.jpg"
