import pytest

from bookhub.interfaces.book_search import BookSearchClient, CatalogError


class TestBookSearchClientABC:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BookSearchClient()

    def test_subclass_must_implement_search(self):
        class IncompleteSearch(BookSearchClient):
            pass

        with pytest.raises(TypeError):
            IncompleteSearch()


class TestCatalogError:
    def test_status_code_optional(self):
        assert CatalogError("unavailable").status_code is None

    def test_keeps_status_code(self):
        error = CatalogError("failed", status_code=502)
        assert error.status_code == 502
        assert str(error) == "failed"
