import logging
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from bookhub.config import settings
from bookhub.interfaces.book_search import BookSearchClient
from bookhub.models import (
    PLACEHOLDERS,
    HealthResponse,
    PlaceholderResponse,
    SearchField,
    SearchResponse,
    SearchState,
)
from bookhub.services.controller import SearchController
from bookhub.services.openlibrary import OpenLibraryClient
from bookhub.services.renderer import ResultRenderer

VERSION = "0.1.0"

logger = logging.getLogger(__name__)

book_search: BookSearchClient | None = None
renderer = ResultRenderer()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    global book_search
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    async with httpx.AsyncClient(
        timeout=settings.request_timeout, follow_redirects=True
    ) as client:
        book_search = OpenLibraryClient(client)
        yield
    book_search = None


app = FastAPI(title="Book Hub", version=VERSION, lifespan=lifespan)


def _log_transition(state: SearchState) -> None:
    logger.debug(
        "search #%s %s: query=%r field=%s results=%d",
        state.request_id,
        state.status.value,
        state.query,
        state.field.value,
        len(state.results),
    )


def _new_controller() -> SearchController:
    assert book_search is not None
    controller = SearchController(book_search)
    controller.store.subscribe(_log_transition)
    return controller


async def _run_search(query: str | None, field: SearchField) -> SearchState:
    controller = _new_controller()
    if query is None:
        return controller.set_field(field)
    return await controller.search(query, field)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy", version=VERSION)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, query: str | None = None, field: SearchField = SearchField.GENERAL):
    state = await _run_search(query, field)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state,
            "cards": renderer.render_grid(state.results),
            "fields": list(SearchField),
            "placeholders": {f.value: text for f, text in PLACEHOLDERS.items()},
        },
    )


@app.get("/api/search", response_model=SearchResponse)
async def api_search(query: str = "", field: SearchField = SearchField.GENERAL):
    state = await _run_search(query, field)
    return SearchResponse(state=state, cards=renderer.render_grid(state.results))


@app.get("/api/placeholder", response_model=PlaceholderResponse)
async def api_placeholder(field: SearchField = SearchField.GENERAL):
    return PlaceholderResponse(field=field, placeholder=field.placeholder)
