"""Search page for the DocShelf web UI."""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from docshelf import __version__

VERSION_PLACEHOLDER = "{{ version }}"

router = APIRouter()


@lru_cache(maxsize=1)
def _load_template() -> str:
    """Read the bundled page once and stamp the package version into it."""
    template = files("docshelf.web").joinpath("templates", "index.html")
    return template.read_text(encoding="utf-8").replace(VERSION_PLACEHOLDER, __version__)


@router.get("/", response_class=HTMLResponse)
async def search_page() -> HTMLResponse:
    return HTMLResponse(content=_load_template())
