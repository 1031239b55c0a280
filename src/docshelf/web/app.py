"""FastAPI application backing the DocShelf web UI."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from docshelf.config import AppConfig
from docshelf.errors import InvalidQueryError, LoadError, NotFoundError
from docshelf.index.search import QueryService
from docshelf.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

MAX_LIMIT = 200

app = FastAPI(title="DocShelf Web", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.include_router(frontend_router)


class SearchPayload(BaseModel):
    query: str
    category: str | None = None
    limit: int = 50


def _load_service(config: AppConfig) -> QueryService:
    service = QueryService.from_config(config)
    service.start(config.resolve_root(Path.cwd()))
    return service


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    preloaded: QueryService | None = getattr(app.state, "service", None)
    if preloaded is not None and preloaded.ready:
        LOGGER.info("Serving preloaded corpus from %s", preloaded.store.root)
        return

    config: AppConfig = getattr(app.state, "config", None) or AppConfig()
    app.state.service = None
    # Uvicorn accepts no requests until this hook returns
    try:
        app.state.service = await asyncio.to_thread(_load_service, config)
    except LoadError:
        LOGGER.exception("Failed to load corpus from %s", config.root)
        raise


def get_service(request: Request) -> QueryService:
    service: QueryService | None = getattr(request.app.state, "service", None)
    if service is None or not service.ready:
        raise HTTPException(status_code=503, detail="Corpus is not loaded yet")
    return service


@app.get("/health")
async def health(request: Request) -> dict[str, Any]:
    service: QueryService | None = getattr(request.app.state, "service", None)
    if service is None:
        return {"state": "loading"}
    payload: dict[str, Any] = {"state": service.state.value}
    if service.ready:
        payload.update(asdict(service.stats()))
    return payload


@app.get("/documents")
async def list_documents(
    category: str | None = None, service: QueryService = Depends(get_service)
) -> dict[str, List[dict[str, str]]]:
    documents = service.list_by_category(category)
    return {
        "documents": [
            {"id": doc.id, "title": doc.title, "category": doc.category}
            for doc in documents
        ]
    }


@app.get("/documents/{doc_id:path}")
async def get_document(
    doc_id: str, service: QueryService = Depends(get_service)
) -> dict[str, Any]:
    try:
        document = service.find_by_id(doc_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=404, detail={"error": "not_found", "id": exc.doc_id}
        ) from exc
    return asdict(document)


@app.post("/search")
async def search_documents(
    payload: SearchPayload, service: QueryService = Depends(get_service)
) -> dict[str, Any]:
    limit = max(1, min(payload.limit, MAX_LIMIT))
    try:
        documents = service.search_keyword(
            payload.query, category=payload.category, limit=limit
        )
    except InvalidQueryError as exc:
        raise HTTPException(
            status_code=400,
            detail={"error": "invalid_query", "query": exc.keyword, "reason": exc.reason},
        ) from exc

    results = [asdict(service.summarize(doc, payload.query)) for doc in documents]
    return {"query": payload.query, "results": results}


@app.get("/categories")
async def list_categories(service: QueryService = Depends(get_service)) -> dict[str, List[str]]:
    return {"categories": service.list_categories()}
