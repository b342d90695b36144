from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from typing import Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from scholarpage.application.services.profile_service import load_profile
from scholarpage.application.services.publication_service import PublicationService
from scholarpage.core.config import SitePaths, load_paths
from scholarpage.core.errors import PublicationSourceError
from scholarpage.domain.models.publication import Publication
from scholarpage.infrastructure.importers.bibtex_importer import count_entry_markers
from scholarpage.web.render import render_site

logger = logging.getLogger(__name__)


def _jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return value


def create_app(paths: SitePaths) -> FastAPI:
    app = FastAPI(title="scholarpage", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    service = PublicationService()
    profile = load_profile(paths.profile_path)

    # Parsed once at startup; a missing file leaves the list empty.
    publications: list[Publication] = []
    entries_seen = 0
    try:
        raw = service.read_bibliography(paths.bib_path)
    except PublicationSourceError as exc:
        logger.warning("%s", exc)
    else:
        entries_seen = count_entry_markers(raw)
        publications = service.parse(raw, source=str(paths.bib_path))

    page = render_site(profile, publications)

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        return HTMLResponse(page)

    @app.get("/api/publications")
    def api_publications(limit: int | None = Query(default=None, ge=1, le=100000)) -> dict[str, Any]:
        selected = publications if limit is None else publications[:limit]
        items = [_jsonable(p) for p in selected]
        return {"ok": True, "count": len(items), "publications": items}

    @app.get("/api/profile")
    def api_profile() -> dict[str, Any]:
        return {"ok": True, "profile": profile.model_dump()}

    @app.get("/api/summary")
    def api_summary() -> dict[str, Any]:
        summary = service.summarize(publications, entries_seen=entries_seen)
        return {"ok": True, "summary": _jsonable(summary)}

    return app


def create_default_app() -> FastAPI:
    """App factory for uvicorn import strings; paths come from the environment."""
    return create_app(load_paths())
