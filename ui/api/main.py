"""FastAPI layer that exposes search and the training-content diagnostics."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Query as FastAPIQuery, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from application.diagnostics import run_diagnostics
from application.use_cases.search import search
from domain.entities import ScoredResult
from domain.errors import InvalidArgument, RetrievalError, RetrievalUnavailable
from infrastructure.config import Container, ContainerConfig, build_default_container
from infrastructure.sources.json_fragment_source import fragment_to_dict, scored_result_to_dict
from ui.formatting import truncate_text
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)

_ERROR_STATUS: dict[type[RetrievalError], int] = {
    InvalidArgument: 400,
    RetrievalUnavailable: 503,
}


class SearchResponse(BaseModel):
    query: str
    limit: int
    results: list[dict]


class FragmentsResponse(BaseModel):
    total: int
    fragments: list[dict]


class HealthResponse(BaseModel):
    status: str
    fragments: int


def create_app(container: Container | None = None) -> FastAPI:
    """Build the HTTP app around an explicitly wired container."""

    container = container or build_default_container(ContainerConfig.from_env())
    app = FastAPI(title="TutorSearch API")

    def _search(query_text: str, limit: int) -> list[ScoredResult]:
        return search(
            query_text,
            corpus_index=container.corpus_index,
            tokenizer=container.tokenizer,
            scorer=container.scorer,
            limit=limit,
        )

    @app.exception_handler(RetrievalError)
    async def retrieval_error_handler(request: Request, exc: RetrievalError) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), 500)
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status_code,
            content={"success": False, "error": exc.error_code, "message": exc.message},
        )

    @app.get("/health", response_model=HealthResponse)
    def health_endpoint() -> HealthResponse:
        return HealthResponse(status="ok", fragments=container.corpus_index.size())

    @app.get("/search", response_model=SearchResponse)
    def search_endpoint(
        q: str = FastAPIQuery(..., description="User query"),
        limit: int | None = FastAPIQuery(None, description="Maximum number of results"),
    ) -> SearchResponse:
        effective_limit = container.default_limit if limit is None else limit
        results = _search(q, effective_limit)
        return SearchResponse(
            query=q,
            limit=effective_limit,
            results=[scored_result_to_dict(result) for result in results],
        )

    @app.get("/fragments", response_model=FragmentsResponse)
    def fragments_endpoint() -> FragmentsResponse:
        fragments = container.corpus_index.all_fragments()
        serialized = []
        for fragment in fragments:
            payload = fragment_to_dict(fragment)
            payload["body"] = truncate_text(fragment.body)
            serialized.append(payload)
        return FragmentsResponse(total=len(fragments), fragments=serialized)

    @app.get("/api/test-pdf")
    def diagnostics_endpoint() -> JSONResponse:
        try:
            report = run_diagnostics(_search)
            return JSONResponse(content=report.to_dict())
        except Exception as exc:
            logger.exception("PDF system test error")
            return JSONResponse(
                status_code=500,
                content={
                    "success": False,
                    "error": "PDF system test failed",
                    "message": str(exc) or "Unknown error",
                },
            )

    return app


setup_logging()
app = create_app()
