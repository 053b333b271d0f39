"""FastAPI application exposing the confidence and summary operations over HTTP."""

from typing import Any

import structlog
from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from review_confidence.config.domain.config import AppConfig
from review_confidence.core.credentials import ConfigurationError
from review_confidence.core.errors import ReviewConfidenceError
from review_confidence.corpus.infrastructure.errors import CorpusLoadError
from review_confidence.scoring.application.engine import ConfidenceEngine
from review_confidence.scoring.domain.errors import InvalidInputError
from review_confidence.scoring.domain.result import ConfidenceResult
from review_confidence.summary.application.service import ReviewSummaryService
from review_confidence.summary.domain.result import ReviewSummary
from review_confidence.wiring import build_engine, build_summary_service

_log = structlog.get_logger()


def create_app(
    config: AppConfig | None = None,
    engine: ConfidenceEngine | None = None,
    summary_service: ReviewSummaryService | None = None,
) -> FastAPI:
    """Build the HTTP app; services not passed in are built from config."""
    cfg = config if config is not None else AppConfig()
    confidence_engine = engine if engine is not None else build_engine(cfg)
    summaries = (
        summary_service if summary_service is not None else build_summary_service(cfg)
    )

    app = FastAPI(title="Review Confidence API", version=cfg.version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.server.allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/reviews/calculate-confidence", response_model=ConfidenceResult)
    async def calculate_confidence(
        payload: dict[str, Any] = Body(...),
    ) -> ConfidenceResult:
        return await confidence_engine.compute_from_payload(payload)

    @app.post("/api/reviews/summary", response_model=ReviewSummary)
    async def summarize_reviews(payload: dict[str, Any] = Body(...)) -> ReviewSummary:
        return await summaries.summarize_payload(payload)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidInputError)
    async def invalid_input(_: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=400, content={"message": str(exc), "field": exc.field}
        )

    @app.exception_handler(RequestValidationError)
    async def malformed_body(_: Request, exc: RequestValidationError) -> JSONResponse:
        error = _body_error(exc)
        return JSONResponse(
            status_code=400, content={"message": str(error), "field": error.field}
        )

    @app.exception_handler(ConfigurationError)
    async def configuration(_: Request, exc: ConfigurationError) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"message": str(exc), "instructions": exc.instructions},
        )

    @app.exception_handler(CorpusLoadError)
    async def corpus(_: Request, exc: CorpusLoadError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"message": str(exc)})

    @app.exception_handler(ReviewConfidenceError)
    async def internal(request: Request, exc: ReviewConfidenceError) -> JSONResponse:
        _log.error("api.request_failed", path=request.url.path, reason=str(exc))
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "error": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unexpected(request: Request, exc: Exception) -> JSONResponse:
        _log.exception("api.request_crashed", path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "error": str(exc)},
        )


def _body_error(exc: RequestValidationError) -> InvalidInputError:
    """Describe a body FastAPI rejected (absent, not JSON, not an object)."""
    first = exc.errors()[0]
    loc = [p for p in first.get("loc", ()) if isinstance(p, str) and p != "body"]
    return InvalidInputError(field=".".join(loc) or "payload", reason=first["msg"])
