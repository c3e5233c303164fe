from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from app.api.stories import router as stories_router
from app.core.config import get_settings
from app.core.errors import build_error, format_validation_errors
from app.services.request_context import (
    REQUEST_ID_HEADER,
    log_event,
    request_id_headers,
    request_scope,
)
from app.services.story_orchestrator import StoryOrchestrator, build_orchestrator


@asynccontextmanager
async def lifespan(application: FastAPI):
    if application.state.orchestrator is None:
        application.state.orchestrator = build_orchestrator(get_settings())
    yield


def create_app(orchestrator: StoryOrchestrator | None = None) -> FastAPI:
    """
    Builds the API application.

    Without an explicit orchestrator, backends and the Firestore client are
    selected from settings once, when the application starts.
    """
    settings = get_settings()
    logging.basicConfig(level=logging.INFO)

    application = FastAPI(
        title="TaleFrames API",
        version="0.1.0",
        lifespan=lifespan,
    )
    application.state.orchestrator = orchestrator
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(stories_router)

    @application.middleware("http")
    async def request_context_middleware(
        request: Request,
        call_next,
    ) -> Response:
        with request_scope(request.headers.get(REQUEST_ID_HEADER)) as request_id:
            request.state.request_id = request_id
            start = time.perf_counter()

            log_event(
                event="request.start",
                path=request.url.path,
                method=request.method,
            )

            response = None
            try:
                response = await call_next(request)
                return response
            finally:
                latency_ms = round((time.perf_counter() - start) * 1000, 2)
                status_code = response.status_code if response is not None else 500
                if response is not None:
                    response.headers[REQUEST_ID_HEADER] = request_id

                log_event(
                    event="request.end",
                    path=request.url.path,
                    method=request.method,
                    status_code=status_code,
                    latency_ms=latency_ms,
                )

    @application.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @application.exception_handler(HTTPException)
    async def http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
        detail = exc.detail
        if isinstance(detail, dict) and "error" in detail:
            payload: dict[str, Any] = detail
        else:
            payload = build_error(str(detail))
        return JSONResponse(
            status_code=exc.status_code,
            content=payload,
            headers=request_id_headers(),
        )

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = format_validation_errors(list(exc.errors()))
        log_event(event="request.invalid", level=logging.WARNING, reason=message)
        return JSONResponse(
            status_code=400,
            content=build_error(message),
            headers=request_id_headers(),
        )

    @application.exception_handler(Exception)
    async def generic_exception_handler(_: Request, exc: Exception) -> JSONResponse:
        log_event(
            event="request.failed",
            level=logging.ERROR,
            exc_info=exc,
            reason=str(exc),
        )
        return JSONResponse(
            status_code=400,
            content=build_error(str(exc)),
            headers=request_id_headers(),
        )

    return application


app = create_app()
