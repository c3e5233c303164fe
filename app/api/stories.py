from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.core.errors import build_error
from app.schemas.story import (
    ErrorResponse,
    ImageCreateRequest,
    ImageResponse,
    StoryCreateAllRequest,
    StoryCreateRequest,
    StoryResponse,
)
from app.services.request_context import log_event
from app.services.story_orchestrator import StoryOrchestrator

router = APIRouter(
    prefix="/api",
    tags=["stories"],
)

_ERROR_RESPONSES = {400: {"model": ErrorResponse}}

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


def get_orchestrator(request: Request) -> StoryOrchestrator:
    return request.app.state.orchestrator


def _run_operation(
    operation: Callable[[RequestT], ResponseT],
    request: RequestT,
    operation_name: str,
) -> ResponseT:
    try:
        return operation(request)
    except Exception as error:
        log_event(
            event="request.failed",
            level=logging.ERROR,
            exc_info=error,
            operation=operation_name,
            reason=str(error),
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=build_error(str(error)),
        ) from error


@router.post(
    "/generateStory",
    response_model=StoryResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def generate_story(
    request: StoryCreateRequest,
    orchestrator: StoryOrchestrator = Depends(get_orchestrator),
) -> StoryResponse:
    return _run_operation(orchestrator.generate_story, request, "generateStory")


@router.post(
    "/generateImage",
    response_model=ImageResponse,
    responses=_ERROR_RESPONSES,
)
def generate_image(
    request: ImageCreateRequest,
    orchestrator: StoryOrchestrator = Depends(get_orchestrator),
) -> ImageResponse:
    return _run_operation(orchestrator.generate_image, request, "generateImage")


@router.post(
    "/generateAll",
    response_model=StoryResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def generate_all(
    request: StoryCreateAllRequest,
    orchestrator: StoryOrchestrator = Depends(get_orchestrator),
) -> StoryResponse:
    return _run_operation(orchestrator.generate_all, request, "generateAll")
