from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

REQUEST_ID_HEADER = "X-Request-ID"

_current_request_id: ContextVar[str | None] = ContextVar("taleframes_request_id", default=None)
_logger = logging.getLogger("taleframes.api")


@contextmanager
def request_scope(incoming_id: str | None = None) -> Iterator[str]:
    """
    Binds a request id for the duration of one HTTP request.

    The caller's X-Request-ID is reused when it is non-blank; otherwise a new
    hex id is minted. Every log_event inside the block carries the id.
    """
    request_id = (incoming_id or "").strip() or uuid.uuid4().hex
    token = _current_request_id.set(request_id)
    try:
        yield request_id
    finally:
        _current_request_id.reset(token)


def current_request_id() -> str | None:
    return _current_request_id.get()


def request_id_headers() -> dict[str, str] | None:
    request_id = current_request_id()
    return {REQUEST_ID_HEADER: request_id} if request_id else None


def log_event(
    event: str,
    level: int = logging.INFO,
    exc_info: BaseException | None = None,
    **fields: Any,
) -> None:
    """Emits one JSON log line tagged with the current request id."""
    record: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
        "service": "taleframes",
        "level": logging.getLevelName(level),
        "event": event,
        "request_id": current_request_id(),
    }
    record.update((key, value) for key, value in fields.items() if value is not None)
    _logger.log(level, json.dumps(record, ensure_ascii=False, default=str), exc_info=exc_info)
