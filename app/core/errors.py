from __future__ import annotations

from typing import Any

DEFAULT_ERROR_MESSAGE = "Bad Request"


def build_error(message: str | None) -> dict[str, Any]:
    return {"error": message or DEFAULT_ERROR_MESSAGE}


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Reduces pydantic error entries to the first one, as `field: message`."""
    if not errors:
        return DEFAULT_ERROR_MESSAGE

    first = errors[0]
    # loc starts with "body" for request payloads
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    message = str(first.get("msg") or DEFAULT_ERROR_MESSAGE)
    if not location:
        return message
    return f"{'.'.join(location)}: {message}"
