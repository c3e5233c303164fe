import json
from typing import Any

from .story_model import Scene


def mock_scenes(idea: str, num_scenes: int) -> list[Scene]:
    return [
        Scene(index=i, text=f"Scene {i + 1}: {idea} - placeholder generated text.")
        for i in range(num_scenes)
    ]


def _scene_index(item: Any, position: int) -> int:
    value = item.get("index") if isinstance(item, dict) else None
    # bool is an int subclass but never a usable index
    if isinstance(value, bool):
        return position
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return position


def _scene_text(item: Any, position: int) -> str:
    value = item.get("text") if isinstance(item, dict) else None
    if value is None:
        return f"Scene {position + 1}"
    if isinstance(value, str):
        return value
    # non-string values keep their JSON spelling: true, 1, {"a": 1}
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return json.dumps(value, ensure_ascii=False)


def parse_scenes(raw: str) -> list[Scene] | None:
    """
    Maps a model response onto scenes.

    Returns None when the payload is unusable: not JSON, not a JSON array, or an
    array holding null entries. Scene count and index uniqueness are not checked;
    whatever the model returned is passed through.
    """
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError):
        return None

    if not isinstance(payload, list):
        return None
    if any(item is None for item in payload):
        return None

    return [
        Scene(index=_scene_index(item, position), text=_scene_text(item, position))
        for position, item in enumerate(payload)
    ]
