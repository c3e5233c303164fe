from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _parse_float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if value < 0:
        return default
    return value


def _parse_str_env(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def _parse_csv_env(name: str, default: list[str]) -> tuple[str, ...]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return tuple(default)
    values = tuple(item.strip() for item in raw.split(",") if item.strip())
    return values if values else tuple(default)


@dataclass(frozen=True)
class Settings:
    project_root: Path
    outputs_dir: Path
    story_api_key: str = ""
    illustration_api_key: str = ""
    story_model: str = "gemini-2.5-flash"
    story_temperature: float = 0.7
    illustration_model: str = "gemini-2.5-flash-image"
    illustration_aspect_ratio: str = "1:1"
    firestore_project: str | None = None
    stories_collection: str = "stories"
    scenes_collection: str = "scenes"
    scene_list_document: str = "list"
    cors_origins: tuple[str, ...] = ("*",)

    @property
    def has_story_backend(self) -> bool:
        return bool(self.story_api_key)

    @property
    def has_illustration_backend(self) -> bool:
        return bool(self.illustration_api_key)


def get_settings() -> Settings:
    project_root = Path(__file__).resolve().parents[2]
    outputs_override = (os.getenv("TALEFRAMES_OUTPUTS_DIR") or "").strip()
    outputs_dir = (
        Path(outputs_override).resolve() if outputs_override else project_root / "outputs"
    )
    return Settings(
        project_root=project_root,
        outputs_dir=outputs_dir,
        story_api_key=(os.getenv("GEMINI_STORY_API_KEY") or "").strip(),
        illustration_api_key=(os.getenv("NANO_BANANA_KEY") or "").strip(),
        story_model=_parse_str_env("TALEFRAMES_STORY_MODEL", "gemini-2.5-flash"),
        story_temperature=_parse_float_env("TALEFRAMES_STORY_TEMPERATURE", default=0.7),
        illustration_model=_parse_str_env(
            "TALEFRAMES_ILLUSTRATION_MODEL",
            "gemini-2.5-flash-image",
        ),
        firestore_project=(os.getenv("TALEFRAMES_FIRESTORE_PROJECT") or "").strip() or None,
        stories_collection=_parse_str_env("TALEFRAMES_STORIES_COLLECTION", "stories"),
        cors_origins=_parse_csv_env("TALEFRAMES_CORS_ORIGINS", default=["*"]),
    )
