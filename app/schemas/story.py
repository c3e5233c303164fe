from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from generators.story.story_model import Scene

MIN_TEXT_LEN = 3
MIN_SCENES = 1
MAX_SCENES = 10


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoryCreateRequest(CamelModel):
    idea: str = Field(..., min_length=MIN_TEXT_LEN)
    genre: str = Field(default="general")
    tone: str = Field(default="general")
    audience: str = Field(default="general")
    num_scenes: int = Field(default=4, ge=MIN_SCENES, le=MAX_SCENES, strict=True)

    def to_record(self) -> dict[str, Any]:
        return {
            "idea": self.idea,
            "genre": self.genre,
            "tone": self.tone,
            "audience": self.audience,
            "numScenes": self.num_scenes,
        }


class StoryCreateAllRequest(StoryCreateRequest):
    style: str = Field(default="realistic")


class ImageCreateRequest(CamelModel):
    scene_text: str = Field(..., min_length=MIN_TEXT_LEN)
    style: str = Field(default="realistic")


class StoryResponse(CamelModel):
    story_id: str
    scenes: list[Scene]


class ImageResponse(CamelModel):
    image_url: str
    image_prompt: str


class ErrorResponse(BaseModel):
    error: str
