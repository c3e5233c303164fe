from __future__ import annotations

import logging

from app.core.config import Settings
from app.schemas.story import (
    ImageCreateRequest,
    ImageResponse,
    StoryCreateAllRequest,
    StoryCreateRequest,
    StoryResponse,
)
from app.services.request_context import log_event
from app.services.story_store import StoryStore
from generators.illustration.scene_illustrator import (
    GeminiSceneIllustrator,
    PlaceholderSceneIllustrator,
    SceneIllustrator,
    illustrate_scenes,
)
from generators.story.scene_splitter import (
    GeminiSceneSplitter,
    MockSceneSplitter,
    SceneSplitter,
)
from generators.story.story_model import Scene


class StoryOrchestrator:
    def __init__(
        self,
        splitter: SceneSplitter,
        illustrator: SceneIllustrator,
        store: StoryStore,
    ) -> None:
        self.splitter = splitter
        self.illustrator = illustrator
        self.store = store

    def _split(self, request: StoryCreateRequest) -> list[Scene]:
        scenes = self.splitter.split(
            idea=request.idea,
            genre=request.genre,
            tone=request.tone,
            audience=request.audience,
            num_scenes=request.num_scenes,
        )
        log_event(
            event="story.split.completed",
            splitter=type(self.splitter).__name__,
            requested_scenes=request.num_scenes,
            scene_count=len(scenes),
        )
        return scenes

    def generate_story(self, request: StoryCreateRequest) -> StoryResponse:
        scenes = self._split(request)
        story_id = self.store.create_story(request)
        self.store.write_scenes(story_id, scenes)
        log_event(event="story.persisted", story_id=story_id, scene_count=len(scenes))
        return StoryResponse(story_id=story_id, scenes=scenes)

    def generate_image(self, request: ImageCreateRequest) -> ImageResponse:
        illustration = self.illustrator.illustrate(request.scene_text, request.style)
        return ImageResponse(
            image_url=illustration.image_url,
            image_prompt=illustration.image_prompt,
        )

    def generate_all(self, request: StoryCreateAllRequest) -> StoryResponse:
        scenes = self._split(request)
        story_id = self.store.create_story(request)
        scenes_with_images = illustrate_scenes(self.illustrator, scenes, request.style)
        self.store.write_scenes(story_id, scenes_with_images)
        log_event(
            event="story.persisted",
            story_id=story_id,
            scene_count=len(scenes_with_images),
            illustrated=True,
        )
        return StoryResponse(story_id=story_id, scenes=scenes_with_images)


def build_splitter(settings: Settings) -> SceneSplitter:
    if not settings.has_story_backend:
        log_event(event="backend.story.mock", level=logging.WARNING)
        return MockSceneSplitter()
    return GeminiSceneSplitter(
        api_key=settings.story_api_key,
        model_name=settings.story_model,
        temperature=settings.story_temperature,
    )


def build_illustrator(settings: Settings) -> SceneIllustrator:
    if not settings.has_illustration_backend:
        log_event(event="backend.illustration.placeholder", level=logging.WARNING)
        return PlaceholderSceneIllustrator()
    return GeminiSceneIllustrator(
        api_key=settings.illustration_api_key,
        model_name=settings.illustration_model,
        aspect_ratio=settings.illustration_aspect_ratio,
    )


def build_orchestrator(settings: Settings) -> StoryOrchestrator:
    return StoryOrchestrator(
        splitter=build_splitter(settings),
        illustrator=build_illustrator(settings),
        store=StoryStore.from_settings(settings),
    )
