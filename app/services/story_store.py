from __future__ import annotations

from typing import Any

from google.cloud import firestore

from app.core.config import Settings
from app.schemas.story import StoryCreateRequest
from generators.story.story_model import Scene


class StoryStore:
    """
    Firestore persistence for generated stories.

    Layout: `{stories}/{story_id}` holds the story record and
    `{stories}/{story_id}/{scenes}/{list}` holds the full scene array.
    Each method call is an independent write; nothing is rolled back.
    """

    def __init__(
        self,
        client: Any,
        stories_collection: str = "stories",
        scenes_collection: str = "scenes",
        scene_list_document: str = "list",
    ) -> None:
        self.client = client
        self.stories_collection = stories_collection
        self.scenes_collection = scenes_collection
        self.scene_list_document = scene_list_document

    @classmethod
    def from_settings(cls, settings: Settings) -> StoryStore:
        if settings.firestore_project:
            client = firestore.Client(project=settings.firestore_project)
        else:
            client = firestore.Client()
        return cls(
            client=client,
            stories_collection=settings.stories_collection,
            scenes_collection=settings.scenes_collection,
            scene_list_document=settings.scene_list_document,
        )

    def create_story(self, request: StoryCreateRequest) -> str:
        record = request.to_record()
        record["createdAt"] = firestore.SERVER_TIMESTAMP

        _, doc_ref = self.client.collection(self.stories_collection).add(record)
        doc_ref.update({"id": doc_ref.id})
        return doc_ref.id

    def write_scenes(self, story_id: str, scenes: list[Scene]) -> None:
        scene_list_ref = (
            self.client.collection(self.stories_collection)
            .document(story_id)
            .collection(self.scenes_collection)
            .document(self.scene_list_document)
        )
        scene_list_ref.set({"scenes": [scene.to_document() for scene in scenes]})
