import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from google import genai

from generators.story.story_model import Scene

from .illustration_image_client import ImageGenerationClient
from .illustration_prompt_builder import build_image_prompt
from .placeholder import generate_placeholder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Illustration:
    image_url: str
    image_prompt: str


class SceneIllustrator(Protocol):
    def illustrate(self, scene_text: str, style: str) -> Illustration: ...


class PlaceholderSceneIllustrator:
    """Used when no image model key is configured."""

    def illustrate(self, scene_text: str, style: str) -> Illustration:
        return Illustration(
            image_url=generate_placeholder(scene_text),
            image_prompt=build_image_prompt(scene_text, style),
        )


class GeminiSceneIllustrator:
    def __init__(
        self,
        api_key: str | None = None,
        model_name: str = "gemini-2.5-flash-image",
        aspect_ratio: str = "1:1",
        client: genai.Client | None = None,
    ):
        if client is None and not api_key:
            raise ValueError("NANO_BANANA_KEY environment variable not set.")
        self.client = client or genai.Client(api_key=api_key)
        self.model_name = model_name
        self.image_client = ImageGenerationClient(
            client=self.client,
            model_name=model_name,
            aspect_ratio=aspect_ratio,
        )

    def _generate_image_bytes(self, prompt: str) -> tuple[bytes, str] | None:
        return self.image_client.generate_image_bytes(prompt=prompt)

    def illustrate(self, scene_text: str, style: str) -> Illustration:
        image_prompt = build_image_prompt(scene_text, style)
        image = self._generate_image_bytes(image_prompt)
        if image is None:
            logger.warning("Falling back to placeholder illustration. model=%s", self.model_name)
            return Illustration(
                image_url=generate_placeholder(scene_text),
                image_prompt=image_prompt,
            )

        image_bytes, _ = image
        payload = base64.b64encode(image_bytes).decode("ascii")
        return Illustration(
            image_url=f"data:image/png;base64,{payload}",
            image_prompt=image_prompt,
        )


def illustrate_scenes(
    illustrator: SceneIllustrator,
    scenes: list[Scene],
    style: str,
) -> list[Scene]:
    """Illustrates scenes one at a time, in list order, returning updated copies."""
    illustrated: list[Scene] = []
    for scene in scenes:
        illustration = illustrator.illustrate(scene.text, style)
        illustrated.append(
            scene.model_copy(
                update={
                    "image_url": illustration.image_url,
                    "image_prompt": illustration.image_prompt,
                }
            )
        )
    return illustrated
