import logging
from typing import Protocol

from google import genai
from google.genai import types

from .scene_parser import mock_scenes, parse_scenes
from .scene_prompts import ScenePrompt
from .story_model import Scene

logger = logging.getLogger(__name__)


class SceneSplitter(Protocol):
    def split(
        self,
        idea: str,
        genre: str,
        tone: str,
        audience: str,
        num_scenes: int,
    ) -> list[Scene]: ...


class MockSceneSplitter:
    """Used when no text model key is configured."""

    def split(
        self,
        idea: str,
        genre: str,
        tone: str,
        audience: str,
        num_scenes: int,
    ) -> list[Scene]:
        return mock_scenes(idea, num_scenes)


class GeminiSceneSplitter:
    def __init__(
        self,
        api_key: str | None = None,
        model_name: str = "gemini-2.5-flash",
        temperature: float = 0.7,
        client: genai.Client | None = None,
    ):
        if client is None and not api_key:
            raise ValueError("GEMINI_STORY_API_KEY environment variable not set.")
        self.client = client or genai.Client(api_key=api_key)
        self.model_name = model_name
        self.temperature = temperature
        self.prompts = ScenePrompt()

    def _request_scenes(
        self,
        idea: str,
        genre: str,
        tone: str,
        audience: str,
        num_scenes: int,
    ) -> str:
        response = self.client.models.generate_content(
            model=self.model_name,
            contents=self.prompts.generate_user_prompt(idea),
            config=types.GenerateContentConfig(
                system_instruction=self.prompts.generate_system_instruction(
                    num_scenes=num_scenes,
                    genre=genre,
                    tone=tone,
                    audience=audience,
                ),
                temperature=self.temperature,
                response_mime_type="application/json",
            ),
        )
        text = getattr(response, "text", None)
        return text if isinstance(text, str) else "[]"

    def split(
        self,
        idea: str,
        genre: str,
        tone: str,
        audience: str,
        num_scenes: int,
    ) -> list[Scene]:
        """
        Splits a story idea into scenes with a single Gemini call.

        Errors raised by the call itself propagate. An unparseable response is
        replaced by the mock scenes for the same idea and count.
        """
        raw = self._request_scenes(
            idea=idea,
            genre=genre,
            tone=tone,
            audience=audience,
            num_scenes=num_scenes,
        )
        scenes = parse_scenes(raw)
        if scenes is None:
            logger.warning(
                "Scene response was not a JSON array; using placeholder scenes. model=%s",
                self.model_name,
            )
            return mock_scenes(idea, num_scenes)
        return scenes
