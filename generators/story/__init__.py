from .scene_parser import mock_scenes, parse_scenes
from .scene_prompts import ScenePrompt
from .scene_splitter import GeminiSceneSplitter, MockSceneSplitter, SceneSplitter
from .story_model import Scene

__all__ = [
    "GeminiSceneSplitter",
    "MockSceneSplitter",
    "Scene",
    "ScenePrompt",
    "SceneSplitter",
    "mock_scenes",
    "parse_scenes",
]
