import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import main


class TestMainCli(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

        self.env_patcher = patch.dict(
            os.environ,
            {
                "GEMINI_STORY_API_KEY": "",
                "NANO_BANANA_KEY": "",
                "TALEFRAMES_OUTPUTS_DIR": self.tmp_dir.name,
            },
            clear=False,
        )
        self.env_patcher.start()
        self.addCleanup(self.env_patcher.stop)

    def _run(self, *args: str) -> None:
        with patch.object(sys, "argv", ["main.py", *args]):
            main.main()

    def _load_output(self) -> dict:
        outputs = list(Path(self.tmp_dir.name).glob("*_story_*/story.json"))
        self.assertEqual(len(outputs), 1)
        with outputs[0].open("r", encoding="utf-8") as file:
            return json.load(file)

    def test_writes_mock_scenes(self) -> None:
        self._run("--idea", "A snail races a hare", "--num_scenes", "2")

        payload = self._load_output()
        self.assertEqual(payload["numScenes"], 2)
        self.assertEqual([scene["index"] for scene in payload["scenes"]], [0, 1])
        self.assertNotIn("imageUrl", payload["scenes"][0])

    def test_illustrate_adds_placeholder_images(self) -> None:
        self._run("--idea", "A snail races a hare", "--num_scenes", "1", "--illustrate", "--style", "ink")

        scene = self._load_output()["scenes"][0]
        self.assertTrue(scene["imageUrl"].startswith("data:image/svg+xml;base64,"))
        self.assertTrue(scene["imagePrompt"].endswith("Visual style: ink."))

    def test_rejects_out_of_range_scene_count(self) -> None:
        with self.assertRaises(SystemExit):
            self._run("--idea", "A snail races a hare", "--num_scenes", "11")

    def test_slugify(self) -> None:
        self.assertEqual(main.slugify("A Snail, a Hare!"), "a-snail-a-hare")
        self.assertEqual(main.slugify("!!!"), "story")


if __name__ == "__main__":
    unittest.main()
