import tempfile
import unittest
from pathlib import Path

from generators.story.scene_prompts import ScenePrompt


class TestScenePrompt(unittest.TestCase):
    def test_formats_system_instruction(self):
        prompt = ScenePrompt()

        system_instruction = prompt.generate_system_instruction(
            num_scenes=5,
            genre="mystery",
            tone="eerie",
            audience="teens",
        )

        self.assertIn("5 numbered scenes", system_instruction)
        self.assertIn("Genre: mystery", system_instruction)
        self.assertIn("Tone: eerie", system_instruction)
        self.assertIn("Audience: teens", system_instruction)
        self.assertIn("JSON array of {index, text}", system_instruction)
        self.assertIn("Indices start at 0", system_instruction)

    def test_user_prompt_is_the_raw_idea(self):
        self.assertEqual(
            ScenePrompt.generate_user_prompt("A cat opens a bakery"),
            "A cat opens a bakery",
        )

    def test_missing_system_instruction_file_raises(self):
        prompt = ScenePrompt(system_instruction_path="generators/story/not_exists.txt")

        with self.assertRaises(FileNotFoundError) as context:
            prompt.generate_system_instruction(
                num_scenes=1, genre="general", tone="general", audience="general"
            )

        self.assertIn("System instruction file not found", str(context.exception))

    def test_unknown_template_placeholder_raises_value_error(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            system_path = Path(tmp_dir) / "scene_system_instruction.txt"
            system_path.write_text("Scenes: {num_scenes}, Bad: {unknown_key}", encoding="utf-8")

            prompt = ScenePrompt(system_instruction_path=str(system_path))

            with self.assertRaises(ValueError) as context:
                prompt.generate_system_instruction(
                    num_scenes=3, genre="general", tone="general", audience="general"
                )

            self.assertIn("unknown placeholder", str(context.exception))


if __name__ == "__main__":
    unittest.main()
