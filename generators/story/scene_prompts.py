from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class ScenePrompt:
    system_instruction_path: str = field(
        default_factory=lambda: str(
            Path(__file__).resolve().parent / "scene_system_instruction.txt"
        )
    )

    _system_instruction_template: Optional[str] = field(init=False, repr=False, default=None)

    @staticmethod
    def _read_text(path: str, label: str) -> str:
        file_path = Path(path)
        try:
            return file_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"{label} file not found at {file_path}") from exc

    def generate_system_instruction(
        self,
        num_scenes: int,
        genre: str,
        tone: str,
        audience: str,
    ) -> str:
        if self._system_instruction_template is None:
            self._system_instruction_template = self._read_text(
                self.system_instruction_path, "System instruction"
            )

        try:
            return self._system_instruction_template.format(
                num_scenes=num_scenes,
                genre=genre,
                tone=tone,
                audience=audience,
            )
        except KeyError as exc:
            raise ValueError(
                f"System instruction template has an unknown placeholder: {exc.args[0]}"
            ) from exc

    @staticmethod
    def generate_user_prompt(idea: str) -> str:
        return idea
