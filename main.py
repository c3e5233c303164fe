import argparse
import datetime
import json
import re
import sys
import traceback
from pathlib import Path

from app.core.config import get_settings
from app.schemas.story import MAX_SCENES, MIN_SCENES
from app.services.story_orchestrator import build_illustrator, build_splitter
from generators.illustration.scene_illustrator import illustrate_scenes


def slugify(text):
    """Converts text to a safe filename slug."""
    text = text.lower()
    text = re.sub(r'[^a-z0-9]+', '-', text)
    return text.strip('-')[:60].strip('-') or "story"


def _num_scenes(value):
    number = int(value)
    if not MIN_SCENES <= number <= MAX_SCENES:
        raise argparse.ArgumentTypeError(
            f"num_scenes must be between {MIN_SCENES} and {MAX_SCENES}"
        )
    return number


def main():
    parser = argparse.ArgumentParser(description="Split a story idea into illustrated scenes.")
    parser.add_argument("--idea", required=True, help="Short story idea (at least 3 characters)")
    parser.add_argument("--genre", default="general", help="Story genre")
    parser.add_argument("--tone", default="general", help="Story tone")
    parser.add_argument("--audience", default="general", help="Target audience")
    parser.add_argument(
        "--num_scenes",
        type=_num_scenes,
        default=4,
        help=f"Number of scenes to request ({MIN_SCENES}-{MAX_SCENES})",
    )
    parser.add_argument("--style", default="realistic", help="Visual style for illustrations")
    parser.add_argument(
        "--illustrate",
        action="store_true",
        help="Illustrate every scene (placeholder SVGs when NANO_BANANA_KEY is not set).",
    )

    args = parser.parse_args()
    if len(args.idea) < 3:
        parser.error("--idea must be at least 3 characters")

    settings = get_settings()

    try:
        print("Splitting story idea into scenes...")
        splitter = build_splitter(settings)
        scenes = splitter.split(
            idea=args.idea,
            genre=args.genre,
            tone=args.tone,
            audience=args.audience,
            num_scenes=args.num_scenes,
        )
        print(f"Generated {len(scenes)} scenes")

        if args.illustrate:
            print("Illustrating scenes...")
            scenes = illustrate_scenes(build_illustrator(settings), scenes, args.style)
            print(f"Illustrated {len(scenes)} scenes")

        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        output_dir = Path(settings.outputs_dir) / f"{timestamp}_story_{slugify(args.idea)}"
        output_dir.mkdir(parents=True, exist_ok=True)

        filepath = output_dir / "story.json"
        payload = {
            "idea": args.idea,
            "genre": args.genre,
            "tone": args.tone,
            "audience": args.audience,
            "numScenes": args.num_scenes,
            "scenes": [scene.to_document() for scene in scenes],
        }
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)

        print(f"Story saved to: {filepath}")

    except Exception as e:
        print(f"Pipeline failed: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
