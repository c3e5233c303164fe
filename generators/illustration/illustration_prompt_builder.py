def build_image_prompt(scene_text: str, style: str) -> str:
    return f'An illustration for the scene: "{scene_text}". Visual style: {style}.'
