from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Scene(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    index: int = Field(..., description="Display order of the scene within its story (0-based)")
    text: str = Field(..., description="Narrative text of the scene")
    image_url: str | None = Field(
        default=None,
        description="Data URI of the scene illustration (PNG from the image model or SVG placeholder)",
    )
    image_prompt: str | None = Field(
        default=None,
        description="Prompt that drives (or would drive) the image model for this scene",
    )

    def to_document(self) -> dict:
        """Camel-cased dict as stored in the scene list document, unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
