from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class InlineData(_CamelModel):
    mime_type: str = Field(alias="mimeType")
    data: str


class TextPart(_CamelModel):
    text: str


class InlineDataPart(_CamelModel):
    inline_data: InlineData = Field(alias="inlineData")


class Content(_CamelModel):
    parts: List[Union[TextPart, InlineDataPart]]
    role: Optional[str] = None


class GenerationConfig(_CamelModel):
    response_modalities: List[Literal["IMAGE", "TEXT"]] = Field(alias="responseModalities")


class GenerateContentRequest(_CamelModel):
    contents: List[Content]
    generation_config: GenerationConfig = Field(alias="generationConfig")

    @classmethod
    def image_edit(cls, *, prompt: str, base64_image: str, mime_type: str = "image/jpeg") -> "GenerateContentRequest":
        """Prompt plus one inline image, asking for image output only."""
        return cls(
            contents=[
                Content(
                    parts=[
                        TextPart(text=prompt),
                        InlineDataPart(inline_data=InlineData(mime_type=mime_type, data=base64_image)),
                    ]
                )
            ],
            generation_config=GenerationConfig(response_modalities=["IMAGE"]),
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
