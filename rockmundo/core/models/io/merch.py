"""T-shirt design I/O models."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DesignElementModel(BaseModel):
    """One image or text element, camelCase like the designer's saved JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    type: Literal["image", "text"]
    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    rotation: float = 0
    scale: float = 1
    src: Optional[str] = None
    text: Optional[str] = None
    font_size: Optional[int] = None
    font_family: Optional[str] = None
    color: Optional[str] = None


class TShirtDesign(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    background_color: str = "#ffffff"
    front: List[DesignElementModel] = Field(default_factory=list)
    back: List[DesignElementModel] = Field(default_factory=list)


class ImagePlacementRequest(BaseModel):
    side: Literal["front", "back"] = "front"
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    src: str = ""
