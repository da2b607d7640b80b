"""
T-shirt designer geometry.

Element placement inside the printable area of each shirt side: fitting
uploaded images, dropping in text, dragging with bounds clamping, and
aspect-ratio preserving resizes. Coordinates are canvas pixels.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Literal, Optional, Sequence

from rockmundo.errors import ValidationError

Side = Literal["front", "back"]

MAX_IMAGES_PER_SIDE = 5
IMAGE_FIT_SIZE = 80
MIN_ELEMENT_SIZE = 8

TEXT_WIDTH = 80
TEXT_HEIGHT = 24
DEFAULT_FONT_SIZE = 16
DEFAULT_FONT_FAMILY = "Arial"
FONT_SIZE_RANGE = (10, 48)
SCALE_RANGE = (0.5, 2.0)
ROTATION_RANGE = (-180, 180)

WHITE_SHIRT = "#ffffff"
BLACK_SHIRT = "#1a1a1a"

SHIRT_COLORS = {
    "White": WHITE_SHIRT,
    "Black": BLACK_SHIRT,
    "Navy": "#1e3a8a",
    "Gray": "#6b7280",
    "Red": "#dc2626",
    "Forest Green": "#15803d",
    "Royal Blue": "#2563eb",
    "Purple": "#9333ea",
}


@dataclass(frozen=True)
class PrintArea:
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


PRINT_AREAS: dict[str, PrintArea] = {
    "front": PrintArea(85, 100, 130, 160),
    "back": PrintArea(85, 90, 130, 180),
}


@dataclass(frozen=True)
class DesignElement:
    id: str
    type: Literal["image", "text"]
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0
    scale: float = 1
    src: Optional[str] = None
    text: Optional[str] = None
    font_size: Optional[int] = None
    font_family: Optional[str] = None
    color: Optional[str] = None


def new_element_id(kind: str = "img") -> str:
    return f"{kind}-{uuid.uuid4().hex[:12]}"


def print_area(side: str) -> PrintArea:
    try:
        return PRINT_AREAS[side]
    except KeyError:
        raise ValidationError(f"Unknown shirt side: {side}") from None


def _bounded(value: float, low: float, high: float) -> float:
    # An element wider than the area pins to the area's origin
    return max(low, min(value, high))


def clamp_position(element: DesignElement, x: float, y: float, area: PrintArea) -> DesignElement:
    """Move ``element`` to (x, y), keeping its box inside the print area."""
    return replace(
        element,
        x=_bounded(x, area.x, area.x + area.width - element.width),
        y=_bounded(y, area.y, area.y + area.height - element.height),
    )


def fit_image(element_id: str, src: str, width: float, height: float, area: PrintArea) -> DesignElement:
    """Scale an uploaded image to fit IMAGE_FIT_SIZE and centre it in the print area."""
    if width <= 0 or height <= 0:
        raise ValidationError("Image dimensions must be positive")
    scale = min(IMAGE_FIT_SIZE / width, IMAGE_FIT_SIZE / height)
    fitted_w, fitted_h = width * scale, height * scale
    cx, cy = area.center
    return DesignElement(
        id=element_id,
        type="image",
        src=src,
        x=cx - fitted_w / 2,
        y=cy - fitted_h / 2,
        width=fitted_w,
        height=fitted_h,
    )


def text_color_for_shirt(shirt_color: str) -> str:
    """Black text on white shirts, white text on every other colour."""
    return "#000000" if shirt_color.lower() == WHITE_SHIRT else "#ffffff"


def add_text_element(element_id: str, area: PrintArea, shirt_color: str, text: str = "Your Text") -> DesignElement:
    cx, cy = area.center
    return DesignElement(
        id=element_id,
        type="text",
        text=text,
        x=cx - TEXT_WIDTH / 2,
        y=cy - 10,
        width=TEXT_WIDTH,
        height=TEXT_HEIGHT,
        font_size=DEFAULT_FONT_SIZE,
        font_family=DEFAULT_FONT_FAMILY,
        color=text_color_for_shirt(shirt_color),
    )


def resize_element(
    element: DesignElement,
    width: float,
    area: PrintArea,
    height: Optional[float] = None,
    keep_aspect: bool = True,
) -> DesignElement:
    """
    Resize an element anchored at its top-left corner.

    With ``keep_aspect`` the height follows the width at the element's current
    ratio and ``height`` is ignored. The result never exceeds the print area:
    the size shrinks uniformly (or per axis without ``keep_aspect``) until it
    fits from the element's position, and the position is then re-clamped.
    """
    if width <= 0 or (height is not None and height <= 0):
        raise ValidationError("Element size must be positive")

    if keep_aspect or height is None:
        ratio = element.height / element.width
        new_w = max(MIN_ELEMENT_SIZE, width)
        new_h = new_w * ratio
        fit = min(1.0, area.width / new_w, area.height / new_h)
        new_w, new_h = new_w * fit, new_h * fit
    else:
        new_w = min(area.width, max(MIN_ELEMENT_SIZE, width))
        new_h = min(area.height, max(MIN_ELEMENT_SIZE, height))

    resized = replace(element, width=new_w, height=new_h)
    return clamp_position(resized, element.x, element.y, area)


def _limit(value: float, bounds: tuple[float, float]) -> float:
    return max(bounds[0], min(bounds[1], value))


def normalize_element(element: DesignElement, area: PrintArea) -> DesignElement:
    """Bring a saved element back within the editor's limits."""
    fixed = replace(
        element,
        scale=_limit(element.scale, SCALE_RANGE),
        rotation=_limit(element.rotation, ROTATION_RANGE),
        font_size=int(_limit(element.font_size, FONT_SIZE_RANGE)) if element.font_size is not None else None,
    )
    if fixed.width > area.width or fixed.height > area.height:
        fixed = resize_element(fixed, fixed.width, area)
    return clamp_position(fixed, fixed.x, fixed.y, area)


def normalize_side(elements: Sequence[DesignElement], side: str) -> list[DesignElement]:
    """Validate one side of a design: at most MAX_IMAGES_PER_SIDE images, every element clamped."""
    images = sum(1 for el in elements if el.type == "image")
    if images > MAX_IMAGES_PER_SIDE:
        raise ValidationError(f"Too many images on the {side}: {images}. Max {MAX_IMAGES_PER_SIDE} per side.")
    area = print_area(side)
    return [normalize_element(el, area) for el in elements]
