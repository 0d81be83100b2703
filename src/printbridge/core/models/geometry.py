"""
Module: core.models.geometry

Purpose:
    Geometric value objects shared by every layout engine.
    Coordinates use a top-left origin with y increasing downward
    (screen/print convention).

Key Classes:
    - Rectangle: Axis-aligned box (x, y, width, height)
    - Size: Intrinsic width/height of an image
    - Padding: Per-edge inset for text areas
    - InvalidGeometryError: Degenerate dimensions (zero/negative sizes)

Dependencies:
    - dataclasses (std)

Used By:
    - layout.text_fitter: Text areas and padding
    - layout.image_fit: Containers, crop rectangles
    - layout.packing: Grid and masonry cells
"""

from __future__ import annotations

import math
from dataclasses import dataclass


class InvalidGeometryError(ValueError):
    """Dimensions that would produce infinite or NaN layout values."""
    pass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """
    Axis-aligned rectangle in pixels.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent (>= 0)
        height: Vertical extent (>= 0)

    Invariants:
        - width >= 0
        - height >= 0
        - all values finite

    Example:
        >>> rect = Rectangle(10, 20, 100, 50)
        >>> rect.right, rect.bottom
        (110, 70)
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        for name in ("x", "y", "width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidGeometryError(f"{name} must be finite: {value}")
        if self.width < 0:
            raise InvalidGeometryError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise InvalidGeometryError(f"height must be >= 0: {self.height}")

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (y + height)."""
        return self.y + self.height

    @property
    def aspect_ratio(self) -> float:
        """
        Width divided by height.

        Raises:
            InvalidGeometryError: If either side is zero
        """
        if self.width <= 0 or self.height <= 0:
            raise InvalidGeometryError(
                f"Aspect ratio undefined for {self.width}x{self.height} rectangle"
            )
        return self.width / self.height

    def inset(self, padding: Padding) -> tuple[float, float]:
        """
        Width and height left after removing padding.

        The result may be negative when padding exceeds the rectangle;
        callers treat that as "nothing fits".
        """
        return (
            self.width - padding.horizontal,
            self.height - padding.vertical,
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Rectangle:
        return cls(
            x=data.get("x", 0),
            y=data.get("y", 0),
            width=data["width"],
            height=data["height"],
        )


@dataclass(frozen=True, slots=True)
class Size:
    """
    Intrinsic image dimensions in pixels.

    Zero or negative sides are allowed at construction so that callers
    can describe what they received; any calculation that needs the
    aspect ratio rejects them.
    """

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        """
        Width divided by height.

        Raises:
            InvalidGeometryError: If either side is <= 0
        """
        if self.width <= 0 or self.height <= 0:
            raise InvalidGeometryError(
                f"Image size must be positive: {self.width}x{self.height}"
            )
        return self.width / self.height

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Size:
        return cls(width=data["width"], height=data["height"])


@dataclass(frozen=True, slots=True)
class Padding:
    """Per-edge inset in pixels (all zero by default)."""

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def to_dict(self) -> dict:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}

    @classmethod
    def from_dict(cls, data: dict) -> Padding:
        return cls(
            top=data.get("top", 0),
            right=data.get("right", 0),
            bottom=data.get("bottom", 0),
            left=data.get("left", 0),
        )
