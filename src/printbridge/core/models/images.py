"""
Module: core.models.images

Purpose:
    Image placement inputs and outputs.

Key Classes:
    - ImageFit: Fit strategy (contain/cover/fill/scale-down)
    - FocalPoint: Percentage anchor kept visible when cropping
    - ImageConfig: Source + fit strategy + optional focal point
    - SizedImage: ImageConfig with a known intrinsic size
    - RenderedImage: Placed image with optional crop rectangle

Dependencies:
    - core.models.geometry: Rectangle, Size

Used By:
    - layout.image_fit: Fit calculator
    - layout.packing: Grid and masonry packers
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geometry import Rectangle, Size


class ImageFit(str, Enum):
    """
    Policy for scaling an image into a container.

    Attributes:
        CONTAIN: Fit inside, keep aspect ratio, letterbox
        COVER: Fill the container, keep aspect ratio, crop overflow
        FILL: Stretch to the container, ignore aspect ratio
        SCALE_DOWN: Like CONTAIN but never enlarge
    """

    CONTAIN = "contain"
    COVER = "cover"
    FILL = "fill"
    SCALE_DOWN = "scale-down"

    @classmethod
    def parse(cls, value: object) -> ImageFit:
        """
        Parse a fit value, treating anything unrecognised as CONTAIN.

        Example:
            >>> ImageFit.parse("cover")
            <ImageFit.COVER: 'cover'>
            >>> ImageFit.parse("stretch")
            <ImageFit.CONTAIN: 'contain'>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.CONTAIN


@dataclass(frozen=True, slots=True)
class FocalPoint:
    """Percentages (0-100) on each axis; 50/50 is the centre."""

    x: float = 50
    y: float = 50

    def __post_init__(self) -> None:
        """Validate percentages on construction."""
        if not 0 <= self.x <= 100:
            raise ValueError(f"focal x must be within [0, 100]: {self.x}")
        if not 0 <= self.y <= 100:
            raise ValueError(f"focal y must be within [0, 100]: {self.y}")

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> FocalPoint:
        return cls(x=data.get("x", 50), y=data.get("y", 50))


@dataclass(frozen=True)
class ImageConfig:
    """
    Image configuration.

    Attributes:
        src: Image source (path or URL), opaque to layout
        fit: Fit strategy (unknown values parse to CONTAIN)
        alt: Optional alternative text
        position: Focal point for COVER cropping (centre if None)
    """

    src: str
    fit: ImageFit = ImageFit.CONTAIN
    alt: Optional[str] = None
    position: Optional[FocalPoint] = None

    def __post_init__(self) -> None:
        """Parse the fit strategy (strings and unknown values included)."""
        object.__setattr__(self, "fit", ImageFit.parse(self.fit))

    def to_dict(self) -> dict:
        d = {"src": self.src, "fit": self.fit.value}
        if self.alt is not None:
            d["alt"] = self.alt
        if self.position is not None:
            d["position"] = self.position.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ImageConfig:
        position = data.get("position")
        return cls(
            src=data["src"],
            fit=data.get("fit", ImageFit.CONTAIN),
            alt=data.get("alt"),
            position=FocalPoint.from_dict(position) if position is not None else None,
        )


@dataclass(frozen=True)
class SizedImage:
    """An image config whose intrinsic size is known (masonry input)."""

    config: ImageConfig
    size: Size

    @classmethod
    def from_dict(cls, data: dict) -> SizedImage:
        return cls(
            config=ImageConfig.from_dict(data["config"]),
            size=Size.from_dict(data["size"]),
        )


@dataclass(frozen=True)
class RenderedImage:
    """
    Placed image.

    Attributes:
        width: Rendered width (may exceed the container for COVER)
        height: Rendered height (may exceed the container for COVER)
        x: Left edge on the page
        y: Top edge on the page
        crop_rect: Visible window in rendered-image coordinates (COVER only)
    """

    width: float
    height: float
    x: float
    y: float
    crop_rect: Optional[Rectangle] = None

    def to_dict(self) -> dict:
        d = {"width": self.width, "height": self.height, "x": self.x, "y": self.y}
        if self.crop_rect is not None:
            d["crop_rect"] = self.crop_rect.to_dict()
        return d
