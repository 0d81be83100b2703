"""
Module: core.models.page

Purpose:
    Page configuration for print templates.

Key Classes:
    - PageFormat: Standard page formats
    - PageOrientation: Portrait or landscape
    - Margins: Page margins in millimetres
    - PageConfig: Format + orientation + margins + DPI
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_DPI = 300


class PageFormat(str, Enum):
    A4 = "A4"
    A5 = "A5"
    LETTER = "Letter"
    LEGAL = "Legal"
    TABLOID = "Tabloid"


class PageOrientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True, slots=True)
class Margins:
    """Page margins in millimetres."""

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    def __post_init__(self) -> None:
        """Validate margins on construction."""
        for name in ("top", "right", "bottom", "left"):
            if getattr(self, name) < 0:
                raise ValueError(f"margin {name} must be >= 0: {getattr(self, name)}")

    def to_dict(self) -> dict:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}

    @classmethod
    def from_dict(cls, data: dict) -> Margins:
        return cls(
            top=data.get("top", 0),
            right=data.get("right", 0),
            bottom=data.get("bottom", 0),
            left=data.get("left", 0),
        )


@dataclass(frozen=True)
class PageConfig:
    """
    Page configuration (immutable).

    Attributes:
        format: Standard page format
        orientation: Portrait or landscape
        margin: Margins in millimetres
        dpi: Output resolution (default 300)
    """

    format: PageFormat = PageFormat.A4
    orientation: PageOrientation = PageOrientation.PORTRAIT
    margin: Margins = field(default_factory=Margins)
    dpi: int = DEFAULT_DPI

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")

    def to_dict(self) -> dict:
        return {
            "format": self.format.value,
            "orientation": self.orientation.value,
            "margin": self.margin.to_dict(),
            "dpi": self.dpi,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PageConfig:
        return cls(
            format=PageFormat(data.get("format", PageFormat.A4.value)),
            orientation=PageOrientation(data.get("orientation", PageOrientation.PORTRAIT.value)),
            margin=Margins.from_dict(data.get("margin", {})),
            dpi=data.get("dpi", DEFAULT_DPI),
        )
