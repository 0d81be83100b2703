"""
Module: core.models.text

Purpose:
    Text fitting inputs and outputs.

Key Classes:
    - TextConstraints: Font size bounds, line height and font for fitting
    - RenderedText: Result of fitting text into an area
    - FontWeight, TextAlign, VerticalAlign: Typographic options

Dependencies:
    - dataclasses (std)
    - core.models.geometry: Padding

Used By:
    - layout.text_fitter: Fitting search
    - core.models.template: TextElement
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geometry import Padding


class FontWeight(str, Enum):
    """CSS-style font weights accepted by measurers."""

    NORMAL = "normal"
    BOLD = "bold"
    W100 = "100"
    W200 = "200"
    W300 = "300"
    W400 = "400"
    W500 = "500"
    W600 = "600"
    W700 = "700"
    W800 = "800"
    W900 = "900"

    @property
    def is_bold(self) -> bool:
        """True for bold and numeric weights of 600 and above."""
        if self is FontWeight.BOLD:
            return True
        if self is FontWeight.NORMAL:
            return False
        return int(self.value) >= 600


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class VerticalAlign(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class TextConstraints:
    """
    Constraints for the auto-fitting algorithm (immutable).

    Attributes:
        min_font_size: Smallest acceptable font size (pt)
        max_font_size: Largest font size to try (pt)
        line_height: Line height multiplier (e.g. 1.5)
        font_family: Font family passed to the measurer
        font_weight: Optional weight passed to the measurer
        text_align: Horizontal alignment hint for renderers
        vertical_align: Vertical alignment hint for renderers
        padding: Inset subtracted from the fitting area

    Invariants:
        - 0 < min_font_size <= max_font_size
        - line_height > 0

    Example:
        >>> c = TextConstraints(12, 72, 1.5, "Arial")
        >>> c.effective_padding
        Padding(top=0, right=0, bottom=0, left=0)
    """

    min_font_size: float
    max_font_size: float
    line_height: float
    font_family: str
    font_weight: Optional[FontWeight] = None
    text_align: Optional[TextAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    padding: Optional[Padding] = None

    def __post_init__(self) -> None:
        """Validate constraints on construction."""
        if self.min_font_size <= 0:
            raise ValueError(f"min_font_size must be positive: {self.min_font_size}")
        if self.min_font_size > self.max_font_size:
            raise ValueError(
                f"min_font_size must be <= max_font_size: "
                f"{self.min_font_size} > {self.max_font_size}"
            )
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")

        # Accept plain values (e.g. "bold", 700, "center") for the enum fields
        if self.font_weight is not None and not isinstance(self.font_weight, FontWeight):
            object.__setattr__(self, "font_weight", FontWeight(str(self.font_weight)))
        if self.text_align is not None:
            object.__setattr__(self, "text_align", TextAlign(self.text_align))
        if self.vertical_align is not None:
            object.__setattr__(self, "vertical_align", VerticalAlign(self.vertical_align))

    @property
    def effective_padding(self) -> Padding:
        """Padding, defaulting to zero on every edge."""
        return self.padding if self.padding is not None else Padding()

    def to_dict(self) -> dict:
        d = {
            "min_font_size": self.min_font_size,
            "max_font_size": self.max_font_size,
            "line_height": self.line_height,
            "font_family": self.font_family,
        }
        if self.font_weight is not None:
            d["font_weight"] = self.font_weight.value
        if self.text_align is not None:
            d["text_align"] = self.text_align.value
        if self.vertical_align is not None:
            d["vertical_align"] = self.vertical_align.value
        if self.padding is not None:
            d["padding"] = self.padding.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> TextConstraints:
        padding = data.get("padding")
        return cls(
            min_font_size=data["min_font_size"],
            max_font_size=data["max_font_size"],
            line_height=data["line_height"],
            font_family=data["font_family"],
            font_weight=data.get("font_weight"),
            text_align=data.get("text_align"),
            vertical_align=data.get("vertical_align"),
            padding=Padding.from_dict(padding) if padding is not None else None,
        )


@dataclass(frozen=True)
class RenderedText:
    """
    Result of fitting text into an area.

    Attributes:
        font_size: Resolved font size
        lines: Wrapped lines in reading order
        actual_height: lines * font_size * line_height
        actual_width: Widest line at font_size
        overflow: True if text does not fit even at min_font_size
    """

    font_size: float
    lines: tuple[str, ...]
    actual_height: float
    actual_width: float
    overflow: bool

    def to_dict(self) -> dict:
        return {
            "font_size": self.font_size,
            "lines": list(self.lines),
            "actual_height": self.actual_height,
            "actual_width": self.actual_width,
            "overflow": self.overflow,
        }
