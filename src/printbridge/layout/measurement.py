"""
Module: layout.measurement

Purpose:
    Pluggable text measurement. The fitting algorithms only need the
    rendered width/height of a string; how that is obtained depends on
    the host (approximation, Pillow/FreeType metrics, a browser canvas...).

Key Classes:
    - TextMeasurer: Abstract measurement capability
    - SimpleTextMeasurer: Character-count approximation
    - PillowTextMeasurer: FreeType metrics through PIL.ImageFont
    - TextSize: (width, height) result

Key Functions:
    - get_text_measurer(): Current process-wide default
    - set_text_measurer(): Replace the process-wide default

Dependencies:
    - PIL: Font loading and glyph metrics

Used By:
    - layout.wrapping: Greedy word wrap
    - layout.text_fitter: Font size search
    - layout.config: Measurer selection

Threading:
    The default measurer is shared process state. Replace it at start-up
    (single writer); concurrent fit calls only read it. Pass a measurer
    explicitly, or through LayoutConfig, to avoid the shared default.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from PIL import ImageFont

from printbridge.core.models.text import FontWeight

logger = logging.getLogger(__name__)

# Average glyph advance as a fraction of the font size
SIMPLE_CHAR_WIDTH_RATIO = 0.6

DEFAULT_FALLBACK_FONTS: Tuple[str, ...] = (
    "DejaVuSans.ttf",
    "arial.ttf",
    "Arial.ttf",
)
DEFAULT_BOLD_FALLBACK_FONTS: Tuple[str, ...] = (
    "DejaVuSans-Bold.ttf",
    "arialbd.ttf",
    "Arial Bold.ttf",
)

FontWeightLike = Union[FontWeight, str, None]
PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class TextSize(NamedTuple):
    width: float
    height: float


class TextMeasurer(ABC):
    """
    Abstract text measurement capability.

    Implementations must be pure (same inputs, same output) and
    monotonically non-decreasing in font_size for fixed text. The font
    size search relies on this; a non-monotonic measurer gives
    undefined search results.
    """

    @abstractmethod
    def measure_text(
        self,
        text: str,
        font_size: float,
        font_family: str,
        font_weight: FontWeightLike = None,
    ) -> TextSize:
        """
        Measure rendered text.

        Args:
            text: Single line of text
            font_size: Font size in pt
            font_family: Font family name
            font_weight: Optional weight

        Returns:
            TextSize(width, height)
        """


class SimpleTextMeasurer(TextMeasurer):
    """
    Approximate measurer for environments without font metrics.

    Width is len(text) * 0.6 * font_size; height is font_size.
    """

    def measure_text(
        self,
        text: str,
        font_size: float,
        font_family: str,
        font_weight: FontWeightLike = None,
    ) -> TextSize:
        return TextSize(
            width=len(text) * SIMPLE_CHAR_WIDTH_RATIO * font_size,
            height=font_size,
        )


class PillowTextMeasurer(TextMeasurer):
    """
    Measurer backed by FreeType metrics through Pillow.

    Families are resolved to font files in this order:
    1. Explicit ``font_paths`` entry (``"family"`` or ``"family:bold"``)
    2. ``<Family>.ttf`` style names on the system font path
    3. Fallback fonts (DejaVu/Arial)
    4. Pillow's bundled default font (logged as a warning)

    Font sizes are rounded to whole points (minimum 1) before loading.
    Loaded fonts are cached per (family, bold, size).

    Example:
        >>> measurer = PillowTextMeasurer({"Body": "fonts/Inter-Regular.ttf"})
        >>> measurer.measure_text("Hello", 24, "Body").width > 0
        True
    """

    def __init__(
        self,
        font_paths: Optional[Mapping[str, Union[str, Path]]] = None,
        *,
        fallback_fonts: Sequence[str] = DEFAULT_FALLBACK_FONTS,
        bold_fallback_fonts: Sequence[str] = DEFAULT_BOLD_FALLBACK_FONTS,
    ) -> None:
        self._font_paths = {k.lower(): str(v) for k, v in (font_paths or {}).items()}
        self._fallback_fonts = tuple(fallback_fonts)
        self._bold_fallback_fonts = tuple(bold_fallback_fonts)
        self._cache: Dict[Tuple[str, bool, int], PillowFont] = {}

    def measure_text(
        self,
        text: str,
        font_size: float,
        font_family: str,
        font_weight: FontWeightLike = None,
    ) -> TextSize:
        font = self.get_font(font_family, font_weight, font_size)
        width = font.getlength(text)
        return TextSize(width=float(width), height=float(_line_height(font)))

    def get_font(
        self,
        font_family: str,
        font_weight: FontWeightLike,
        font_size: float,
    ) -> PillowFont:
        """Load (or fetch from cache) the font for a family/weight/size."""
        bold = _is_bold(font_weight)
        size = max(1, int(round(font_size)))
        key = (font_family.lower(), bold, size)
        font = self._cache.get(key)
        if font is None:
            font = self._load_font(font_family, bold, size)
            self._cache[key] = font
        return font

    def _candidates(self, font_family: str, bold: bool) -> list[str]:
        family = font_family.lower()
        candidates: list[str] = []
        if bold and f"{family}:bold" in self._font_paths:
            candidates.append(self._font_paths[f"{family}:bold"])
        if family in self._font_paths:
            candidates.append(self._font_paths[family])
        if bold:
            candidates.extend([
                f"{font_family}bd.ttf",       # Windows naming (arialbd.ttf)
                f"{font_family} Bold.ttf",    # macOS naming
                f"{font_family}-Bold.ttf",
            ])
            candidates.extend(self._bold_fallback_fonts)
        candidates.append(f"{font_family}.ttf")
        candidates.extend(self._fallback_fonts)
        return candidates

    def _load_font(self, font_family: str, bold: bool, size: int) -> PillowFont:
        for candidate in self._candidates(font_family, bold):
            try:
                return ImageFont.truetype(candidate, size)
            except (IOError, OSError):
                continue

        logger.warning(
            f"Could not load TrueType font for '{font_family}', using Pillow default"
        )
        return ImageFont.load_default(size)


def _is_bold(font_weight: FontWeightLike) -> bool:
    if font_weight is None:
        return False
    if isinstance(font_weight, FontWeight):
        return font_weight.is_bold
    try:
        return FontWeight(str(font_weight)).is_bold
    except ValueError:
        return False


def _line_height(font: PillowFont) -> float:
    """Ascent + descent, or the bbox height for bitmap fonts."""
    if isinstance(font, ImageFont.FreeTypeFont):
        ascent, descent = font.getmetrics()
        return ascent + descent
    left, top, right, bottom = font.getbbox("Ag")
    return bottom - top


_default_measurer: TextMeasurer = SimpleTextMeasurer()


def get_text_measurer() -> TextMeasurer:
    """Return the process-wide default measurer."""
    return _default_measurer


def set_text_measurer(measurer: TextMeasurer) -> None:
    """
    Replace the process-wide default measurer.

    Intended for start-up configuration, not for concurrent use with
    running fit calls.
    """
    global _default_measurer
    if not isinstance(measurer, TextMeasurer):
        raise TypeError(f"Expected a TextMeasurer, got {type(measurer).__name__}")
    logger.debug(f"Default text measurer set to {type(measurer).__name__}")
    _default_measurer = measurer


def resolve_measurer(measurer: Optional[TextMeasurer] = None) -> TextMeasurer:
    """Return `measurer` if given, otherwise the process-wide default."""
    return measurer if measurer is not None else _default_measurer
