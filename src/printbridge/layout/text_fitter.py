"""
Module: layout.text_fitter

Purpose:
    Fit text into a rectangle by finding the largest font size whose
    greedy word wrap fits the available height.

Key Functions:
    - does_text_fit(): Feasibility of one font size
    - find_max_font_size(): Binary search over [min_font_size, max_font_size]
    - fit_text_to_area(): Main entry point (empty-text handling + widths)
    - measure_text_bounds(): Wrap at a fixed size without searching

Key Classes:
    - TextFitter: Same operations bound to a LayoutConfig
    - FitCheck: Result of one feasibility check
    - TextBounds: Result of measure_text_bounds()

Algorithm:
    Feasibility is monotone in font size (a larger font never needs
    fewer lines or less height) as long as the measurer is monotone.
    1. lo = min, hi = max
    2. While hi - lo > precision: test mid = (lo + hi) / 2;
       fits -> remember it, lo = mid; else hi = mid
    3. Test min_font_size exactly; if it fails, return the min-size
       wrap flagged as overflow (text is never dropped)
    4. Otherwise return the best feasible size found

Dependencies:
    - layout.wrapping: wrap_text
    - layout.measurement: TextMeasurer
    - layout.config: LayoutConfig

Used By:
    - layout.template: Text elements
    - cli: `fit-text` command
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from printbridge.core.models.geometry import Rectangle
from printbridge.core.models.text import RenderedText, TextConstraints

from .config import DEFAULT_SEARCH_PRECISION, LayoutConfig
from .measurement import TextMeasurer, resolve_measurer
from .wrapping import wrap_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitCheck:
    """
    Outcome of wrapping text at one font size.

    Attributes:
        fits: True if actual_height <= available height
        lines: Wrapped lines (always at least one)
        actual_height: len(lines) * font_size * line_height
    """

    fits: bool
    lines: tuple[str, ...]
    actual_height: float


@dataclass(frozen=True)
class FontSizeResult:
    """Outcome of the font size search."""

    font_size: float
    lines: tuple[str, ...]
    actual_height: float
    overflow: bool
    iterations: int = 0


@dataclass(frozen=True)
class TextBounds:
    """Wrapped lines with the widest line width and total height."""

    lines: tuple[str, ...]
    width: float
    height: float

    def to_dict(self) -> dict:
        return {"lines": list(self.lines), "width": self.width, "height": self.height}


def max_search_iterations(
    min_font_size: float,
    max_font_size: float,
    precision: float = DEFAULT_SEARCH_PRECISION,
) -> int:
    """
    Upper bound on bisection steps for a font size range.

    Example:
        >>> max_search_iterations(8, 72)
        7
    """
    span = max_font_size - min_font_size
    if span <= precision:
        return 0
    return math.ceil(math.log2(span / precision))


def does_text_fit(
    text: str,
    area: Rectangle,
    font_size: float,
    constraints: TextConstraints,
    measurer: Optional[TextMeasurer] = None,
) -> FitCheck:
    """
    Check whether text wrapped at font_size fits the padded area.

    Lines and height are returned whether or not the text fits.

    Args:
        text: Text to wrap
        area: Target area (padding is subtracted)
        font_size: Candidate font size
        constraints: Line height, font and padding
        measurer: Text measurer (process-wide default if None)

    Returns:
        FitCheck for this size
    """
    available_width, available_height = area.inset(constraints.effective_padding)

    lines = wrap_text(
        text,
        available_width,
        font_size,
        constraints.font_family,
        constraints.font_weight,
        resolve_measurer(measurer),
    )
    total_height = len(lines) * font_size * constraints.line_height

    return FitCheck(
        fits=total_height <= available_height,
        lines=tuple(lines),
        actual_height=total_height,
    )


def find_max_font_size(
    text: str,
    area: Rectangle,
    constraints: TextConstraints,
    measurer: Optional[TextMeasurer] = None,
    *,
    precision: float = DEFAULT_SEARCH_PRECISION,
) -> FontSizeResult:
    """
    Binary search for the largest font size that fits.

    The result is within `precision` of the true maximum (the search
    stops once the bracket is that narrow). If even min_font_size does
    not fit, the min-size wrap is returned with overflow=True.

    Args:
        text: Non-empty text
        area: Target area
        constraints: Font size range, line height, font, padding
        measurer: Text measurer (process-wide default if None)
        precision: Bracket width at which the search stops

    Returns:
        FontSizeResult
    """
    measurer = resolve_measurer(measurer)
    lo = constraints.min_font_size
    hi = constraints.max_font_size
    best: Optional[FitCheck] = None
    best_size = lo
    iterations = 0

    while hi - lo > precision:
        mid = (lo + hi) / 2
        check = does_text_fit(text, area, mid, constraints, measurer)
        iterations += 1
        logger.debug(
            f"Font search step {iterations}: size={mid:.3f} "
            f"height={check.actual_height:.1f} fits={check.fits}"
        )

        if check.fits:
            best = check
            best_size = mid
            lo = mid
        else:
            hi = mid

    min_check = does_text_fit(text, area, constraints.min_font_size, constraints, measurer)

    if not min_check.fits:
        logger.warning(
            f"Text overflows area {area.width}x{area.height} even at "
            f"min font size {constraints.min_font_size}: "
            f"{min_check.actual_height:.1f}px needed"
        )
        return FontSizeResult(
            font_size=constraints.min_font_size,
            lines=min_check.lines,
            actual_height=min_check.actual_height,
            overflow=True,
            iterations=iterations,
        )

    if best is None:
        # No midpoint fitted (or the range was already narrower than
        # the precision); the minimum does.
        best = min_check
        best_size = constraints.min_font_size

    return FontSizeResult(
        font_size=best_size,
        lines=best.lines,
        actual_height=best.actual_height,
        overflow=False,
        iterations=iterations,
    )


def _max_line_width(
    lines: tuple[str, ...],
    font_size: float,
    constraints: TextConstraints,
    measurer: TextMeasurer,
) -> float:
    widest = 0.0
    for line in lines:
        width, _ = measurer.measure_text(
            line, font_size, constraints.font_family, constraints.font_weight
        )
        widest = max(widest, width)
    return widest


def fit_text_to_area(
    text: str,
    area: Rectangle,
    constraints: TextConstraints,
    measurer: Optional[TextMeasurer] = None,
    *,
    precision: float = DEFAULT_SEARCH_PRECISION,
) -> RenderedText:
    """
    Fit text to an area with automatic font size adjustment.

    Empty or whitespace-only text short-circuits to an empty,
    non-overflowing result at min_font_size.

    Args:
        text: Text content to fit
        area: Rectangle to fit the text into
        constraints: Font size limits, line height, font, padding
        measurer: Text measurer (process-wide default if None)
        precision: Font size search precision

    Returns:
        RenderedText with the chosen size, lines and actual extent

    Example:
        >>> result = fit_text_to_area(
        ...     "Hello World",
        ...     Rectangle(0, 0, 500, 300),
        ...     TextConstraints(12, 72, 1.5, "Arial"),
        ... )
        >>> result.overflow
        False
    """
    measurer = resolve_measurer(measurer)

    if not text or not text.strip():
        return RenderedText(
            font_size=constraints.min_font_size,
            lines=(),
            actual_height=0,
            actual_width=0,
            overflow=False,
        )

    result = find_max_font_size(text, area, constraints, measurer, precision=precision)
    actual_width = _max_line_width(result.lines, result.font_size, constraints, measurer)

    logger.debug(
        f"Fitted {len(text)} chars into {area.width}x{area.height}: "
        f"size={result.font_size:.2f} lines={len(result.lines)} "
        f"iterations={result.iterations}"
    )

    return RenderedText(
        font_size=result.font_size,
        lines=result.lines,
        actual_height=result.actual_height,
        actual_width=actual_width,
        overflow=result.overflow,
    )


def measure_text_bounds(
    text: str,
    font_size: float,
    constraints: TextConstraints,
    max_width: float,
    measurer: Optional[TextMeasurer] = None,
) -> TextBounds:
    """
    Wrap text at a fixed font size and report its extent.

    Padding is not applied; max_width is the line width.

    Returns:
        TextBounds(lines, widest line width, lines * font_size * line_height)
    """
    measurer = resolve_measurer(measurer)
    lines = tuple(
        wrap_text(
            text,
            max_width,
            font_size,
            constraints.font_family,
            constraints.font_weight,
            measurer,
        )
    )
    return TextBounds(
        lines=lines,
        width=_max_line_width(lines, font_size, constraints, measurer),
        height=len(lines) * font_size * constraints.line_height,
    )


class TextFitter:
    """
    Text fitting bound to a LayoutConfig.

    Use this instead of the module functions when the measurer should
    be an explicit dependency rather than the process-wide default.

    Example:
        >>> fitter = TextFitter(LayoutConfig(measurer=SimpleTextMeasurer()))
        >>> constraints = TextConstraints(12, 72, 1.5, "Arial")
        >>> fitter.fit("Hi", Rectangle(0, 0, 400, 400), constraints).font_size
        71.53125
    """

    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        self.config = config or LayoutConfig()

    @property
    def measurer(self) -> TextMeasurer:
        return self.config.resolve_measurer()

    def fit(self, text: str, area: Rectangle, constraints: TextConstraints) -> RenderedText:
        return fit_text_to_area(
            text,
            area,
            constraints,
            self.measurer,
            precision=self.config.search_precision,
        )

    def measure_bounds(
        self,
        text: str,
        font_size: float,
        constraints: TextConstraints,
        max_width: float,
    ) -> TextBounds:
        return measure_text_bounds(text, font_size, constraints, max_width, self.measurer)
