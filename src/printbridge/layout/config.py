"""
Module: layout.config

Purpose:
    Configuration for the layout engines. Holds the text measurer
    explicitly so that callers do not have to rely on the process-wide
    default.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)
    - layout.measurement: TextMeasurer

Used By:
    - layout.text_fitter: TextFitter
    - layout.template: Template resolution
    - cli: Built from command-line flags
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .measurement import TextMeasurer, resolve_measurer

# Font sizes closer than this are treated as equal by the search
DEFAULT_SEARCH_PRECISION = 0.5


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for layout calculations (immutable).

    Attributes:
        measurer: Text measurer; None means the process-wide default
            (looked up at call time, not at construction)
        search_precision: Stop the font size search once the bracket
            is no wider than this

    Example:
        >>> config = LayoutConfig(measurer=SimpleTextMeasurer())
        >>> config.search_precision
        0.5
    """

    measurer: Optional[TextMeasurer] = None
    search_precision: float = DEFAULT_SEARCH_PRECISION

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.search_precision <= 0:
            raise ValueError(f"search_precision must be positive: {self.search_precision}")

    def resolve_measurer(self) -> TextMeasurer:
        """Explicit measurer, or the current process-wide default."""
        return resolve_measurer(self.measurer)
