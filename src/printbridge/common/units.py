"""
Module: common.units

Purpose:
    Convert between pixels and physical units at a given DPI.
    Conversion factors are defined against the 96 px/inch screen
    reference and then scaled by dpi / 96.

Key Functions:
    - to_px(): Physical unit -> pixels
    - from_px(): Pixels -> physical unit
    - mm_to_px(), px_to_mm(), pt_to_px(), px_to_pt(): Shorthands

Used By:
    - common.page_sizes: Page dimensions in pixels
    - layout.template: Page size of resolved templates
"""

from __future__ import annotations

from enum import Enum

from printbridge.core.models.page import DEFAULT_DPI

SCREEN_DPI = 96


class Unit(str, Enum):
    PX = "px"
    PT = "pt"
    MM = "mm"
    CM = "cm"
    IN = "in"


# Pixels per unit at 96 DPI
CONVERSION_FACTORS: dict[Unit, float] = {
    Unit.PX: 1.0,
    Unit.PT: SCREEN_DPI / 72,    # 1 pt = 1/72 inch
    Unit.MM: SCREEN_DPI / 25.4,  # 1 inch = 25.4 mm
    Unit.CM: SCREEN_DPI / 2.54,
    Unit.IN: float(SCREEN_DPI),
}


def _check_dpi(dpi: float) -> None:
    if dpi <= 0:
        raise ValueError(f"dpi must be positive: {dpi}")


def to_px(value: float, unit: Unit | str, dpi: float = DEFAULT_DPI) -> float:
    """
    Convert a value in `unit` to pixels at `dpi`.

    Pixel values are returned unchanged regardless of dpi.

    Example:
        >>> to_px(1, "in", dpi=300)
        300.0
    """
    unit = Unit(unit)
    _check_dpi(dpi)
    if unit is Unit.PX:
        return value
    return value * CONVERSION_FACTORS[unit] * (dpi / SCREEN_DPI)


def from_px(value: float, unit: Unit | str, dpi: float = DEFAULT_DPI) -> float:
    """
    Convert pixels at `dpi` to `unit`.

    Example:
        >>> from_px(300, "in", dpi=300)
        1.0
    """
    unit = Unit(unit)
    _check_dpi(dpi)
    if unit is Unit.PX:
        return value
    return value / (dpi / SCREEN_DPI) / CONVERSION_FACTORS[unit]


def mm_to_px(mm: float, dpi: float = DEFAULT_DPI) -> float:
    return to_px(mm, Unit.MM, dpi)


def px_to_mm(px: float, dpi: float = DEFAULT_DPI) -> float:
    return from_px(px, Unit.MM, dpi)


def pt_to_px(pt: float, dpi: float = DEFAULT_DPI) -> float:
    return to_px(pt, Unit.PT, dpi)


def px_to_pt(px: float, dpi: float = DEFAULT_DPI) -> float:
    return from_px(px, Unit.PT, dpi)
