"""
Module: common.page_sizes

Purpose:
    Standard page dimensions (ISO A and US formats) in millimetres,
    adjusted for orientation and margins.

Key Functions:
    - get_page_dimensions(): Size in mm for a format/orientation
    - get_page_dimensions_in_px(): Size in pixels at a DPI
    - get_printable_area(): Size in mm inside the margins

Used By:
    - layout.template: Page size of resolved templates
    - cli: `page-size` command
"""

from __future__ import annotations

from dataclasses import dataclass

from printbridge.core.models.page import DEFAULT_DPI, Margins, PageFormat, PageOrientation

from .units import mm_to_px


@dataclass(frozen=True, slots=True)
class PageDimensions:
    """Width and height (unit depends on the producing function)."""

    width: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


PAGE_SIZES: dict[PageFormat, PageDimensions] = {
    PageFormat.A4: PageDimensions(210, 297),
    PageFormat.A5: PageDimensions(148, 210),
    PageFormat.LETTER: PageDimensions(215.9, 279.4),
    PageFormat.LEGAL: PageDimensions(215.9, 355.6),
    PageFormat.TABLOID: PageDimensions(279.4, 431.8),
}


def get_page_dimensions(
    format: PageFormat | str,
    orientation: PageOrientation | str = PageOrientation.PORTRAIT,
) -> PageDimensions:
    """
    Page dimensions in mm, swapped for landscape.

    Raises:
        ValueError: If the format or orientation is unknown

    Example:
        >>> get_page_dimensions("A4", "landscape")
        PageDimensions(width=297, height=210)
    """
    size = PAGE_SIZES[PageFormat(format)]
    if PageOrientation(orientation) is PageOrientation.LANDSCAPE:
        return PageDimensions(width=size.height, height=size.width)
    return size


def get_page_dimensions_in_px(
    format: PageFormat | str,
    orientation: PageOrientation | str = PageOrientation.PORTRAIT,
    dpi: float = DEFAULT_DPI,
) -> PageDimensions:
    """Page dimensions in pixels at `dpi`."""
    dimensions = get_page_dimensions(format, orientation)
    return PageDimensions(
        width=mm_to_px(dimensions.width, dpi),
        height=mm_to_px(dimensions.height, dpi),
    )


def get_printable_area(
    format: PageFormat | str,
    orientation: PageOrientation | str,
    margin: Margins,
) -> PageDimensions:
    """Page dimensions in mm minus margins."""
    dimensions = get_page_dimensions(format, orientation)
    return PageDimensions(
        width=dimensions.width - margin.left - margin.right,
        height=dimensions.height - margin.top - margin.bottom,
    )
