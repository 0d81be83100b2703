"""
Shared numeric collaborators: unit conversion and standard page sizes.
"""

from .page_sizes import (
    PAGE_SIZES,
    PageDimensions,
    get_page_dimensions,
    get_page_dimensions_in_px,
    get_printable_area,
)
from .units import DEFAULT_DPI, Unit, from_px, mm_to_px, pt_to_px, px_to_mm, px_to_pt, to_px

__all__ = [
    "DEFAULT_DPI",
    "Unit",
    "to_px",
    "from_px",
    "mm_to_px",
    "px_to_mm",
    "pt_to_px",
    "px_to_pt",
    "PAGE_SIZES",
    "PageDimensions",
    "get_page_dimensions",
    "get_page_dimensions_in_px",
    "get_printable_area",
]
