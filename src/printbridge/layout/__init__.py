"""
Module: layout

Purpose:
    Layout engines: text fitting, image fitting and multi-image packing.

Key Functions:
    - fit_text_to_area(): Largest font size whose word wrap fits an area
    - measure_text_bounds(): Wrap at a fixed font size
    - calculate_image_layout(): Place an image by fit strategy
    - calculate_grid_layout(): Uniform grid of cells
    - calculate_masonry_layout(): Shortest-column packing
    - resolve_template(): Lay out a whole template

Key Classes:
    - LayoutConfig: Explicit measurer + search precision
    - TextFitter: Text fitting bound to a LayoutConfig
    - TextMeasurer: Measurement capability (Simple/Pillow implementations)
"""

from .config import DEFAULT_SEARCH_PRECISION, LayoutConfig
from .image_fit import calculate_image_layout
from .measurement import (
    PillowTextMeasurer,
    SimpleTextMeasurer,
    TextMeasurer,
    TextSize,
    get_text_measurer,
    set_text_measurer,
)
from .packing import calculate_grid_layout, calculate_masonry_layout
from .template import ResolvedElement, ResolvedTemplate, TemplateError, resolve_template
from .text_fitter import (
    FitCheck,
    TextBounds,
    TextFitter,
    does_text_fit,
    find_max_font_size,
    fit_text_to_area,
    measure_text_bounds,
)
from .wrapping import split_into_words, wrap_text

__all__ = [
    # Config
    "DEFAULT_SEARCH_PRECISION",
    "LayoutConfig",
    # Measurement
    "TextMeasurer",
    "TextSize",
    "SimpleTextMeasurer",
    "PillowTextMeasurer",
    "get_text_measurer",
    "set_text_measurer",
    # Text
    "split_into_words",
    "wrap_text",
    "FitCheck",
    "TextBounds",
    "TextFitter",
    "does_text_fit",
    "find_max_font_size",
    "fit_text_to_area",
    "measure_text_bounds",
    # Images
    "calculate_image_layout",
    "calculate_grid_layout",
    "calculate_masonry_layout",
    # Templates
    "ResolvedElement",
    "ResolvedTemplate",
    "TemplateError",
    "resolve_template",
]
