"""
Core Models Package

Immutable value objects passed between the layout engines. Every model
is a frozen dataclass validated on construction, with to_dict()/from_dict()
for JSON.
"""

from .geometry import InvalidGeometryError, Padding, Rectangle, Size
from .images import FocalPoint, ImageConfig, ImageFit, RenderedImage, SizedImage
from .page import Margins, PageConfig, PageFormat, PageOrientation
from .template import (
    ContainerElement,
    ElementType,
    ImageElement,
    LayoutElement,
    Template,
    TextElement,
    element_from_dict,
)
from .text import FontWeight, RenderedText, TextAlign, TextConstraints, VerticalAlign

__all__ = [
    # Geometry
    "InvalidGeometryError",
    "Padding",
    "Rectangle",
    "Size",
    # Text
    "FontWeight",
    "RenderedText",
    "TextAlign",
    "TextConstraints",
    "VerticalAlign",
    # Images
    "FocalPoint",
    "ImageConfig",
    "ImageFit",
    "RenderedImage",
    "SizedImage",
    # Page
    "Margins",
    "PageConfig",
    "PageFormat",
    "PageOrientation",
    # Template
    "ContainerElement",
    "ElementType",
    "ImageElement",
    "LayoutElement",
    "Template",
    "TextElement",
    "element_from_dict",
]
