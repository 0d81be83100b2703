"""
Module: layout.template

Purpose:
    Resolve a Template into concrete geometry: fit every text element,
    place every image element, flatten containers and order the result
    by z-index.

Key Functions:
    - resolve_template(): Main entry point

Key Classes:
    - ResolvedElement: One laid-out text or image element
    - ResolvedTemplate: Page size in pixels + resolved elements
    - TemplateError: Template cannot be resolved

Dependencies:
    - layout.text_fitter: TextFitter
    - layout.image_fit: calculate_image_layout
    - common.page_sizes: Page size in pixels

Used By:
    - cli: `template` command
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Union

from printbridge.common.page_sizes import get_page_dimensions_in_px
from printbridge.core.models.geometry import Rectangle, Size
from printbridge.core.models.images import RenderedImage
from printbridge.core.models.template import (
    ContainerElement,
    ElementType,
    ImageElement,
    LayoutElement,
    Template,
    TextElement,
)
from printbridge.core.models.text import RenderedText

from .config import LayoutConfig
from .image_fit import calculate_image_layout
from .text_fitter import TextFitter

logger = logging.getLogger(__name__)


class TemplateError(Exception):
    """Template cannot be resolved."""
    pass


@dataclass(frozen=True)
class ResolvedElement:
    """
    A text or image element with its computed layout.

    Attributes:
        element_id: Source element id
        type: TEXT or IMAGE
        area: Source element area
        z_index: Source element z-index
        rendered: RenderedText or RenderedImage
    """

    element_id: str
    type: ElementType
    area: Rectangle
    z_index: int
    rendered: Union[RenderedText, RenderedImage]

    def to_dict(self) -> dict:
        return {
            "id": self.element_id,
            "type": self.type.value,
            "area": self.area.to_dict(),
            "z_index": self.z_index,
            "rendered": self.rendered.to_dict(),
        }


@dataclass(frozen=True)
class ResolvedTemplate:
    """
    Fully laid-out template.

    Attributes:
        template_id: Source template id
        page_width_px: Page width at the page DPI
        page_height_px: Page height at the page DPI
        elements: Resolved elements, back to front
    """

    template_id: str
    page_width_px: float
    page_height_px: float
    elements: tuple[ResolvedElement, ...]

    @property
    def overflow_ids(self) -> list[str]:
        """Ids of text elements that overflow at their minimum size."""
        return [
            e.element_id
            for e in self.elements
            if isinstance(e.rendered, RenderedText) and e.rendered.overflow
        ]

    def to_dict(self) -> dict:
        return {
            "template_id": self.template_id,
            "page_width_px": self.page_width_px,
            "page_height_px": self.page_height_px,
            "elements": [e.to_dict() for e in self.elements],
            "overflow_ids": self.overflow_ids,
        }


def _iter_leaves(elements: tuple[LayoutElement, ...]) -> Iterator[Union[TextElement, ImageElement]]:
    """Depth-first walk yielding text and image elements in document order."""
    for element in elements:
        if isinstance(element, ContainerElement):
            yield from _iter_leaves(element.children)
        else:
            yield element


def resolve_template(
    template: Template,
    image_sizes: Mapping[str, Size],
    config: Optional[LayoutConfig] = None,
) -> ResolvedTemplate:
    """
    Lay out every element of a template.

    Args:
        template: Template to resolve
        image_sizes: Intrinsic size for each image src
        config: Layout configuration (measurer, search precision)

    Returns:
        ResolvedTemplate with elements ordered by z_index (document
        order among equal z_index)

    Raises:
        TemplateError: If an image src has no entry in image_sizes
    """
    fitter = TextFitter(config)
    resolved: List[ResolvedElement] = []

    for element in _iter_leaves(template.elements):
        if isinstance(element, TextElement):
            rendered: Union[RenderedText, RenderedImage] = fitter.fit(
                element.content, element.area, element.constraints
            )
        else:
            size = image_sizes.get(element.config.src)
            if size is None:
                raise TemplateError(
                    f"No image size for '{element.config.src}' (element '{element.id}')"
                )
            rendered = calculate_image_layout(size, element.area, element.config)

        resolved.append(ResolvedElement(
            element_id=element.id,
            type=element.type,
            area=element.area,
            z_index=element.z_index,
            rendered=rendered,
        ))

    resolved.sort(key=lambda e: e.z_index)

    page = get_page_dimensions_in_px(
        template.page.format, template.page.orientation, template.page.dpi
    )
    result = ResolvedTemplate(
        template_id=template.id,
        page_width_px=page.width,
        page_height_px=page.height,
        elements=tuple(resolved),
    )

    if result.overflow_ids:
        logger.warning(f"Template '{template.id}' has overflowing text: {result.overflow_ids}")
    logger.info(f"Resolved template '{template.id}': {len(resolved)} elements")
    return result
