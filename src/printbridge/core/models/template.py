"""
Module: core.models.template

Purpose:
    Print template description: a page plus positioned text, image
    and container elements. Templates are plain data; layout is
    computed by layout.template.resolve_template().

Key Classes:
    - ElementType: text / image / container
    - TextElement, ImageElement, ContainerElement: Positioned elements
    - Template: Page configuration + top-level elements

Dependencies:
    - core.models.geometry, core.models.text, core.models.images,
      core.models.page

Used By:
    - layout.template: Template resolution
    - cli: `template` command
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .geometry import Rectangle
from .images import ImageConfig
from .page import PageConfig
from .text import TextConstraints


class ElementType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    CONTAINER = "container"


@dataclass(frozen=True)
class TextElement:
    """Text block fitted into its area."""

    id: str
    area: Rectangle
    content: str
    constraints: TextConstraints
    z_index: int = 0

    type = ElementType.TEXT


@dataclass(frozen=True)
class ImageElement:
    """Image placed into its area according to its fit strategy."""

    id: str
    area: Rectangle
    config: ImageConfig
    z_index: int = 0

    type = ElementType.IMAGE


@dataclass(frozen=True)
class ContainerElement:
    """Grouping element; children carry absolute page coordinates."""

    id: str
    area: Rectangle
    children: tuple[LayoutElement, ...] = ()
    z_index: int = 0

    type = ElementType.CONTAINER


LayoutElement = Union[TextElement, ImageElement, ContainerElement]


def element_from_dict(data: dict) -> LayoutElement:
    """
    Build a layout element from its JSON form, dispatching on "type".

    Raises:
        ValueError: If the type is missing or unknown
        KeyError: If a required field is missing
    """
    kind = data.get("type")
    common = {
        "id": data["id"],
        "area": Rectangle.from_dict(data["area"]),
        "z_index": data.get("z_index", 0),
    }
    if kind == ElementType.TEXT.value:
        return TextElement(
            content=data.get("content", ""),
            constraints=TextConstraints.from_dict(data["constraints"]),
            **common,
        )
    if kind == ElementType.IMAGE.value:
        return ImageElement(config=ImageConfig.from_dict(data["config"]), **common)
    if kind == ElementType.CONTAINER.value:
        children = tuple(element_from_dict(c) for c in data.get("children", []))
        return ContainerElement(children=children, **common)
    raise ValueError(f"Unknown element type: {kind!r}")


@dataclass(frozen=True)
class Template:
    """
    Print template (immutable).

    Attributes:
        id: Template identifier
        name: Human readable name
        page: Page configuration
        elements: Top-level elements
        description: Optional description
    """

    id: str
    name: str
    page: PageConfig = field(default_factory=PageConfig)
    elements: tuple[LayoutElement, ...] = ()
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> Template:
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            page=PageConfig.from_dict(data.get("page", {})),
            elements=tuple(element_from_dict(e) for e in data.get("elements", [])),
            description=data.get("description"),
        )
