"""
Module: layout.image_fit

Purpose:
    Position and size an image inside a container according to a fit
    strategy, deriving the crop window for COVER from a focal point.

Key Functions:
    - calculate_image_layout(): Main entry point (dispatch on fit)
    - calculate_contain_fit(), calculate_cover_fit(),
      calculate_fill_fit(), calculate_scale_down_fit()

Geometry:
    image_aspect = w / h, container_aspect = W / H
    - CONTAIN: match the constraining side, centre on both axes
    - COVER: match the other side, overflow is cropped; the crop offset
      is excess * focal / 100 and the image sits at the container origin
    - FILL: exactly the container
    - SCALE_DOWN: CONTAIN unless that would enlarge the image, in which
      case the original size is centred

Dependencies:
    - core.models: Rectangle, Size, ImageConfig, RenderedImage

Used By:
    - layout.template: Image elements
    - cli: `fit-image` command
"""

from __future__ import annotations

import logging
from typing import Optional

from printbridge.core.models.geometry import InvalidGeometryError, Rectangle, Size
from printbridge.core.models.images import FocalPoint, ImageConfig, ImageFit, RenderedImage

logger = logging.getLogger(__name__)

DEFAULT_FOCAL_PERCENT = 50


def _check_container(container: Rectangle) -> None:
    if container.width <= 0 or container.height <= 0:
        raise InvalidGeometryError(
            f"Container must have positive size: {container.width}x{container.height}"
        )


def calculate_image_layout(
    image_size: Size,
    container: Rectangle,
    config: ImageConfig,
) -> RenderedImage:
    """
    Calculate rendered image dimensions and position for a fit strategy.

    Args:
        image_size: Intrinsic image size
        container: Area to place the image in
        config: Fit strategy and optional focal point

    Returns:
        RenderedImage (crop_rect only for COVER)

    Raises:
        InvalidGeometryError: If the image or container has a zero or
            negative side

    Example:
        >>> calculate_image_layout(
        ...     Size(800, 400), Rectangle(0, 0, 400, 400), ImageConfig("a.png")
        ... )
        RenderedImage(width=400, height=200.0, x=0.0, y=100.0, crop_rect=None)
    """
    _check_container(container)
    image_aspect = image_size.aspect_ratio
    container_aspect = container.aspect_ratio
    fit = ImageFit.parse(config.fit)

    if fit is ImageFit.COVER:
        result = calculate_cover_fit(container, image_aspect, container_aspect, config.position)
    elif fit is ImageFit.FILL:
        result = calculate_fill_fit(container)
    elif fit is ImageFit.SCALE_DOWN:
        result = calculate_scale_down_fit(image_size, container, image_aspect, container_aspect)
    else:
        result = calculate_contain_fit(container, image_aspect, container_aspect)

    logger.debug(f"Image {config.src!r} ({fit.value}) -> {result}")
    return result


def calculate_contain_fit(
    container: Rectangle,
    image_aspect: float,
    container_aspect: float,
) -> RenderedImage:
    """Scale to fit inside the container, keeping aspect ratio, centred."""
    if image_aspect > container_aspect:
        # Wider than the container: width constrains
        width = container.width
        height = width / image_aspect
    else:
        height = container.height
        width = height * image_aspect

    x = container.x + (container.width - width) / 2
    y = container.y + (container.height - height) / 2

    return RenderedImage(width=width, height=height, x=x, y=y)


def calculate_cover_fit(
    container: Rectangle,
    image_aspect: float,
    container_aspect: float,
    position: Optional[FocalPoint] = None,
) -> RenderedImage:
    """
    Scale to cover the container, keeping aspect ratio.

    The rendered image overflows the container on one axis; crop_rect
    is the container-sized window into the rendered image, offset
    along the overflowing axis by the focal point percentage.
    """
    if image_aspect > container_aspect:
        # Wider: fit height, crop width
        height = container.height
        width = height * image_aspect
        focal_x = position.x if position is not None else DEFAULT_FOCAL_PERCENT
        crop = Rectangle(
            x=(width - container.width) * focal_x / 100,
            y=0,
            width=container.width,
            height=container.height,
        )
    else:
        # Taller: fit width, crop height
        width = container.width
        height = width / image_aspect
        focal_y = position.y if position is not None else DEFAULT_FOCAL_PERCENT
        crop = Rectangle(
            x=0,
            y=(height - container.height) * focal_y / 100,
            width=container.width,
            height=container.height,
        )

    return RenderedImage(
        width=width,
        height=height,
        x=container.x,
        y=container.y,
        crop_rect=crop,
    )


def calculate_fill_fit(container: Rectangle) -> RenderedImage:
    """Stretch to the container (aspect ratio ignored)."""
    return RenderedImage(
        width=container.width,
        height=container.height,
        x=container.x,
        y=container.y,
    )


def calculate_scale_down_fit(
    image_size: Size,
    container: Rectangle,
    image_aspect: float,
    container_aspect: float,
) -> RenderedImage:
    """CONTAIN, but never larger than the original image."""
    contained = calculate_contain_fit(container, image_aspect, container_aspect)

    if contained.width > image_size.width or contained.height > image_size.height:
        return RenderedImage(
            width=image_size.width,
            height=image_size.height,
            x=container.x + (container.width - image_size.width) / 2,
            y=container.y + (container.height - image_size.height) / 2,
        )

    return contained
