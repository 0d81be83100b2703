"""
Module: layout.packing

Purpose:
    Arrange several images inside one container.

Key Functions:
    - calculate_grid_layout(): Uniform cells, row-major order
    - calculate_masonry_layout(): Greedy shortest-column packing

Algorithm (masonry):
    Online and deterministic for a given input order:
    1. Column width = (W - (columns - 1) * gap) / columns
    2. For each image, pick the column with the smallest accumulated
       height (first column wins ties)
    3. Height keeps the image's aspect ratio at column width
    4. The column grows by height + gap
    Not globally optimal; later images never move earlier ones.

Dependencies:
    - core.models: Rectangle, SizedImage

Used By:
    - cli: `grid` and `masonry` commands
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from printbridge.core.models.geometry import Rectangle
from printbridge.core.models.images import SizedImage

logger = logging.getLogger(__name__)

DEFAULT_MASONRY_COLUMNS = 3


def calculate_grid_layout(
    images: Sequence[object],
    container: Rectangle,
    columns: Optional[int] = None,
    gap: float = 0,
) -> List[Rectangle]:
    """
    Calculate a uniform grid for multiple images.

    Args:
        images: Items to place (only the count matters)
        container: Area to fill
        columns: Column count; None or 0 means ceil(sqrt(n))
        gap: Space between cells in pixels

    Returns:
        One Rectangle per item, in input order

    Raises:
        ValueError: If columns or gap is negative
        InvalidGeometryError: If the gaps leave no room for the cells

    Example:
        >>> cells = calculate_grid_layout(["a"] * 4, Rectangle(0, 0, 200, 200))
        >>> [(c.x, c.y) for c in cells]
        [(0.0, 0.0), (100.0, 0.0), (0.0, 100.0), (100.0, 100.0)]
    """
    if columns is not None and columns < 0:
        raise ValueError(f"columns must be >= 0: {columns}")
    if gap < 0:
        raise ValueError(f"gap must be >= 0: {gap}")

    count = len(images)
    if count == 0:
        return []

    cols = columns or math.ceil(math.sqrt(count))
    rows = math.ceil(count / cols)

    cell_width = (container.width - (cols - 1) * gap) / cols
    cell_height = (container.height - (rows - 1) * gap) / rows

    rectangles: List[Rectangle] = []
    for i in range(count):
        col = i % cols
        row = i // cols
        rectangles.append(Rectangle(
            x=container.x + col * (cell_width + gap),
            y=container.y + row * (cell_height + gap),
            width=cell_width,
            height=cell_height,
        ))

    logger.debug(f"Grid layout: {count} items in {cols}x{rows} cells of {cell_width:.1f}x{cell_height:.1f}")
    return rectangles


def calculate_masonry_layout(
    images: Sequence[SizedImage],
    container: Rectangle,
    columns: int = DEFAULT_MASONRY_COLUMNS,
    gap: float = 0,
) -> List[Rectangle]:
    """
    Calculate a masonry (shortest-column-first) layout.

    Args:
        images: Images with known intrinsic sizes
        container: Area whose width is split into columns; content may
            extend below its bottom edge
        columns: Number of columns
        gap: Space between columns and between stacked images

    Returns:
        One Rectangle per image, in input order

    Raises:
        ValueError: If columns < 1 or gap is negative
        InvalidGeometryError: If an image size is not positive

    Example:
        >>> sq = SizedImage(ImageConfig("a.png"), Size(100, 100))
        >>> [(r.x, r.y) for r in calculate_masonry_layout([sq] * 4, Rectangle(0, 0, 300, 0))]
        [(0.0, 0.0), (100.0, 0.0), (200.0, 0.0), (0.0, 100.0)]
    """
    if columns < 1:
        raise ValueError(f"columns must be >= 1: {columns}")
    if gap < 0:
        raise ValueError(f"gap must be >= 0: {gap}")

    if not images:
        return []

    column_width = (container.width - (columns - 1) * gap) / columns
    column_heights = [0.0] * columns
    rectangles: List[Rectangle] = []

    for image in images:
        # Strict "<" keeps the leftmost column on ties
        min_column = 0
        for col in range(1, columns):
            if column_heights[col] < column_heights[min_column]:
                min_column = col

        image_height = column_width / image.size.aspect_ratio

        rectangles.append(Rectangle(
            x=container.x + min_column * (column_width + gap),
            y=container.y + column_heights[min_column],
            width=column_width,
            height=image_height,
        ))
        column_heights[min_column] += image_height + gap

    logger.debug(
        f"Masonry layout: {len(images)} items in {columns} columns, "
        f"tallest column {max(column_heights):.1f}"
    )
    return rectangles
