"""
Module: layout.wrapping

Purpose:
    Greedy word wrapping against a measured maximum width.

Key Functions:
    - split_into_words(): Whitespace tokenisation
    - wrap_text(): Pack words into lines no wider than max_width

Algorithm:
    1. Split on runs of whitespace, drop empty tokens
    2. Append each word to the current line while the measured
       "line word" still fits
    3. Otherwise commit the line and start a new one with the word
       (an over-wide word gets a line of its own; words are never split)
    4. No words at all -> a single empty line
"""

from __future__ import annotations

import re
from typing import List, Optional

from .measurement import FontWeightLike, TextMeasurer, resolve_measurer

_WHITESPACE_RE = re.compile(r"\s+")


def split_into_words(text: str) -> List[str]:
    """
    Split text into words on whitespace runs.

    Example:
        >>> split_into_words("  hello \\n world ")
        ['hello', 'world']
    """
    return [word for word in _WHITESPACE_RE.split(text) if word]


def wrap_text(
    text: str,
    max_width: float,
    font_size: float,
    font_family: str,
    font_weight: FontWeightLike = None,
    measurer: Optional[TextMeasurer] = None,
) -> List[str]:
    """
    Wrap text into lines that fit within max_width.

    Args:
        text: Text to wrap
        max_width: Available line width
        font_size: Font size passed to the measurer
        font_family: Font family passed to the measurer
        font_weight: Optional weight passed to the measurer
        measurer: Text measurer (process-wide default if None)

    Returns:
        Non-empty list of lines; [""] when text has no words

    Example:
        >>> wrap_text("aa bb cc", 25, 10, "Arial", measurer=SimpleTextMeasurer())
        ['aa', 'bb', 'cc']
    """
    measurer = resolve_measurer(measurer)
    lines: List[str] = []
    current_line = ""

    for word in split_into_words(text):
        test_line = f"{current_line} {word}" if current_line else word
        width, _ = measurer.measure_text(test_line, font_size, font_family, font_weight)

        if width <= max_width:
            current_line = test_line
        else:
            if current_line:
                lines.append(current_line)
            current_line = word

    if current_line:
        lines.append(current_line)

    return lines if lines else [""]
