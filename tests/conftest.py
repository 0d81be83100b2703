import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import printbridge without installing
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from printbridge.core.models import Rectangle, TextConstraints  # noqa: E402
from printbridge.layout.measurement import (  # noqa: E402
    SimpleTextMeasurer,
    get_text_measurer,
    set_text_measurer,
)


@pytest.fixture(autouse=True)
def reset_default_measurer():
    """Restore the process-wide measurer after each test."""
    original = get_text_measurer()
    set_text_measurer(SimpleTextMeasurer())
    yield
    set_text_measurer(original)


@pytest.fixture
def simple_measurer():
    """Character-count measurer (width = len * 0.6 * size)."""
    return SimpleTextMeasurer()


@pytest.fixture
def arial_constraints():
    """Typical 12-72pt constraints."""
    return TextConstraints(
        min_font_size=12,
        max_font_size=72,
        line_height=1.5,
        font_family="Arial",
    )


@pytest.fixture
def square_container():
    """400x400 container at the origin."""
    return Rectangle(0, 0, 400, 400)
