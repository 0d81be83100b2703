"""
Tests for layout.measurement

Test Coverage:
- SimpleTextMeasurer approximation
- PillowTextMeasurer metrics, caching and font fallback
- Process-wide default accessors
- Monotonicity in font size (search precondition)
"""

import pytest
from PIL import ImageFont

from printbridge.core.models import FontWeight
from printbridge.layout.config import LayoutConfig
from printbridge.layout.measurement import (
    PillowTextMeasurer,
    SimpleTextMeasurer,
    TextMeasurer,
    TextSize,
    get_text_measurer,
    resolve_measurer,
    set_text_measurer,
)


class TestSimpleTextMeasurer:
    """Tests for the character-count approximation."""

    def test_measure_text_when_ten_chars_then_six_font_sizes_wide(self):
        size = SimpleTextMeasurer().measure_text("abcdefghij", 20, "Arial")
        assert size == TextSize(width=pytest.approx(120), height=20)

    def test_measure_text_when_empty_then_zero_width(self):
        assert SimpleTextMeasurer().measure_text("", 12, "Arial").width == 0

    def test_measure_text_ignores_family_and_weight(self):
        m = SimpleTextMeasurer()
        assert m.measure_text("abc", 10, "Arial") == m.measure_text("abc", 10, "Serif", "bold")


class TestPillowTextMeasurer:
    """Tests for the FreeType-backed measurer."""

    @pytest.fixture
    def measurer(self):
        # Unknown family with no fallbacks -> Pillow's bundled default font
        return PillowTextMeasurer(fallback_fonts=(), bold_fallback_fonts=())

    def test_measure_text_when_longer_text_then_wider(self, measurer):
        short = measurer.measure_text("Hi", 24, "NoSuchFamily")
        long = measurer.measure_text("Hello there", 24, "NoSuchFamily")
        assert long.width > short.width > 0
        assert short.height > 0

    @pytest.mark.parametrize("text", ["W", "Hello World", "print layout"])
    def test_measure_text_is_monotonic_in_font_size(self, measurer, text):
        widths = [measurer.measure_text(text, size, "NoSuchFamily").width for size in range(6, 60, 3)]
        assert widths == sorted(widths)

    def test_get_font_when_same_key_then_cached(self, measurer):
        first = measurer.get_font("NoSuchFamily", None, 18)
        assert measurer.get_font("nosuchfamily", None, 18.2) is first

    def test_get_font_when_tiny_size_then_clamped_to_one(self, measurer):
        font = measurer.get_font("NoSuchFamily", None, 0.2)
        assert font is measurer.get_font("NoSuchFamily", None, 1)

    def test_load_font_when_missing_then_logs_warning(self, measurer, caplog):
        with caplog.at_level("WARNING"):
            measurer.measure_text("x", 12, "NoSuchFamily")
        assert "Could not load TrueType font" in caplog.text

    def test_candidates_when_bold_then_bold_paths_first(self):
        m = PillowTextMeasurer(
            {"Body": "body.ttf", "Body:bold": "body-bold.ttf"},
            fallback_fonts=("fallback.ttf",),
            bold_fallback_fonts=("fallback-bold.ttf",),
        )
        candidates = m._candidates("Body", bold=True)
        assert candidates[:2] == ["body-bold.ttf", "body.ttf"]
        assert candidates.index("fallback-bold.ttf") < candidates.index("fallback.ttf")

    def test_candidates_when_regular_then_no_bold_variants(self):
        m = PillowTextMeasurer(fallback_fonts=("fallback.ttf",), bold_fallback_fonts=("fb-bold.ttf",))
        candidates = m._candidates("Arial", bold=False)
        assert candidates == ["Arial.ttf", "fallback.ttf"]

    def test_measure_text_when_bold_weight_then_requests_bold_font(self, measurer, monkeypatch):
        requested = []
        original = measurer._load_font

        def spy(family, bold, size):
            requested.append(bold)
            return original(family, bold, size)

        monkeypatch.setattr(measurer, "_load_font", spy)
        measurer.measure_text("x", 12, "NoSuchFamily", FontWeight.W700)
        measurer.measure_text("x", 12, "NoSuchFamily", "normal")
        assert requested == [True, False]

    def test_default_font_type(self, measurer):
        font = measurer.get_font("NoSuchFamily", None, 12)
        assert isinstance(font, (ImageFont.FreeTypeFont, ImageFont.ImageFont))


class TestDefaultMeasurer:
    """Tests for the process-wide default measurer."""

    def test_default_is_simple_measurer(self):
        assert isinstance(get_text_measurer(), SimpleTextMeasurer)

    def test_set_text_measurer_replaces_default(self):
        custom = PillowTextMeasurer()
        set_text_measurer(custom)
        assert get_text_measurer() is custom

    def test_set_text_measurer_when_not_measurer_then_raises_error(self):
        with pytest.raises(TypeError, match="Expected a TextMeasurer"):
            set_text_measurer(object())

    def test_resolve_measurer_when_explicit_then_explicit_wins(self):
        explicit = SimpleTextMeasurer()
        assert resolve_measurer(explicit) is explicit
        assert resolve_measurer(None) is get_text_measurer()

    def test_layout_config_when_no_measurer_then_reads_default_at_call_time(self):
        config = LayoutConfig()
        custom = SimpleTextMeasurer()
        set_text_measurer(custom)
        assert config.resolve_measurer() is custom

    def test_layout_config_when_precision_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="search_precision must be positive"):
            LayoutConfig(search_precision=0)

    def test_text_measurer_is_abstract(self):
        with pytest.raises(TypeError):
            TextMeasurer()
