"""Print layout geometry: text fitting, image fitting and packing.

Provides subpackages:
- printbridge.core – immutable value objects (geometry, text, images, templates)
- printbridge.common – unit conversion and standard page sizes
- printbridge.layout – fitting and packing engines
- printbridge.cli – `printbridge` command
"""


def _get_version() -> str:
    """Get version from importlib.metadata, or pyproject.toml in a source checkout."""
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("printbridge")
    except Exception:
        pass

    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"


__version__ = _get_version()

from printbridge.layout import (  # noqa: E402
    LayoutConfig,
    SimpleTextMeasurer,
    PillowTextMeasurer,
    TextFitter,
    TextMeasurer,
    calculate_grid_layout,
    calculate_image_layout,
    calculate_masonry_layout,
    fit_text_to_area,
    get_text_measurer,
    measure_text_bounds,
    resolve_template,
    set_text_measurer,
)

__all__: list[str] = [
    "__version__",
    "LayoutConfig",
    "SimpleTextMeasurer",
    "PillowTextMeasurer",
    "TextFitter",
    "TextMeasurer",
    "calculate_grid_layout",
    "calculate_image_layout",
    "calculate_masonry_layout",
    "fit_text_to_area",
    "get_text_measurer",
    "measure_text_bounds",
    "resolve_template",
    "set_text_measurer",
]
