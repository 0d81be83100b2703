"""
Module: cli

Purpose:
    `printbridge` command: run the layout engines on JSON requests.
    Requests are read from a file (or stdin with "-") and results are
    written to stdout as JSON.

Commands:
    - fit-text:  {"text", "area", "constraints"} -> RenderedText
    - fit-image: {"image_size", "container", "config"} -> RenderedImage
    - grid:      {"images", "container", "columns"?, "gap"?} -> [Rectangle]
    - masonry:   {"images": [{"config", "size"}], "container", "columns"?, "gap"?} -> [Rectangle]
    - template:  {"template", "image_sizes": {src: size}} -> ResolvedTemplate
    - page-size: FORMAT [--orientation] [--dpi] -> mm and px dimensions

Exit codes:
    0 on success, 1 on invalid input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from printbridge import __version__
from printbridge.common.page_sizes import get_page_dimensions, get_page_dimensions_in_px
from printbridge.common.units import DEFAULT_DPI
from printbridge.core.models import (
    ImageConfig,
    PageFormat,
    PageOrientation,
    Rectangle,
    Size,
    SizedImage,
    Template,
    TextConstraints,
)
from printbridge.layout import (
    LayoutConfig,
    PillowTextMeasurer,
    SimpleTextMeasurer,
    TemplateError,
    TextFitter,
    TextMeasurer,
    calculate_grid_layout,
    calculate_image_layout,
    calculate_masonry_layout,
    resolve_template,
)
from printbridge.layout.config import DEFAULT_SEARCH_PRECISION

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_request(source: str) -> Dict[str, Any]:
    if source == "-":
        data = json.load(sys.stdin)
    else:
        with open(Path(source), "r", encoding="utf-8") as f:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Request must be a JSON object")
    return data


def _parse_font_paths(entries: Sequence[str]) -> Dict[str, str]:
    """Parse repeated FAMILY=PATH flags."""
    fonts: Dict[str, str] = {}
    for entry in entries:
        family, sep, path = entry.partition("=")
        if not sep or not family or not path:
            raise ValueError(f"Font must be FAMILY=PATH: {entry!r}")
        fonts[family] = path
    return fonts


def _build_config(args: argparse.Namespace) -> LayoutConfig:
    measurer: TextMeasurer
    if args.measurer == "pillow":
        measurer = PillowTextMeasurer(_parse_font_paths(args.font))
    else:
        measurer = SimpleTextMeasurer()
    return LayoutConfig(measurer=measurer, search_precision=args.precision)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_fit_text(request: Dict[str, Any], config: LayoutConfig) -> Any:
    fitter = TextFitter(config)
    result = fitter.fit(
        request.get("text", ""),
        Rectangle.from_dict(request["area"]),
        TextConstraints.from_dict(request["constraints"]),
    )
    return result.to_dict()


def _cmd_fit_image(request: Dict[str, Any], config: LayoutConfig) -> Any:
    result = calculate_image_layout(
        Size.from_dict(request["image_size"]),
        Rectangle.from_dict(request["container"]),
        ImageConfig.from_dict(request["config"]),
    )
    return result.to_dict()


def _cmd_grid(request: Dict[str, Any], config: LayoutConfig) -> Any:
    images = [ImageConfig.from_dict(item) for item in request.get("images", [])]
    cells = calculate_grid_layout(
        images,
        Rectangle.from_dict(request["container"]),
        request.get("columns"),
        request.get("gap", 0),
    )
    return [cell.to_dict() for cell in cells]


def _cmd_masonry(request: Dict[str, Any], config: LayoutConfig) -> Any:
    images = [SizedImage.from_dict(item) for item in request.get("images", [])]
    kwargs: Dict[str, Any] = {"gap": request.get("gap", 0)}
    if request.get("columns") is not None:
        kwargs["columns"] = request["columns"]
    cells = calculate_masonry_layout(images, Rectangle.from_dict(request["container"]), **kwargs)
    return [cell.to_dict() for cell in cells]


def _cmd_template(request: Dict[str, Any], config: LayoutConfig) -> Any:
    template = Template.from_dict(request["template"])
    sizes = {src: Size.from_dict(size) for src, size in request.get("image_sizes", {}).items()}
    return resolve_template(template, sizes, config).to_dict()


REQUEST_COMMANDS: Dict[str, Callable[[Dict[str, Any], LayoutConfig], Any]] = {
    "fit-text": _cmd_fit_text,
    "fit-image": _cmd_fit_image,
    "grid": _cmd_grid,
    "masonry": _cmd_masonry,
    "template": _cmd_template,
}


def _cmd_page_size(args: argparse.Namespace) -> Any:
    mm = get_page_dimensions(args.format, args.orientation)
    px = get_page_dimensions_in_px(args.format, args.orientation, args.dpi)
    return {
        "format": args.format,
        "orientation": args.orientation,
        "dpi": args.dpi,
        "mm": mm.to_dict(),
        "px": px.to_dict(),
    }


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="printbridge",
        description="Print layout geometry: fit text, place images, pack grids.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name in REQUEST_COMMANDS:
        sub = subparsers.add_parser(name, help=f"Run {name} on a JSON request")
        sub.add_argument("request", nargs="?", default="-", help="Request JSON file ('-' for stdin)")
        sub.add_argument("--measurer", choices=["simple", "pillow"], default="simple",
                         help="Text measurer (default: simple)")
        sub.add_argument("--font", action="append", default=[], metavar="FAMILY=PATH",
                         help="Font file for a family (pillow measurer, repeatable)")
        sub.add_argument("--precision", type=float, default=DEFAULT_SEARCH_PRECISION,
                         help="Font size search precision")

    page = subparsers.add_parser("page-size", help="Show standard page dimensions")
    page.add_argument("format", choices=[f.value for f in PageFormat])
    page.add_argument("--orientation", choices=[o.value for o in PageOrientation],
                      default=PageOrientation.PORTRAIT.value)
    page.add_argument("--dpi", type=int, default=DEFAULT_DPI, help="Output DPI (default: 300)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "page-size":
            output = _cmd_page_size(args)
        else:
            config = _build_config(args)
            request = _load_request(args.request)
            output = REQUEST_COMMANDS[args.command](request, config)
    except (ValueError, KeyError, TypeError, OSError, TemplateError) as exc:
        logger.error(f"{args.command} failed: {exc}")
        return 1

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
