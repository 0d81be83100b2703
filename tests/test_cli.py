"""
Tests for the printbridge command line.

Requests are written to tmp_path (or fed through stdin) and the JSON
printed to stdout is parsed back.
"""

import io
import json

import pytest

from printbridge import __version__
from printbridge.cli import build_parser, main


@pytest.fixture
def run_cli(tmp_path, capsys):
    """Run main() on a request dict and return (exit code, parsed stdout)."""

    def _run(command, request, *extra):
        path = tmp_path / "request.json"
        path.write_text(json.dumps(request), encoding="utf-8")
        code = main([command, str(path), *extra])
        out = capsys.readouterr().out
        return code, (json.loads(out) if out.strip() else None)

    return _run


class TestRequestCommands:
    """Tests for the JSON request commands."""

    def test_fit_text_when_valid_then_prints_rendered_text(self, run_cli):
        code, out = run_cli("fit-text", {
            "text": "Hi",
            "area": {"x": 0, "y": 0, "width": 400, "height": 400},
            "constraints": {"min_font_size": 12, "max_font_size": 72, "line_height": 1.5, "font_family": "Arial"},
        })

        assert code == 0
        assert out["lines"] == ["Hi"]
        assert out["font_size"] == pytest.approx(71.53125)
        assert out["overflow"] is False

    def test_fit_text_when_precision_flag_then_used(self, run_cli):
        code, out = run_cli("fit-text", {
            "text": "Hi",
            "area": {"width": 400, "height": 400},
            "constraints": {"min_font_size": 12, "max_font_size": 72, "line_height": 1.5, "font_family": "Arial"},
        }, "--precision", "0.01")

        assert code == 0
        assert 71.99 < out["font_size"] < 72

    def test_fit_text_when_pillow_measurer_then_succeeds(self, run_cli):
        code, out = run_cli("fit-text", {
            "text": "Hello World",
            "area": {"width": 300, "height": 200},
            "constraints": {"min_font_size": 8, "max_font_size": 40, "line_height": 1.2, "font_family": "NoSuchFamily"},
        }, "--measurer", "pillow")

        assert code == 0
        assert 8 <= out["font_size"] <= 40

    def test_fit_image_when_cover_then_prints_crop(self, run_cli):
        code, out = run_cli("fit-image", {
            "image_size": {"width": 800, "height": 400},
            "container": {"x": 0, "y": 0, "width": 400, "height": 400},
            "config": {"src": "a.png", "fit": "cover"},
        })

        assert code == 0
        assert out["crop_rect"] == {"x": 200, "y": 0, "width": 400, "height": 400}

    def test_grid_when_four_images_then_two_by_two(self, run_cli):
        code, out = run_cli("grid", {
            "images": [{"src": f"{i}.png"} for i in range(4)],
            "container": {"width": 200, "height": 200},
        })

        assert code == 0
        assert [(c["x"], c["y"]) for c in out] == [(0, 0), (100, 0), (0, 100), (100, 100)]

    def test_masonry_when_columns_given_then_used(self, run_cli):
        square = {"config": {"src": "a.png"}, "size": {"width": 10, "height": 10}}
        code, out = run_cli("masonry", {
            "images": [square, square, square],
            "container": {"width": 200, "height": 0},
            "columns": 2,
        })

        assert code == 0
        assert [(c["x"], c["y"]) for c in out] == [(0, 0), (100, 0), (0, 100)]

    def test_template_when_valid_then_prints_resolved_elements(self, run_cli):
        code, out = run_cli("template", {
            "template": {
                "id": "poster",
                "elements": [
                    {"type": "image", "id": "bg", "area": {"width": 100, "height": 100},
                     "config": {"src": "bg.png"}, "z_index": 1},
                    {"type": "text", "id": "title", "area": {"width": 100, "height": 40},
                     "content": "Sale",
                     "constraints": {"min_font_size": 8, "max_font_size": 30,
                                     "line_height": 1.2, "font_family": "Arial"}},
                ],
            },
            "image_sizes": {"bg.png": {"width": 50, "height": 50}},
        })

        assert code == 0
        assert out["template_id"] == "poster"
        assert [e["id"] for e in out["elements"]] == ["title", "bg"]

    def test_request_from_stdin(self, monkeypatch, capsys):
        request = {
            "image_size": {"width": 50, "height": 50},
            "container": {"width": 400, "height": 400},
            "config": {"src": "a.png", "fit": "scale-down"},
        }
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(request)))

        code = main(["fit-image", "-"])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["x"] == 175


class TestErrors:
    """Invalid input exits with status 1 and no stdout."""

    def test_missing_field_then_exit_one(self, run_cli):
        code, out = run_cli("fit-image", {"image_size": {"width": 1, "height": 1}})
        assert code == 1
        assert out is None

    def test_invalid_geometry_then_exit_one(self, run_cli):
        code, _ = run_cli("fit-image", {
            "image_size": {"width": 0, "height": 50},
            "container": {"width": 400, "height": 400},
            "config": {"src": "a.png"},
        })
        assert code == 1

    def test_template_missing_image_size_then_exit_one(self, run_cli):
        code, _ = run_cli("template", {
            "template": {"id": "t", "elements": [
                {"type": "image", "id": "bg", "area": {"width": 10, "height": 10}, "config": {"src": "x.png"}},
            ]},
        })
        assert code == 1

    def test_request_not_object_then_exit_one(self, tmp_path, capsys):
        path = tmp_path / "request.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert main(["grid", str(path)]) == 1

    def test_request_file_missing_then_exit_one(self, tmp_path):
        assert main(["grid", str(tmp_path / "missing.json")]) == 1

    def test_bad_font_flag_then_exit_one(self, run_cli):
        code, _ = run_cli("fit-text", {}, "--measurer", "pillow", "--font", "no-equals-sign")
        assert code == 1


class TestPageSizeCommand:
    """Tests for `printbridge page-size`."""

    def test_page_size_when_landscape_then_swapped(self, capsys):
        code = main(["page-size", "A4", "--orientation", "landscape", "--dpi", "150"])
        out = json.loads(capsys.readouterr().out)

        assert code == 0
        assert out["mm"] == {"width": 297, "height": 210}
        assert out["px"]["width"] == pytest.approx(297 / 25.4 * 150)

    def test_page_size_when_unknown_format_then_argparse_exits(self):
        with pytest.raises(SystemExit):
            main(["page-size", "B5"])


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out
