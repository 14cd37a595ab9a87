"""Tests for writing paths onto an SVG page."""

import gzip

from vpath.common import FillRule
from vpath.geom import Offset, Rect
from vpath.page import SvgPage
from vpath.path import Path


def _page_with_square() -> SvgPage:
    page = SvgPage(200, 100)
    path = Path(FillRule.EVEN_ODD)
    path.add_rect(Rect(0, 0, 10, 10))
    page.add_path(path, fill="black")
    page.add_bounds(path)
    return page


class TestSvgPage:
    """Test class for SvgPage."""

    def test_path_element(self):
        """Paths become <path> elements carrying data and fill rule."""
        svg = _page_with_square().to_string()
        assert svg.startswith("<?xml")
        assert 'id="main"' in svg
        assert 'd="M 0 0 L 10 0 L 10 10 L 0 10 Z"' in svg
        assert 'fill-rule="evenodd"' in svg
        assert 'fill="black"' in svg

    def test_debug_group_on_request(self):
        """The debug group is only written when asked for."""
        page = _page_with_square()
        assert 'id="debug"' not in page.to_string()
        svg = page.to_string(include_debug_group=True)
        assert 'id="debug"' in svg
        assert "<rect" in svg

    def test_to_string_is_repeatable(self):
        """Rendering does not alter the page."""
        page = _page_with_square()
        assert page.to_string() == page.to_string()

    def test_add_to_debug_group(self):
        """add_path() can target the debug group."""
        page = SvgPage(50, 50)
        path = Path()
        path.add_circle(Offset(25, 25), 10)
        page.add_path(path, add_to_debug_group=True)
        assert "<path" not in page.to_string()
        assert "<path" in page.to_string(include_debug_group=True)

    def test_save_as(self, tmp_path):
        """save_as() writes plain SVG."""
        target = tmp_path / "page.svg"
        _page_with_square().save_as(str(target))
        assert "<svg" in target.read_text(encoding="utf-8")

    def test_save_as_compressed(self, tmp_path):
        """save_as(compressed=True) writes gzip data."""
        target = tmp_path / "page.svgz"
        _page_with_square().save_as(str(target), compressed=True)
        svg = gzip.decompress(target.read_bytes()).decode("utf-8")
        assert 'fill-rule="evenodd"' in svg
