"""
Unit tests for SVG export.
"""

from mirrorpath.core import Path, svg_document, write_svg


class TestSvgDocument:
    """Tests for svg_document / write_svg."""

    def test_open_path_not_filled(self, line_path):
        doc = svg_document(line_path.path_data(), line_path.closed)
        assert doc.startswith('<svg width="4000" height="4000" viewBox="0 0 4000 4000"')
        assert 'd="M 0 0 C 25 0, 75 0, 100 0"' in doc
        assert 'fill="none"' in doc
        assert 'stroke="black"' in doc

    def test_closed_path_translucent_fill(self, square_path):
        doc = svg_document(square_path.path_data(), square_path.closed)
        assert 'fill="rgba(0,0,0,0.1)"' in doc

    def test_custom_extent(self):
        doc = svg_document("", False, 800, 600)
        assert 'viewBox="0 0 800 600"' in doc

    def test_write_svg(self, tmp_path, square_path):
        target = write_svg(tmp_path / "out.svg", square_path)
        text = target.read_text(encoding="utf-8")
        assert square_path.path_data() in text
        assert text.endswith("</svg>")

    def test_write_empty_path(self, tmp_path):
        target = write_svg(tmp_path / "empty.svg", Path())
        assert 'd=""' in target.read_text(encoding="utf-8")
