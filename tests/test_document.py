"""
Tests for the Document container.
"""

import io
import logging
import tempfile
import unittest

from svg_scene.core import CONFIG, configure
from svg_scene.models.document import Document, DocumentError
from svg_scene.models.point import Point
from svg_scene.models.shape import Circle, Polyline, Text
from svg_scene.utils.logger import LogCapture

HEADER = (
    '<?xml version="1.0" encoding="UTF-8" ?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
)


class FailingSink:
    """Sink whose writes always fail."""

    def write(self, data):
        raise OSError("disk full")


class TestDocument(unittest.TestCase):
    """Tests for the Document class."""

    def setUp(self):
        """Set up test fixtures."""
        self.saved_config = CONFIG.copy()

    def tearDown(self):
        """Restore configuration."""
        CONFIG.clear()
        CONFIG.update(self.saved_config)

    def test_empty_document(self):
        self.assertEqual(Document().to_svg_string(), HEADER + "</svg>")

    def test_render_preserves_order(self):
        first = Circle().with_center(Point(1, 1))
        second = Polyline().add_point(Point(2, 2))
        third = Text().with_content("three")
        document = Document().add(first).add(second).add(third)

        self.assertEqual(
            document.to_svg_string(),
            HEADER + first.render() + second.render() + third.render() + "</svg>"
        )
        self.assertEqual(document.shapes, (first, second, third))
        self.assertEqual(list(document), [first, second, third])
        self.assertEqual(len(document), 3)

    def test_add_shapes(self):
        shapes = [Circle().with_radius(r) for r in (1, 2, 3)]
        document = Document().add_shapes(shapes)
        rendered = document.to_svg_string()
        positions = [rendered.index(f'r="{r}"') for r in (1, 2, 3)]
        self.assertEqual(positions, sorted(positions))

    def test_add_rejects_non_shapes(self):
        with self.assertRaises(DocumentError):
            Document().add("<circle/>")
        with self.assertRaises(DocumentError):
            Document().add(None)

    def test_render_to_text_sink(self):
        sink = io.StringIO()
        document = Document().add(Circle())
        document.render(sink)
        self.assertEqual(sink.getvalue(), document.to_svg_string())

    def test_render_to_binary_sink(self):
        sink = io.BytesIO()
        document = Document().add(Text().with_content("héllo"))
        document.render(sink)
        self.assertEqual(sink.getvalue().decode("utf-8"), document.to_svg_string())

    def test_render_to_spooled_binary_file(self):
        document = Document().add(Text().with_content("héllo"))
        with tempfile.SpooledTemporaryFile(mode="w+b") as sink:
            document.render(sink)
            sink.seek(0)
            self.assertEqual(sink.read().decode("utf-8"), document.to_svg_string())

    def test_render_to_spooled_text_file(self):
        document = Document().add(Circle())
        with tempfile.SpooledTemporaryFile(mode="w+", encoding="utf-8") as sink:
            document.render(sink)
            sink.seek(0)
            self.assertEqual(sink.read(), document.to_svg_string())

    def test_sink_errors_propagate(self):
        with self.assertRaises(OSError):
            Document().add(Circle()).render(FailingSink())

    def test_shapes_snapshot_is_immutable(self):
        document = Document().add(Circle())
        self.assertIsInstance(document.shapes, tuple)

    def test_escape_is_opt_in(self):
        text = Text().with_content("a<b")
        self.assertIn(">a<b</text>", Document().add(text).to_svg_string())
        self.assertIn(">a&lt;b</text>", Document(escape_text=True).add(text).to_svg_string())

    def test_escape_from_configuration(self):
        configure({"escape_text": True})
        text = Text().with_content("&")
        self.assertIn(">&amp;</text>", Document().add(text).to_svg_string())
        self.assertIn(">&</text>", Document(escape_text=False).add(text).to_svg_string())

    def test_logs_added_shapes(self):
        with LogCapture("svg_scene.models.document", level=logging.DEBUG) as capture:
            Document().add(Circle()).add(Text())
        self.assertTrue(any("Added circle as shape #1" in line for line in capture.logs))
        self.assertTrue(any("Added text as shape #2" in line for line in capture.logs))


if __name__ == "__main__":
    unittest.main()
