"""
Tests for the SVG Validator.
"""

import unittest

from svg_scene.main import build_demo_document
from svg_scene.models.document import Document
from svg_scene.models.shape import Text
from svg_scene.validation.svg_validator import SVGValidator

SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">'


class TestSVGValidator(unittest.TestCase):
    """Tests for the SVGValidator class."""

    def setUp(self):
        """Set up test fixtures."""
        self.validator = SVGValidator()

    def test_demo_document_is_valid(self):
        is_valid, error = self.validator.validate(build_demo_document().to_svg_string())
        self.assertTrue(is_valid, error)
        self.assertIsNone(error)

    def test_empty_document_is_valid(self):
        is_valid, _ = self.validator.validate(Document().to_svg_string())
        self.assertTrue(is_valid)

    def test_malformed_xml(self):
        is_valid, error = self.validator.validate(SVG_OPEN)
        self.assertFalse(is_valid)
        self.assertTrue(error.startswith("Invalid XML"))

    def test_unescaped_content_is_reported(self):
        document = Document().add(Text().with_content("a < b"))
        is_valid, _ = self.validator.validate(document.to_svg_string())
        self.assertFalse(is_valid)

        escaped = Document(escape_text=True).add(Text().with_content("a < b"))
        is_valid, error = self.validator.validate(escaped.to_svg_string())
        self.assertTrue(is_valid, error)

    def test_wrong_root(self):
        is_valid, error = self.validator.validate("<html/>")
        self.assertFalse(is_valid)
        self.assertIn("Root element", error)

    def test_root_without_namespace(self):
        is_valid, _ = self.validator.validate('<svg version="1.1"></svg>')
        self.assertFalse(is_valid)

    def test_disallowed_element(self):
        is_valid, error = self.validator.validate(SVG_OPEN + '<rect width="1"/></svg>')
        self.assertFalse(is_valid)
        self.assertEqual(error, "Disallowed element: rect")

    def test_disallowed_attribute(self):
        is_valid, error = self.validator.validate(SVG_OPEN + '<circle r="1" onclick="x"/></svg>')
        self.assertFalse(is_valid)
        self.assertEqual(error, "Disallowed attribute: onclick on element circle")

    def test_entities_forbidden(self):
        svg = '<!DOCTYPE svg [<!ENTITY x "y">]>' + SVG_OPEN + '</svg>'
        is_valid, _ = self.validator.validate(svg)
        self.assertFalse(is_valid)

    def test_size_limit(self):
        svg = Document().to_svg_string()
        is_valid, error = SVGValidator(max_svg_size=10).validate(svg)
        self.assertFalse(is_valid)
        self.assertIn("exceeds allowed size", error)
        self.assertTrue(SVGValidator(max_svg_size=len(svg)).validate(svg)[0])


if __name__ == "__main__":
    unittest.main()
