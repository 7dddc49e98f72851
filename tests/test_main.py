"""
Tests for the demo entry point.
"""

import io
import os
import shutil
import logging
import tempfile
import unittest
from unittest import mock

from svg_scene.core import CONFIG, configure
from svg_scene.main import build_demo_document, main

EXPECTED_DEMO = (
    '<?xml version="1.0" encoding="UTF-8" ?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
    '<polyline points="50, 50 250, 250 " fill="none" stroke="rgb(140,198,63)" '
    'stroke-width="16" stroke-linecap="round" />'
    '<circle cx="50" cy="50" r="6" fill="white" stroke="none" stroke-width="1" />'
    '<circle cx="250" cy="250" r="6" fill="white" stroke="none" stroke-width="1" />'
    '<text x="50" y="50" dx="10" dy="-10" font-size="20" font-family="Verdana" '
    'fill="black" stroke="none" stroke-width="1" >C</text>'
    '<text x="250" y="250" dx="10" dy="-10" font-size="50" font-family="Calibri" '
    'fill="black" stroke="none" stroke-width="1" >C++</text>'
    '</svg>'
)


class TestMain(unittest.TestCase):
    """Tests for build_demo_document and main."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        root = logging.getLogger()
        self.saved_handlers = root.handlers[:]
        self.saved_level = root.level
        self.saved_config = CONFIG.copy()

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)
        root = logging.getLogger()
        root.handlers = self.saved_handlers
        root.setLevel(self.saved_level)
        CONFIG.clear()
        CONFIG.update(self.saved_config)

    def test_demo_document(self):
        document = build_demo_document()
        self.assertEqual(len(document), 5)
        self.assertEqual(document.to_svg_string(), EXPECTED_DEMO)

    def test_main_writes_file(self):
        exit_code = main(["--output-dir", self.temp_dir, "--name", "demo", "--validate",
                          "--log-level", "WARNING"])
        self.assertEqual(exit_code, 0)

        with open(os.path.join(self.temp_dir, "demo.svg"), encoding="utf-8", newline="") as f:
            self.assertEqual(f.read(), EXPECTED_DEMO)

    def test_main_stdout_only(self):
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            exit_code = main(["--no-file", "--stdout", "--log-level", "ERROR"])
        self.assertEqual(exit_code, 0)
        self.assertEqual(stdout.getvalue(), EXPECTED_DEMO + "\n")

    def test_main_reports_validation_failure(self):
        configure({"max_svg_size": 10})
        with mock.patch("sys.stdout", new_callable=io.StringIO):
            exit_code = main(["--no-file", "--validate", "--log-level", "ERROR"])
        self.assertEqual(exit_code, 1)
        self.assertFalse(os.listdir(self.temp_dir))

    def test_main_reports_write_failure(self):
        exit_code = main(["--output-dir", self.temp_dir, "--name", os.path.join("missing", "demo"),
                          "--log-level", "ERROR"])
        self.assertEqual(exit_code, 1)


if __name__ == "__main__":
    unittest.main()
