"""
SVG Generator Module
====================
This module provides functionality for writing documents to SVG files.
"""

import os
from typing import Optional

from svg_scene.core import CONFIG, SvgSceneError
from svg_scene.models.document import Document, ENCODING
from svg_scene.utils.logger import get_logger, log_exception

logger = get_logger(__name__)


class GeneratorError(SvgSceneError):
    """Raised when an SVG file cannot be written."""
    pass


class SVGGenerator:
    """Class for writing documents to SVG files."""

    def __init__(self, output_dir: Optional[str] = None):
        """
        Initialize the generator.

        Args:
            output_dir: Directory where SVG files will be saved
                (defaults to CONFIG["output_dir"])
        """
        self.output_dir = output_dir or CONFIG["output_dir"]
        os.makedirs(self.output_dir, exist_ok=True)

    def generate_svg(self, document: Document) -> str:
        """
        Generate SVG code from a document.

        Args:
            document: Document containing the shapes

        Returns:
            String containing the SVG code
        """
        logger.debug(f"Generating SVG for document with {len(document)} shapes")
        return document.to_svg_string()

    def save_svg(self, document: Document, name: str) -> str:
        """
        Render a document and save it to ``<output_dir>/<name>.svg``.

        Args:
            document: Document containing the shapes
            name: File name without extension

        Returns:
            Path to the saved SVG file

        Raises:
            GeneratorError: If the file cannot be written
        """
        filepath = os.path.join(self.output_dir, f"{name}.svg")

        try:
            with open(filepath, "w", encoding=ENCODING, newline="") as f:
                document.render(f)
        except OSError as e:
            log_exception(logger, e, context={"path": filepath})
            raise GeneratorError(f"Error saving SVG to {filepath}: {str(e)}") from e

        logger.info(f"SVG saved to {filepath}")

        return filepath
