#!/usr/bin/env python3
"""
SVG Scene Demo
==============
Builds the sample scene (a polyline with circle end caps and two labels)
and writes it to an SVG file and/or stdout.
"""

import sys
import argparse
from typing import List, Optional

from svg_scene.core import CONFIG
from svg_scene.generation.svg_generator import GeneratorError, SVGGenerator
from svg_scene.models import Circle, Document, Point, Polyline, Rgb, Text
from svg_scene.utils.logger import get_logger, setup_logger
from svg_scene.validation.svg_validator import SVGValidator

logger = get_logger(__name__)

SOFT_GREEN = Rgb(140, 198, 63)


def build_demo_document() -> Document:
    """
    Build the sample document.

    Returns:
        Document with one polyline, two circles and two text labels
    """
    document = Document()

    document.add(
        Polyline()
        .with_stroke(SOFT_GREEN)
        .with_stroke_width(16)
        .with_stroke_linecap("round")
        .add_point(Point(50, 50))
        .add_point(Point(250, 250))
    )

    for point in (Point(50, 50), Point(250, 250)):
        document.add(
            Circle()
            .with_fill("white")
            .with_radius(6)
            .with_center(point)
        )

    document.add(
        Text()
        .with_point(Point(50, 50))
        .with_offset(Point(10, -10))
        .with_font_size(20)
        .with_font_family("Verdana")
        .with_fill("black")
        .with_content("C")
    )
    document.add(
        Text()
        .with_point(Point(250, 250))
        .with_offset(Point(10, -10))
        .with_font_size(50)
        .with_font_family("Calibri")
        .with_fill("black")
        .with_content("C++")
    )

    return document


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Render the sample SVG scene")
    parser.add_argument("--output-dir", "-o", default=None,
                        help="Directory for the output SVG file (default: CONFIG output_dir)")
    parser.add_argument("--name", "-n", default="test", help="Output file name without extension")
    parser.add_argument("--stdout", action="store_true", help="Also write the document to stdout")
    parser.add_argument("--no-file", action="store_true", help="Do not write an SVG file")
    parser.add_argument("--validate", action="store_true", help="Validate the rendered document")
    parser.add_argument("--log-level", "-l", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        default=None, help="Logging level (default: CONFIG log_level)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    setup_logger(args.log_level or CONFIG["log_level"], use_json=args.json_logs)

    document = build_demo_document()

    if args.validate:
        is_valid, error = SVGValidator().validate(document.to_svg_string())
        if not is_valid:
            logger.error(f"Rendered document failed validation: {error}")
            return 1
        logger.info("Rendered document passed validation")

    if not args.no_file:
        try:
            SVGGenerator(args.output_dir).save_svg(document, args.name)
        except GeneratorError as e:
            logger.error(str(e))
            return 1

    if args.stdout:
        document.render(sys.stdout)
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
