"""
SVG Scene Package
=================
This package builds an in-memory scene of circles, polylines and text
labels and serializes it to SVG 1.1 text.
"""

from svg_scene.core import CONFIG, Profiler, SvgSceneError, configure
from svg_scene.models import (
    format_number,
    Point, Rgb, Color, NONE_COLOR, ColorError, color_to_string,
    StyleProperties,
    ShapeType, ShapeError, Shape, Circle, Polyline, Text,
    DocumentError, Document
)

__version__ = "0.1.0"

# Make key components available at package level
__all__ = [
    'CONFIG',
    'Profiler',
    'SvgSceneError',
    'configure',
    'format_number',
    'Point', 'Rgb', 'Color', 'NONE_COLOR', 'ColorError', 'color_to_string',
    'StyleProperties',
    'ShapeType', 'ShapeError', 'Shape', 'Circle', 'Polyline', 'Text',
    'DocumentError', 'Document'
]
