"""
SVG Scene - Data Models
=======================
This package contains the value types, shapes and document container
that make up an SVG scene.
"""

from svg_scene.models.formatting import format_number
from svg_scene.models.point import Point, ORIGIN
from svg_scene.models.color import (
    ColorError, Rgb, Color, NONE_COLOR, to_color, color_to_string
)
from svg_scene.models.style import StyleProperties
from svg_scene.models.shape import (
    ShapeType, ShapeError, Shape, Circle, Polyline, Text
)
from svg_scene.models.document import DocumentError, Document

__all__ = [
    'format_number',
    'Point', 'ORIGIN',
    'ColorError', 'Rgb', 'Color', 'NONE_COLOR', 'to_color', 'color_to_string',
    'StyleProperties',
    'ShapeType', 'ShapeError', 'Shape', 'Circle', 'Polyline', 'Text',
    'DocumentError', 'Document'
]
