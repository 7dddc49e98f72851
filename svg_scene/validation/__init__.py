"""
SVG Scene - Validation Package
==============================
This package contains checks for rendered SVG output.
"""

from svg_scene.validation.svg_validator import SVGValidator

__all__ = [
    "SVGValidator"
]
