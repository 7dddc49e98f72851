"""
SVG Scene - Generation Package
==============================
This package contains modules for writing rendered documents to disk.
"""

from svg_scene.generation.svg_generator import GeneratorError, SVGGenerator

__all__ = [
    "GeneratorError",
    "SVGGenerator"
]
