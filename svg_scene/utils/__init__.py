"""
SVG Scene - Utilities Package
=============================
This package contains utility modules for the SVG scene library.
"""

from svg_scene.utils.logger import (
    JsonFormatter, setup_logger, get_logger, log_exception, LogCapture
)

__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger', 'log_exception', 'LogCapture'
]
