"""
Core configuration for the SVG scene library.
Holds the process-wide settings and the lightweight profiling helper.
"""

import os
import time
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Global configuration settings
CONFIG: Dict[str, Any] = {
    # Logging
    "log_level": os.environ.get("LOG_LEVEL", "INFO"),

    # Output
    "output_dir": os.environ.get("SVG_SCENE_OUTPUT_DIR", "output"),
    "escape_text": False,  # Opt-in XML escaping of text content and keyword attributes
    "max_svg_size": None,  # Size limit (bytes) enforced by the validator, None for no limit

    # Diagnostics
    "enable_profiling": False,
}


class SvgSceneError(Exception):
    """Base exception for errors raised by the SVG scene library."""
    pass


# Context manager for performance profiling
class Profiler:
    """Simple context manager for timing library operations."""
    def __init__(self, name: str, enabled: Optional[bool] = None):
        self.name = name
        self.enabled = CONFIG["enable_profiling"] if enabled is None else enabled
        self.start_time = None
        self.duration = None

    def __enter__(self):
        if not self.enabled:
            return self

        self.start_time = time.perf_counter()
        logger.debug(f"Profiling started: {self.name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.enabled or self.start_time is None:
            return

        self.duration = time.perf_counter() - self.start_time
        logger.debug(f"Profiling completed: {self.name} - {self.duration:.6f}s")


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the library configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update
    """
    unknown = set(settings) - set(CONFIG)
    if unknown:
        logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

    CONFIG.update({k: v for k, v in settings.items() if k in CONFIG})
    logger.info(f"Core configuration updated: {', '.join(k for k in settings if k in CONFIG)}")


__all__ = [
    "CONFIG",
    "SvgSceneError",
    "Profiler",
    "configure",
]
