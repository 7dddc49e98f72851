"""
Text formatting helpers shared by every SVG attribute writer.
"""

from typing import Union
from xml.sax.saxutils import escape

Number = Union[int, float]

_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def format_number(value: Number) -> str:
    """
    Convert a number to its canonical attribute text.

    Integral values drop the fractional part entirely (``50.0`` -> ``"50"``),
    everything else uses the shortest round-trip float representation
    (``50.34`` -> ``"50.34"``).

    Args:
        value: Number to format

    Returns:
        Attribute text
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def escape_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` in element content."""
    return escape(text)


def escape_attribute(value: str) -> str:
    """Escape a value placed between double quotes in an attribute."""
    return escape(value, _ATTRIBUTE_ENTITIES)
