"""
Point Model Module
==================
This module defines the 2D point value type used for shape geometry.
"""

from typing import NamedTuple, Sequence, Union


class Point(NamedTuple):
    """Immutable 2D point."""
    x: float = 0.0
    y: float = 0.0


PointLike = Union[Point, Sequence[float]]

ORIGIN = Point()


def to_point(value: PointLike) -> Point:
    """
    Coerce a point-like value into a Point.

    Args:
        value: Point or any (x, y) pair

    Returns:
        Point instance with float coordinates

    Raises:
        TypeError: If value is a string or not a pair
        ValueError: If a coordinate is not a number
    """
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Point must be an (x, y) pair, got {type(value).__name__}")
    x, y = value
    return Point(float(x), float(y))
