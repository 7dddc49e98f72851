"""
Color model for SVG serialization.
A color is either an RGB triple or a keyword string such as a CSS color name.
"""

from typing import NamedTuple, Union

from svg_scene.core import SvgSceneError

# Constants
NONE_KEYWORD = "none"


class ColorError(SvgSceneError):
    """Custom exception for color-related errors."""
    pass


class Rgb(NamedTuple):
    """RGB triple with channels in the 0-255 range."""
    red: int = 255
    green: int = 255
    blue: int = 255


class Color:
    """
    Immutable color holding exactly one of two variants.

    The keyword variant is emitted verbatim; the RGB variant is emitted as
    ``rgb(r,g,b)``. Colors carry no equality of their own and are compared
    by their rendered text.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Union[Rgb, str] = NONE_KEYWORD):
        """
        Initialize a color.

        Args:
            value: Rgb triple or keyword string (defaults to "none")

        Raises:
            ColorError: If value is neither an Rgb nor a string
        """
        if not isinstance(value, (Rgb, str)):
            raise ColorError(
                f"Color must be built from Rgb or str, got {type(value).__name__}: {value!r}"
            )
        self._value = value

    @property
    def value(self) -> Union[Rgb, str]:
        """Get the held variant."""
        return self._value

    @property
    def is_rgb(self) -> bool:
        """Check if the RGB variant is held."""
        return isinstance(self._value, Rgb)

    def to_svg_string(self) -> str:
        """
        Convert to SVG attribute text.

        Returns:
            Keyword verbatim or ``rgb(r,g,b)``
        """
        if isinstance(self._value, str):
            return self._value

        red, green, blue = self._value
        return f"rgb({int(red)},{int(green)},{int(blue)})"

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        return f"Color({self._value!r})"


ColorLike = Union[Color, Rgb, str]

NONE_COLOR = Color()


def to_color(value: ColorLike) -> Color:
    """
    Coerce a color-like value into a Color.

    Args:
        value: Color, Rgb, or keyword string

    Returns:
        Color instance
    """
    if isinstance(value, Color):
        return value
    return Color(value)


def color_to_string(color: ColorLike) -> str:
    """Render any color-like value to its SVG attribute text."""
    return to_color(color).to_svg_string()
