"""
Shape models for SVG serialization.
Provides the closed set of renderable primitives (circle, polyline, text).
Every shape is immutable: builder methods return a modified copy and leave
the receiver untouched, so chains always re-bind the latest result.
"""

from enum import Enum, auto
from typing import Any, Dict, Iterable, Optional, Tuple

from typing_extensions import Self

from svg_scene.core import SvgSceneError
from svg_scene.models.color import ColorLike, NONE_COLOR
from svg_scene.models.formatting import (
    Number, escape_attribute, escape_text, format_number
)
from svg_scene.models.point import ORIGIN, Point, PointLike, to_point
from svg_scene.models.style import DEFAULT_STROKE_WIDTH, StyleError, StyleProperties

# Constants
DEFAULT_RADIUS = 1.0
DEFAULT_FONT_SIZE = 1


class ShapeType(Enum):
    """Enum for the supported SVG shape types."""
    CIRCLE = auto()
    POLYLINE = auto()
    TEXT = auto()


class ShapeError(SvgSceneError):
    """Custom exception for shape-related errors."""
    pass


def _coerce_point(value: PointLike) -> Point:
    try:
        return to_point(value)
    except (TypeError, ValueError) as e:
        raise ShapeError(f"Invalid point: {value!r} - {str(e)}") from e


def _coerce_radius(value: Number) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ShapeError(f"Invalid radius: {value!r}") from e


class Shape:
    """
    Base class for SVG shapes.

    Holds the shared StyleProperties by composition and exposes the style
    setters, each returning a new shape of the same concrete type.
    """

    __slots__ = ('_style',)

    shape_type: ShapeType

    def __init__(self, style: Optional[StyleProperties] = None):
        """
        Initialize a new shape.

        Args:
            style: Style properties (defaults to an all-default style)
        """
        self._style = style if style is not None else StyleProperties()

    @property
    def type(self) -> ShapeType:
        """Get shape type."""
        return self.shape_type

    @property
    def style(self) -> StyleProperties:
        """Get style properties."""
        return self._style

    def _with_style(self, style: StyleProperties) -> Self:
        shape = self.copy()
        shape._style = style
        return shape

    def with_fill(self, color: ColorLike = NONE_COLOR) -> Self:
        """
        Create a copy with a new fill color.

        Args:
            color: Color, Rgb, or keyword string (defaults to "none")

        Returns:
            New shape with updated fill
        """
        return self._with_style(self._style.with_fill(color))

    def with_stroke(self, color: ColorLike = NONE_COLOR) -> Self:
        """
        Create a copy with a new stroke color.

        Args:
            color: Color, Rgb, or keyword string (defaults to "none")

        Returns:
            New shape with updated stroke
        """
        return self._with_style(self._style.with_stroke(color))

    def with_stroke_width(self, width: Number = DEFAULT_STROKE_WIDTH) -> Self:
        """
        Create a copy with a new stroke width.

        Args:
            width: Stroke width, not range-checked

        Returns:
            New shape with updated stroke width

        Raises:
            ShapeError: If width is not a number
        """
        try:
            style = self._style.with_stroke_width(width)
        except StyleError as e:
            raise ShapeError(f"Invalid stroke width: {width!r}") from e
        return self._with_style(style)

    def with_stroke_linecap(self, linecap: str) -> Self:
        """Create a copy with the stroke-linecap attribute set."""
        return self._with_style(self._style.with_stroke_linecap(linecap))

    def with_stroke_linejoin(self, linejoin: str) -> Self:
        """Create a copy with the stroke-linejoin attribute set."""
        return self._with_style(self._style.with_stroke_linejoin(linejoin))

    def render(self, escape: bool = False) -> str:
        """
        Render the complete SVG tag of the shape.

        Args:
            escape: Escape keyword attributes and text content

        Returns:
            SVG element text
        """
        # Default implementation should be overridden by subclasses
        raise NotImplementedError("Subclasses must implement render")

    def to_svg_string(self) -> str:
        """Render the shape with the default (unescaped) output."""
        return self.render()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert shape to dictionary representation.

        Returns:
            Dictionary with shape data
        """
        data: Dict[str, Any] = {'type': self.shape_type.name}
        data.update(self._style.to_dict())
        return data

    def copy(self) -> Self:
        """
        Create a copy of the shape.

        Returns:
            Copied shape
        """
        # Default implementation should be overridden by subclasses
        raise NotImplementedError("Subclasses must implement copy")

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        fields = ', '.join(f"{k}={v!r}" for k, v in self.to_dict().items() if k != 'type')
        return f"{self.__class__.__name__}({fields})"


class Circle(Shape):
    """
    Circle shape defined by a center point and a radius.
    """

    __slots__ = ('_center', '_radius')

    shape_type = ShapeType.CIRCLE

    def __init__(
        self,
        center: PointLike = ORIGIN,
        radius: Number = DEFAULT_RADIUS,
        style: Optional[StyleProperties] = None
    ):
        """
        Initialize a circle.

        Args:
            center: Center point
            radius: Radius of circle, not range-checked
            style: Style properties
        """
        super().__init__(style)
        self._center = _coerce_point(center)
        self._radius = _coerce_radius(radius)

    @property
    def center(self) -> Point:
        """Get center point."""
        return self._center

    @property
    def radius(self) -> float:
        """Get radius."""
        return self._radius

    def with_center(self, center: PointLike = ORIGIN) -> 'Circle':
        """
        Create a copy with a new center position.

        Args:
            center: New center point

        Returns:
            New circle with updated center
        """
        circle = self.copy()
        circle._center = _coerce_point(center)
        return circle

    def with_radius(self, radius: Number = DEFAULT_RADIUS) -> 'Circle':
        """
        Create a copy with a new radius.

        Args:
            radius: New radius

        Returns:
            New circle with updated radius
        """
        circle = self.copy()
        circle._radius = _coerce_radius(radius)
        return circle

    def render(self, escape: bool = False) -> str:
        return (
            f'<circle cx="{format_number(self._center.x)}" '
            f'cy="{format_number(self._center.y)}" '
            f'r="{format_number(self._radius)}" '
            f'{self._style.render(escape)}/>'
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'center': tuple(self._center),
            'radius': self._radius
        })
        return data

    def copy(self) -> 'Circle':
        return Circle(center=self._center, radius=self._radius, style=self._style)


class Polyline(Shape):
    """
    Open polyline through an ordered list of vertices.
    """

    __slots__ = ('_vertices',)

    shape_type = ShapeType.POLYLINE

    def __init__(
        self,
        vertices: Iterable[PointLike] = (),
        style: Optional[StyleProperties] = None
    ):
        """
        Initialize a polyline.

        Args:
            vertices: Vertices in drawing order, duplicates allowed
            style: Style properties
        """
        super().__init__(style)
        self._vertices: Tuple[Point, ...] = tuple(_coerce_point(p) for p in vertices)

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Get vertices in insertion order."""
        return self._vertices

    def add_point(self, point: PointLike) -> 'Polyline':
        """
        Create a copy with one more vertex appended.

        Args:
            point: Vertex to append

        Returns:
            New polyline with the vertex added last
        """
        polyline = self.copy()
        polyline._vertices = self._vertices + (_coerce_point(point),)
        return polyline

    def points_attribute(self) -> str:
        """Format vertices as ``x, y`` pairs, each followed by a space."""
        return "".join(
            f"{format_number(x)}, {format_number(y)} " for x, y in self._vertices
        )

    def render(self, escape: bool = False) -> str:
        return (
            f'<polyline points="{self.points_attribute()}" '
            f'{self._style.render(escape)}/>'
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['vertices'] = [tuple(p) for p in self._vertices]
        return data

    def copy(self) -> 'Polyline':
        return Polyline(vertices=self._vertices, style=self._style)


class Text(Shape):
    """
    Text label anchored at a reference point with an offset.
    """

    __slots__ = ('_point', '_offset', '_font_size', '_font_family', '_content')

    shape_type = ShapeType.TEXT

    def __init__(
        self,
        point: PointLike = ORIGIN,
        offset: PointLike = ORIGIN,
        font_size: int = DEFAULT_FONT_SIZE,
        font_family: Optional[str] = None,
        content: str = "",
        style: Optional[StyleProperties] = None
    ):
        """
        Initialize a text label.

        Args:
            point: Reference point (x, y attributes)
            offset: Offset from the reference point (dx, dy attributes)
            font_size: Font size as a whole number
            font_family: Optional font family, omitted from output when None
            content: Text content, written verbatim unless escaping is enabled
            style: Style properties
        """
        super().__init__(style)
        self._point = _coerce_point(point)
        self._offset = _coerce_point(offset)
        self._font_size = self._coerce_font_size(font_size)
        self._font_family = font_family
        self._content = content

    @staticmethod
    def _coerce_font_size(size: int) -> int:
        try:
            return int(size)
        except (TypeError, ValueError) as e:
            raise ShapeError(f"Invalid font size: {size!r}") from e

    @property
    def point(self) -> Point:
        """Get reference point."""
        return self._point

    @property
    def offset(self) -> Point:
        """Get offset."""
        return self._offset

    @property
    def font_size(self) -> int:
        """Get font size."""
        return self._font_size

    @property
    def font_family(self) -> Optional[str]:
        """Get font family."""
        return self._font_family

    @property
    def content(self) -> str:
        """Get text content."""
        return self._content

    def with_point(self, point: PointLike = ORIGIN) -> 'Text':
        """Create a copy with a new reference point."""
        text = self.copy()
        text._point = _coerce_point(point)
        return text

    def with_offset(self, offset: PointLike = ORIGIN) -> 'Text':
        """Create a copy with a new offset."""
        text = self.copy()
        text._offset = _coerce_point(offset)
        return text

    def with_font_size(self, size: int = DEFAULT_FONT_SIZE) -> 'Text':
        """Create a copy with a new font size."""
        text = self.copy()
        text._font_size = self._coerce_font_size(size)
        return text

    def with_font_family(self, font_family: str) -> 'Text':
        """Create a copy with the font-family attribute set."""
        text = self.copy()
        text._font_family = font_family
        return text

    def with_content(self, content: str) -> 'Text':
        """Create a copy with new text content."""
        text = self.copy()
        text._content = content
        return text

    def render(self, escape: bool = False) -> str:
        parts = [
            f'<text x="{format_number(self._point.x)}" ',
            f'y="{format_number(self._point.y)}" ',
            f'dx="{format_number(self._offset.x)}" ',
            f'dy="{format_number(self._offset.y)}" ',
            f'font-size="{self._font_size}" ',
        ]
        if self._font_family is not None:
            family = escape_attribute(self._font_family) if escape else self._font_family
            parts.append(f'font-family="{family}" ')
        content = escape_text(self._content) if escape else self._content
        parts.append(f'{self._style.render(escape)}>{content}</text>')
        return "".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'point': tuple(self._point),
            'offset': tuple(self._offset),
            'font_size': self._font_size,
            'font_family': self._font_family,
            'content': self._content
        })
        return data

    def copy(self) -> 'Text':
        return Text(
            point=self._point,
            offset=self._offset,
            font_size=self._font_size,
            font_family=self._font_family,
            content=self._content,
            style=self._style
        )
