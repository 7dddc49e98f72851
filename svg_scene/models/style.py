"""
Style Properties Module
=======================
This module defines the styling attributes shared by every shape.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from svg_scene.core import SvgSceneError
from svg_scene.models.color import Color, ColorLike, NONE_COLOR, to_color
from svg_scene.models.formatting import Number, escape_attribute, format_number

DEFAULT_STROKE_WIDTH = 1.0


class StyleError(SvgSceneError):
    """Custom exception for style-related errors."""
    pass


@dataclass(frozen=True, eq=False)
class StyleProperties:
    """Immutable fill/stroke attribute bundle embedded in each shape."""
    fill: Color = field(default=NONE_COLOR)
    stroke: Color = field(default=NONE_COLOR)
    stroke_width: float = DEFAULT_STROKE_WIDTH
    stroke_linecap: Optional[str] = None
    stroke_linejoin: Optional[str] = None

    def __post_init__(self):
        # Fields accept any color-like value and any number; store canonical types
        object.__setattr__(self, 'fill', to_color(self.fill))
        object.__setattr__(self, 'stroke', to_color(self.stroke))
        try:
            width = float(self.stroke_width)
        except (TypeError, ValueError) as e:
            raise StyleError(f"Invalid stroke width: {self.stroke_width!r}") from e
        object.__setattr__(self, 'stroke_width', width)

    def with_fill(self, color: ColorLike = NONE_COLOR) -> 'StyleProperties':
        return replace(self, fill=color)

    def with_stroke(self, color: ColorLike = NONE_COLOR) -> 'StyleProperties':
        return replace(self, stroke=color)

    def with_stroke_width(self, width: Number = DEFAULT_STROKE_WIDTH) -> 'StyleProperties':
        return replace(self, stroke_width=width)

    def with_stroke_linecap(self, linecap: str) -> 'StyleProperties':
        return replace(self, stroke_linecap=linecap)

    def with_stroke_linejoin(self, linejoin: str) -> 'StyleProperties':
        return replace(self, stroke_linejoin=linejoin)

    def render(self, escape: bool = False) -> str:
        """
        Render the style attribute fragment.

        Every attribute is followed by a single space; the optional line cap
        and line join are omitted entirely when unset.

        Args:
            escape: Escape keyword values for use inside quoted attributes

        Returns:
            Attribute fragment text
        """
        def text(value: str) -> str:
            return escape_attribute(value) if escape else value

        parts: List[str] = [
            f'fill="{text(self.fill.to_svg_string())}" ',
            f'stroke="{text(self.stroke.to_svg_string())}" ',
            f'stroke-width="{format_number(self.stroke_width)}" ',
        ]
        if self.stroke_linecap is not None:
            parts.append(f'stroke-linecap="{text(self.stroke_linecap)}" ')
        if self.stroke_linejoin is not None:
            parts.append(f'stroke-linejoin="{text(self.stroke_linejoin)}" ')
        return "".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            'fill': str(self.fill),
            'stroke': str(self.stroke),
            'stroke_width': self.stroke_width,
            'stroke_linecap': self.stroke_linecap,
            'stroke_linejoin': self.stroke_linejoin,
        }
