"""
Document model for SVG serialization.
Owns an ordered list of shapes and writes them out as a complete SVG document.
"""

import io
import sys
from typing import IO, Any, Iterable, Iterator, List, Optional, Tuple

from svg_scene.core import CONFIG, Profiler, SvgSceneError
from svg_scene.models.shape import Shape
from svg_scene.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Constants
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_VERSION = "1.1"
SVG_OPEN_TAG = f'<svg xmlns="{SVG_NAMESPACE}" version="{SVG_VERSION}">'
SVG_CLOSE_TAG = "</svg>"
ENCODING = "utf-8"


class DocumentError(SvgSceneError):
    """Custom exception for document-related errors."""
    pass


def _is_binary_sink(sink: Any) -> bool:
    # Wrappers such as SpooledTemporaryFile are not IOBase; fall back to their mode
    if isinstance(sink, io.TextIOBase):
        return False
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(sink, 'mode', '')
    return isinstance(mode, str) and 'b' in mode


class Document:
    """
    Ordered, owning container of shapes.

    Shapes are rendered back-to-back in the order they were added, between
    the XML declaration plus ``<svg>`` root and the closing ``</svg>`` tag.
    """

    def __init__(self, escape_text: Optional[bool] = None):
        """
        Initialize an empty document.

        Args:
            escape_text: Escape text content and keyword attributes on output
                (defaults to CONFIG["escape_text"], which is off)
        """
        self._shapes: List[Shape] = []
        self._escape_text = escape_text

    @property
    def escape_text(self) -> bool:
        """Whether rendering escapes reserved XML characters."""
        if self._escape_text is None:
            return bool(CONFIG["escape_text"])
        return self._escape_text

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        """Get a snapshot of the shapes in insertion order."""
        return tuple(self._shapes)

    def add(self, shape: Shape) -> 'Document':
        """
        Add a shape to the end of the document.

        Args:
            shape: Fully built shape; the document keeps it from now on

        Returns:
            Self for method chaining

        Raises:
            DocumentError: If shape is not a Shape
        """
        if not isinstance(shape, Shape):
            raise DocumentError(f"Cannot add {type(shape).__name__} as a shape")

        self._shapes.append(shape)
        logger.debug(f"Added {shape.type.name.lower()} as shape #{len(self._shapes)}")
        return self

    def add_shapes(self, shapes: Iterable[Shape]) -> 'Document':
        """
        Add multiple shapes, preserving their order.

        Args:
            shapes: Shapes to add

        Returns:
            Self for method chaining
        """
        for shape in shapes:
            self.add(shape)
        return self

    def render(self, sink: Optional[IO[Any]] = None) -> None:
        """
        Write the SVG document to a sink.

        Text sinks receive ``str``; binary sinks receive UTF-8 bytes. Errors
        raised by the sink propagate unchanged.

        Args:
            sink: Writable text or binary stream (defaults to sys.stdout)
        """
        if sink is None:
            sink = sys.stdout

        if _is_binary_sink(sink):
            def write(chunk: str) -> None:
                sink.write(chunk.encode(ENCODING))
        else:
            write = sink.write

        escape = self.escape_text
        with Profiler("document_render"):
            write(XML_DECLARATION + "\n")
            write(SVG_OPEN_TAG + "\n")
            for shape in self._shapes:
                write(shape.render(escape))
            write(SVG_CLOSE_TAG)

        logger.debug(f"Rendered document with {len(self._shapes)} shapes")

    def to_svg_string(self) -> str:
        """
        Render the document to a string.

        Returns:
            SVG document text
        """
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(tuple(self._shapes))

    def __repr__(self) -> str:
        return f"Document(shapes={len(self._shapes)})"
