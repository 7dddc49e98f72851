"""
SVG validation utilities to check rendered documents.
"""
from typing import Dict, Optional, Set, Tuple
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree

from svg_scene.core import CONFIG
from svg_scene.models.document import ENCODING, SVG_NAMESPACE
from svg_scene.utils.logger import get_logger

logger = get_logger(__name__)


class SVGValidator:
    """
    Validates rendered SVG text.

    Ensures the text is well-formed XML rooted at an SVG-namespaced ``<svg>``
    element and uses only the elements and attributes this library emits.
    """

    def __init__(self, max_svg_size: Optional[int] = None):
        """
        Initialize the SVG validator.

        Args:
            max_svg_size: Maximum allowed size of an SVG document in bytes
                (defaults to CONFIG["max_svg_size"]; None disables the check)
        """
        self.max_svg_size = max_svg_size if max_svg_size is not None else CONFIG["max_svg_size"]
        self.allowed_elements = self._get_allowed_elements()

    def _get_allowed_elements(self) -> Dict[str, Set[str]]:
        """
        Define allowed SVG elements and attributes.

        Returns:
            Dictionary mapping element names to sets of allowed attributes
        """
        # Style attributes shared by all shapes
        common_attrs = {
            'fill', 'stroke', 'stroke-width', 'stroke-linecap', 'stroke-linejoin',
        }

        return {
            'common': common_attrs,
            'svg': {'version'},
            'circle': {'cx', 'cy', 'r'},
            'polyline': {'points'},
            'text': {'x', 'y', 'dx', 'dy', 'font-size', 'font-family'},
        }

    def validate(self, svg_code: str) -> Tuple[bool, Optional[str]]:
        """
        Validate an SVG string.

        Args:
            svg_code: The SVG string to validate

        Returns:
            Tuple of (is_valid: bool, error_message: Optional[str])
        """
        data = svg_code.encode(ENCODING)

        # Check file size
        if self.max_svg_size is not None and len(data) > self.max_svg_size:
            return False, f"SVG exceeds allowed size: {len(data)} bytes (max: {self.max_svg_size})"

        try:
            # Parse XML using defusedxml to prevent XXE attacks
            tree = ElementTree.fromstring(
                data,
                forbid_dtd=True,
                forbid_entities=True,
                forbid_external=True,
            )
        except (ParseError, DefusedXmlException) as e:
            logger.debug(f"SVG rejected as invalid XML: {e}")
            return False, f"Invalid XML: {str(e)}"

        if tree.tag != f"{{{SVG_NAMESPACE}}}svg":
            return False, f"Root element must be svg in namespace {SVG_NAMESPACE}, got {tree.tag}"

        for element in tree.iter():
            tag_name = element.tag.split('}')[-1]
            if tag_name == 'common' or tag_name not in self.allowed_elements:
                return False, f"Disallowed element: {tag_name}"

            for attr in element.attrib:
                attr_name = attr.split('}')[-1]
                if (
                    attr_name not in self.allowed_elements[tag_name]
                    and attr_name not in self.allowed_elements['common']):
                    return False, f"Disallowed attribute: {attr_name} on element {tag_name}"

        # If we've made it this far, the SVG is valid
        return True, None
