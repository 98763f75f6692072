"""XML payload handler.

Field paths for XML payloads are slash separated element names starting at
the root element, e.g. ``/order/items/item``. ``*`` matches any element and a
final ``@name`` segment selects an attribute of the matched elements.
Elements in a namespace match either ``{uri}name`` or their local name.
"""

import copy
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from xml.etree import ElementTree

from payloaddocs.interfaces.field_descriptor import FieldDescriptor
from payloaddocs.interfaces.field_type import JsonFieldType
from payloaddocs.interfaces.payload_handler import BasePayloadHandler, PayloadHandlingError

logger = logging.getLogger(__name__)

WILDCARD = "*"

# Slashes inside a {namespace} belong to the segment.
_SEGMENT_PATTERN = re.compile(r"(?:\{[^}]*\}|[^/{])+")


@dataclass(frozen=True)
class XmlFieldPath:
    """A compiled XML field path.

    Segments may carry an ElementTree namespace, as in ``/{urn:notes}note/title``.
    """

    path: str
    elements: tuple[str, ...]
    attribute: str | None

    @classmethod
    def compile(cls, path: str) -> "XmlFieldPath":
        segments = _SEGMENT_PATTERN.findall(path.strip())
        attribute = None
        if segments and segments[-1].startswith("@"):
            attribute = segments.pop()[1:]
        return cls(path=path, elements=tuple(segments), attribute=attribute)


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _tag_matches(element: ElementTree.Element, name: str) -> bool:
    # A segment without a namespace matches the local name of any element.
    if name == WILDCARD or element.tag == name:
        return True
    return not name.startswith("{") and _local_name(element.tag) == name


def _find_elements(root: ElementTree.Element, path: XmlFieldPath) -> list[ElementTree.Element]:
    if not path.elements or not _tag_matches(root, path.elements[0]):
        return []
    current = [root]
    for name in path.elements[1:]:
        current = [child for element in current for child in element if _tag_matches(child, name)]
    return current


def _is_empty(element: ElementTree.Element) -> bool:
    return not element.attrib and len(element) == 0 and not (element.text or "").strip()


class XmlPayloadHandler(BasePayloadHandler):
    """Payload handler for XML bodies, backed by ``xml.etree.ElementTree``."""

    def __init__(self, payload: str) -> None:
        """Initialize the handler.

        Args:
            payload: The XML body as text.

        Raises:
            PayloadHandlingError: If the body is not well-formed XML.
        """
        if not payload.strip():
            self._root: ElementTree.Element | None = None
            return

        try:
            self._root = ElementTree.fromstring(payload)
        except ElementTree.ParseError as e:
            logger.error(f"Failed to parse XML payload: {e}")
            raise PayloadHandlingError(f"Cannot parse XML payload: {e}") from e

    def _matches(self, root: ElementTree.Element | None, path: XmlFieldPath) -> Iterator:
        if root is None:
            return
        for element in _find_elements(root, path):
            if path.attribute is None:
                yield element
            elif path.attribute in element.attrib:
                yield element.attrib[path.attribute]

    def find_missing_fields(self, descriptors: list[FieldDescriptor]) -> list[FieldDescriptor]:
        """Find non-optional descriptors whose path matches nothing."""
        missing = [
            descriptor
            for descriptor in descriptors
            if not descriptor.optional
            and next(self._matches(self._root, XmlFieldPath.compile(descriptor.path)), None) is None
        ]
        logger.debug(f"{len(missing)} of {len(descriptors)} XML fields missing")
        return missing

    def get_undocumented_payload(self, descriptors: list[FieldDescriptor]) -> str:
        """Pretty-print what is left of the document once documented nodes are removed.

        Documenting an element covers its whole subtree. Elements that only
        become empty because their content was removed are dropped as well.
        """
        if self._root is None:
            return ""

        root = copy.deepcopy(self._root)
        originally_empty = {id(element) for element in root.iter() if _is_empty(element)}
        parents = {child: parent for parent in root.iter() for child in parent}

        for descriptor in descriptors:
            path = XmlFieldPath.compile(descriptor.path)
            for element in _find_elements(root, path):
                if path.attribute is not None:
                    if element.attrib.pop(path.attribute, None) is None:
                        continue
                    if not _is_empty(element) or id(element) in originally_empty:
                        continue

                target = element
                # Drop the matched element, then any ancestors left empty by it.
                while target is not None:
                    parent = parents.get(target)
                    if parent is None:
                        if target is root:
                            return ""
                        break
                    parent.remove(target)
                    if not _is_empty(parent) or id(parent) in originally_empty:
                        break
                    target = parent

        ElementTree.indent(root)
        return ElementTree.tostring(root, encoding="unicode")

    def determine_field_type(self, path: str) -> str:
        """Infer the type of the node(s) at a path.

        Elements with child elements are objects; text-only elements and
        attributes are strings.
        """
        common: JsonFieldType | None = None
        for node in self._matches(self._root, XmlFieldPath.compile(path)):
            if isinstance(node, ElementTree.Element) and len(node):
                node_type = JsonFieldType.OBJECT
            else:
                node_type = JsonFieldType.STRING
            if common is None:
                common = node_type
            elif common != node_type:
                return JsonFieldType.VARIES.value
        return (common or JsonFieldType.VARIES).value

    @property
    def media_types(self) -> set[str]:
        """Return the media types this handler is normally selected for."""
        return {"application/xml", "text/xml"}
