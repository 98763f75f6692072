"""JSON payload handler.

Answers field queries against a JSON request or response body.
"""

import copy
import json
import logging
from typing import Any

from payloaddocs.interfaces.field_descriptor import FieldDescriptor
from payloaddocs.interfaces.payload_handler import BasePayloadHandler, PayloadHandlingError
from payloaddocs.strategies.payload_handlers.json_fields import (
    JsonFieldPath,
    JsonFieldProcessor,
    JsonFieldTypeResolver,
)

logger = logging.getLogger(__name__)


class JsonPayloadHandler(BasePayloadHandler):
    """Payload handler for JSON bodies.

    The body is decoded once at construction. A blank body is treated as an
    empty object, so it documents cleanly with no descriptors.
    """

    def __init__(self, payload: str) -> None:
        """Initialize the handler.

        Args:
            payload: The JSON body as text.

        Raises:
            PayloadHandlingError: If the body is not valid JSON.
        """
        self._processor = JsonFieldProcessor()
        self._type_resolver = JsonFieldTypeResolver(self._processor)

        if not payload.strip():
            self._content: Any = {}
            return

        try:
            self._content = json.loads(payload)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON payload: {e}")
            raise PayloadHandlingError(f"Cannot parse JSON payload: {e}") from e

    def find_missing_fields(self, descriptors: list[FieldDescriptor]) -> list[FieldDescriptor]:
        """Find non-optional descriptors whose path matches nothing."""
        missing = [
            descriptor
            for descriptor in descriptors
            if not descriptor.optional
            and not self._processor.has_field(JsonFieldPath.compile(descriptor.path), self._content)
        ]
        logger.debug(f"{len(missing)} of {len(descriptors)} JSON fields missing")
        return missing

    def get_undocumented_payload(self, descriptors: list[FieldDescriptor]) -> str:
        """Pretty-print what is left of the payload once documented fields are removed.

        Objects and arrays that only become empty because their content was
        removed are dropped as well; ones that were empty to begin with stay.
        """
        content = copy.deepcopy(self._content)
        originally_empty = _empty_containers(content)

        for descriptor in descriptors:
            if self._processor.remove(JsonFieldPath.compile(descriptor.path), content):
                return ""

        _prune(content, originally_empty)
        if isinstance(content, (dict, list)) and not content:
            return ""
        return json.dumps(content, indent=2)

    def determine_field_type(self, path: str) -> str:
        """Infer the type of the value(s) at a path."""
        return self._type_resolver.resolve(JsonFieldPath.compile(path), self._content).value

    @property
    def media_types(self) -> set[str]:
        """Return the media types this handler is normally selected for."""
        return {"application/json"}


def _empty_containers(node: Any) -> set[int]:
    found: set[int] = set()
    if isinstance(node, dict):
        if not node:
            found.add(id(node))
        for value in node.values():
            found |= _empty_containers(value)
    elif isinstance(node, list):
        if not node:
            found.add(id(node))
        for item in node:
            found |= _empty_containers(item)
    return found


def _emptied(node: Any, originally_empty: set[int]) -> bool:
    return isinstance(node, (dict, list)) and not node and id(node) not in originally_empty


def _prune(node: Any, originally_empty: set[int]) -> None:
    if isinstance(node, dict):
        for key in list(node):
            _prune(node[key], originally_empty)
            if _emptied(node[key], originally_empty):
                del node[key]
    elif isinstance(node, list):
        for item in node:
            _prune(item, originally_empty)
        node[:] = [item for item in node if not _emptied(item, originally_empty)]
