"""Field paths and field processing for JSON payloads.

A path such as ``items[].tags`` is compiled into segments and walked over the
decoded payload (``dict``/``list``/scalars). ``[]`` descends into every
element of an array, or denotes the array itself when it ends the path.
``*`` descends into every value of an object.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from payloaddocs.interfaces.field_type import JsonFieldType

ARRAY = "[]"
WILDCARD = "*"

_SEGMENT_PATTERN = re.compile(r"\['(.+?)'\]|\[\]|[^.\[\]]+")


class FieldDoesNotExistError(LookupError):
    """Raised when a path matches nothing in a payload."""

    def __init__(self, path: str) -> None:
        super().__init__(f"The payload does not contain a field with the path '{path}'")
        self.path = path


@dataclass(frozen=True)
class JsonFieldPath:
    """A compiled JSON field path.

    Attributes:
        path: The path as written in the descriptor.
        segments: Keys, ``[]`` and ``*`` markers in traversal order.
        precise: Whether the path can match at most one location.
    """

    path: str
    segments: tuple[str, ...]
    precise: bool

    @classmethod
    def compile(cls, path: str) -> "JsonFieldPath":
        segments = []
        for match in _SEGMENT_PATTERN.finditer(path):
            segments.append(match.group(1) if match.group(1) is not None else match.group(0))
        # A trailing [] names the array itself, so only earlier markers fan out.
        fan_out = [s for s in segments[:-1] if s == ARRAY]
        precise = not fan_out and WILDCARD not in segments
        return cls(path=path, segments=tuple(segments), precise=precise)

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class _Match:
    """A matched location: the containers walked through and the value found."""

    chain: tuple[tuple[Any, Any], ...]
    value: Any


def _walk(node: Any, segments: tuple[str, ...], chain: tuple) -> Iterator[_Match]:
    if not segments:
        yield _Match(chain, node)
        return

    segment, rest = segments[0], segments[1:]
    if segment == ARRAY:
        if not isinstance(node, list):
            return
        if not rest:
            yield _Match(chain, node)
            return
        for index, item in enumerate(node):
            yield from _walk(item, rest, chain + ((node, index),))
    elif segment == WILDCARD:
        if isinstance(node, dict):
            for key, value in node.items():
                yield from _walk(value, rest, chain + ((node, key),))
    elif isinstance(node, dict) and segment in node:
        yield from _walk(node[segment], rest, chain + ((node, segment),))


class JsonFieldProcessor:
    """Queries and removes fields from a decoded JSON payload."""

    def matches(self, path: JsonFieldPath, payload: Any) -> list[_Match]:
        return list(_walk(payload, path.segments, ()))

    def has_field(self, path: JsonFieldPath, payload: Any) -> bool:
        return next(_walk(payload, path.segments, ()), None) is not None

    def extract(self, path: JsonFieldPath, payload: Any) -> Any:
        """Extract the value(s) at a path.

        Returns:
            The single value for a precise path, otherwise the list of every
            matched value.

        Raises:
            FieldDoesNotExistError: If the path matches nothing.
        """
        found = self.matches(path, payload)
        if not found:
            raise FieldDoesNotExistError(path.path)
        if path.precise:
            return found[0].value
        return [match.value for match in found]

    def remove(self, path: JsonFieldPath, payload: Any) -> bool:
        """Remove every location matched by a path.

        Args:
            path: The path to remove.
            payload: The payload, modified in place.

        Returns:
            True if the path matched the payload root, which cannot be
            removed in place and should be treated as fully documented.
        """
        root_matched = False
        arrays: dict[int, tuple[list, set[int]]] = {}
        for match in self.matches(path, payload):
            if not match.chain:
                root_matched = True
                continue
            container, key = match.chain[-1]
            if isinstance(container, dict):
                container.pop(key, None)
            else:
                arrays.setdefault(id(container), (container, set()))[1].add(key)

        # Indexes shift on deletion, so each array is emptied from the back.
        for container, indexes in arrays.values():
            for index in sorted(indexes, reverse=True):
                del container[index]
        return root_matched


class JsonFieldTypeResolver:
    """Resolves the type of the value(s) at a path."""

    def __init__(self, processor: JsonFieldProcessor | None = None) -> None:
        self._processor = processor or JsonFieldProcessor()

    def resolve(self, path: JsonFieldPath, payload: Any) -> JsonFieldType:
        try:
            field = self._processor.extract(path, payload)
        except FieldDoesNotExistError:
            return JsonFieldType.VARIES
        if path.precise:
            return self.type_of(field)
        return self.common_type(field)

    def common_type(self, values: list[Any]) -> JsonFieldType:
        common: JsonFieldType | None = None
        for value in values:
            value_type = self.type_of(value)
            if common is None:
                common = value_type
            elif common != value_type:
                return JsonFieldType.VARIES
        return common or JsonFieldType.VARIES

    @staticmethod
    def type_of(value: Any) -> JsonFieldType:
        if value is None:
            return JsonFieldType.NULL
        if isinstance(value, bool):
            return JsonFieldType.BOOLEAN
        if isinstance(value, (int, float)):
            return JsonFieldType.NUMBER
        if isinstance(value, str):
            return JsonFieldType.STRING
        if isinstance(value, dict):
            return JsonFieldType.OBJECT
        if isinstance(value, list):
            return JsonFieldType.ARRAY
        return JsonFieldType.VARIES
