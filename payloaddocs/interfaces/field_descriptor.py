"""Field descriptors.

A field descriptor is the user's declaration of one location in a payload:
its path, what it means, and optionally its type. Descriptors are immutable;
resolving a type yields a new descriptor so one list can be reused by
several snippets at the same time.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

RESERVED_ATTRIBUTES = frozenset({"path", "type", "description", "optional"})


class InvalidDescriptorError(ValueError):
    """Raised when a field descriptor is created without a path or description."""

    pass


@dataclass(frozen=True)
class FieldDescriptor:
    """Describes one field of a request or response payload.

    Attributes:
        path: Location of the field. JSON paths are dot separated and may use
            ``[]`` (every array element) and ``*`` (any key); XML paths are
            slash separated from the root and may end in ``@attribute``.
        description: Human readable description of the field.
        type: Type tag of the field, ``None`` until resolved.
        optional: Whether the field may be absent from the payload.
        attributes: Extra values copied into the rendered row. Held as a
            read-only copy of the mapping passed in.

    Raises:
        InvalidDescriptorError: If ``path`` is empty, ``description`` is blank
            or ``attributes`` reuses one of the row keys.
    """

    path: str
    description: str
    type: str | None = None
    optional: bool = False
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path:
            raise InvalidDescriptorError("Field descriptor path must not be empty")
        if not isinstance(self.description, str) or not self.description.strip():
            raise InvalidDescriptorError(
                f"Field descriptor for '{self.path}' must have a description"
            )
        reserved = sorted(RESERVED_ATTRIBUTES.intersection(self.attributes))
        if reserved:
            raise InvalidDescriptorError(
                f"Field descriptor for '{self.path}' cannot set reserved attributes: "
                f"{', '.join(reserved)}"
            )
        if isinstance(self.type, enum.Enum):
            object.__setattr__(self, "type", self.type.value)
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def with_type(self, value: Any) -> "FieldDescriptor":
        """Return this descriptor with its type resolved.

        The type is set once: if the descriptor already has a type it is
        returned unchanged and ``value`` is ignored.

        Args:
            value: The type tag to assign.

        Returns:
            A descriptor carrying a type.
        """
        if self.type is not None:
            return self
        return replace(self, type=value)

    def to_model(self) -> dict[str, Any]:
        """Return the row rendered for this field."""
        model: dict[str, Any] = {
            "path": self.path,
            "type": self.type,
            "description": self.description,
            "optional": self.optional,
        }
        model.update(self.attributes)
        return model


def field_with_path(
    path: str,
    description: str,
    type: Any = None,
    optional: bool = False,
    **attributes: Any,
) -> FieldDescriptor:
    """Create a descriptor for the field at ``path``.

    Keyword arguments beyond the named ones become descriptor attributes.

    Example:
        ```python
        field_with_path("user.id", "Identifier of the user", JsonFieldType.NUMBER)
        field_with_path("user.nickname", "Optional nickname", optional=True)
        ```
    """
    return FieldDescriptor(
        path=path,
        description=description,
        type=type,
        optional=optional,
        attributes=attributes,
    )
