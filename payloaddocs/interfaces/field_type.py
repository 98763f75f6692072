"""Type tags reported for documented fields."""

import enum


class JsonFieldType(str, enum.Enum):
    """Type of a field in a payload.

    The value is what ends up in the rendered snippet. ``VARIES`` is used when
    a wildcard path matches values of different types, or matches nothing.
    """

    ARRAY = "array"
    BOOLEAN = "boolean"
    OBJECT = "object"
    NUMBER = "number"
    NULL = "null"
    STRING = "string"
    VARIES = "varies"

    def __str__(self) -> str:
        return self.value
