"""Rendering model assembly."""

from typing import Any

from payloaddocs.interfaces.field_descriptor import FieldDescriptor


def assemble_model(descriptors: list[FieldDescriptor]) -> dict[str, Any]:
    """Build the template model for resolved descriptors.

    Args:
        descriptors: Descriptors with their types resolved, in declaration order.

    Returns:
        A mapping whose ``fields`` entry holds one row per descriptor.
    """
    return {"fields": [descriptor.to_model() for descriptor in descriptors]}
