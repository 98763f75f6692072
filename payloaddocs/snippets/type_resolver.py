"""Type resolution for descriptors declared without a type."""

from payloaddocs.interfaces.field_descriptor import FieldDescriptor
from payloaddocs.interfaces.payload_handler import BasePayloadHandler


class TypeResolver:
    """Fills in missing descriptor types from the payload.

    Explicit types are kept; every other descriptor gets the type the
    payload handler infers for its path. Only run after validation passed.
    """

    def __init__(self, payload_handler: BasePayloadHandler) -> None:
        self._payload_handler = payload_handler

    def resolve(self, descriptors: list[FieldDescriptor]) -> list[FieldDescriptor]:
        return [
            descriptor
            if descriptor.type is not None
            else descriptor.with_type(self._payload_handler.determine_field_type(descriptor.path))
            for descriptor in descriptors
        ]
