"""Abstract base classes and shared types for payload documentation."""

from payloaddocs.interfaces.exchange import HttpExchange, HttpMessage
from payloaddocs.interfaces.field_descriptor import (
    FieldDescriptor,
    InvalidDescriptorError,
    field_with_path,
)
from payloaddocs.interfaces.field_type import JsonFieldType
from payloaddocs.interfaces.payload_handler import BasePayloadHandler, PayloadHandlingError
from payloaddocs.interfaces.renderer import (
    BaseSnippetRenderer,
    PayloadValidationError,
    SnippetError,
    SnippetRenderingError,
)

__all__ = [
    "BasePayloadHandler",
    "BaseSnippetRenderer",
    "FieldDescriptor",
    "HttpExchange",
    "HttpMessage",
    "InvalidDescriptorError",
    "JsonFieldType",
    "PayloadHandlingError",
    "PayloadValidationError",
    "SnippetError",
    "SnippetRenderingError",
    "field_with_path",
]
