"""Document request and response payloads from captured HTTP exchanges."""

from payloaddocs.interfaces import (
    FieldDescriptor,
    HttpExchange,
    HttpMessage,
    InvalidDescriptorError,
    JsonFieldType,
    PayloadHandlingError,
    PayloadValidationError,
    SnippetError,
    SnippetRenderingError,
    field_with_path,
)
from payloaddocs.snippets import (
    FieldsSnippet,
    PayloadSide,
    SnippetResult,
    request_fields,
    response_fields,
)

__version__ = "0.1.0"

__all__ = [
    "FieldDescriptor",
    "FieldsSnippet",
    "HttpExchange",
    "HttpMessage",
    "InvalidDescriptorError",
    "JsonFieldType",
    "PayloadHandlingError",
    "PayloadSide",
    "PayloadValidationError",
    "SnippetError",
    "SnippetRenderingError",
    "SnippetResult",
    "field_with_path",
    "request_fields",
    "response_fields",
]
