"""Fields snippets: validation, type resolution and model assembly."""

from payloaddocs.snippets.assembler import assemble_model
from payloaddocs.snippets.fields import (
    FieldsSnippet,
    PayloadSide,
    SnippetResult,
    request_fields,
    response_fields,
)
from payloaddocs.snippets.type_resolver import TypeResolver
from payloaddocs.snippets.validator import FieldValidator, build_validation_message

__all__ = [
    "FieldValidator",
    "FieldsSnippet",
    "PayloadSide",
    "SnippetResult",
    "TypeResolver",
    "assemble_model",
    "build_validation_message",
    "request_fields",
    "response_fields",
]
