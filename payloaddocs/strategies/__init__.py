"""Concrete strategy implementations."""

from payloaddocs.strategies.payload_handlers import (
    JsonPayloadHandler,
    XmlPayloadHandler,
    select_payload_handler,
)
from payloaddocs.strategies.renderers import (
    JinjaSnippetRenderer,
)

__all__ = [
    "JsonPayloadHandler",
    "XmlPayloadHandler",
    "select_payload_handler",
    "JinjaSnippetRenderer",
]
