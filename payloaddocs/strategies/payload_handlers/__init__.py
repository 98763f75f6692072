"""Concrete payload handler implementations."""

from payloaddocs.strategies.payload_handlers.json_handler import JsonPayloadHandler
from payloaddocs.strategies.payload_handlers.selection import (
    is_xml_media_type,
    select_payload_handler,
)
from payloaddocs.strategies.payload_handlers.xml_handler import XmlPayloadHandler

__all__ = [
    "JsonPayloadHandler",
    "XmlPayloadHandler",
    "is_xml_media_type",
    "select_payload_handler",
]
