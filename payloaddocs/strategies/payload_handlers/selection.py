"""Payload handler selection by content type."""

import logging

from payloaddocs.interfaces.payload_handler import BasePayloadHandler
from payloaddocs.strategies.payload_handlers.json_handler import JsonPayloadHandler
from payloaddocs.strategies.payload_handlers.xml_handler import XmlPayloadHandler

logger = logging.getLogger(__name__)

_XML_MEDIA_TYPES = {"application/xml", "text/xml"}


def is_xml_media_type(content_type: str | None) -> bool:
    """Check whether a Content-Type value is compatible with XML.

    Parameters such as ``charset`` are ignored. ``application/xml``,
    ``text/xml`` and any type with a ``+xml`` suffix are XML. Wildcard types
    that include one of those, such as ``*/*`` or ``application/*``, are
    compatible with XML and select it too.
    """
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type in _XML_MEDIA_TYPES or media_type.endswith("+xml"):
        return True
    main_type, _, subtype = media_type.partition("/")
    if main_type == "*":
        return True
    return subtype == "*" and any(xml.startswith(f"{main_type}/") for xml in _XML_MEDIA_TYPES)


def select_payload_handler(content_type: str | None, payload: str) -> BasePayloadHandler:
    """Create the handler for a payload.

    Args:
        content_type: The Content-Type of the payload, if known.
        payload: The body as text.

    Returns:
        An ``XmlPayloadHandler`` for XML content types, otherwise a
        ``JsonPayloadHandler``.

    Raises:
        PayloadHandlingError: If the payload cannot be parsed.
    """
    if is_xml_media_type(content_type):
        logger.debug(f"Selected XML payload handler for {content_type}")
        return XmlPayloadHandler(payload)
    logger.debug(f"Selected JSON payload handler for {content_type or 'unspecified content type'}")
    return JsonPayloadHandler(payload)
