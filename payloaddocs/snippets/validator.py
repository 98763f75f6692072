"""Field documentation validation.

Checks a descriptor list against a payload and reports every undocumented
part of the payload and every descriptor that matched nothing in one error.
"""

import logging

from payloaddocs.interfaces.field_descriptor import FieldDescriptor
from payloaddocs.interfaces.payload_handler import BasePayloadHandler
from payloaddocs.interfaces.renderer import PayloadValidationError

logger = logging.getLogger(__name__)


class FieldValidator:
    """Validates field descriptors against the payload a handler is bound to."""

    def __init__(self, payload_handler: BasePayloadHandler) -> None:
        self._payload_handler = payload_handler

    def validate(self, descriptors: list[FieldDescriptor]) -> None:
        """Validate that the descriptors and the payload agree.

        Both checks always run so that a single failure reports everything.

        Args:
            descriptors: The snippet's descriptors, in declaration order.

        Raises:
            PayloadValidationError: If part of the payload is undocumented or a
                non-optional descriptor matched nothing.
        """
        missing_fields = self._payload_handler.find_missing_fields(descriptors)
        undocumented_payload = self._payload_handler.get_undocumented_payload(descriptors)

        if missing_fields or undocumented_payload.strip():
            message = build_validation_message(missing_fields, undocumented_payload)
            logger.warning(
                f"Field documentation mismatch: {len(missing_fields)} missing, "
                f"undocumented content {'present' if undocumented_payload.strip() else 'absent'}"
            )
            raise PayloadValidationError(message)


def build_validation_message(
    missing_fields: list[FieldDescriptor], undocumented_payload: str
) -> str:
    """Build the message describing a documentation mismatch.

    The undocumented block comes first, then the missing paths on their own
    line, in declaration order.
    """
    message = ""
    if undocumented_payload.strip():
        message += f"The following parts of the payload were not documented:\n{undocumented_payload}"
    if missing_fields:
        if message:
            message += "\n"
        paths = ", ".join(descriptor.path for descriptor in missing_fields)
        message += f"Fields with the following paths were not found in the payload: [{paths}]"
    return message
