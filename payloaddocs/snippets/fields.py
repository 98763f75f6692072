"""Request and response fields snippets.

A fields snippet documents the body of one side of an HTTP exchange:

    select handler -> validate -> resolve types -> assemble model

Validation is the only step that can fail. ``document`` returns the outcome
as a ``SnippetResult`` so callers decide how to handle a mismatch; ``write``
renders the model and raises on failure.
"""

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from payloaddocs.interfaces.exchange import HttpExchange, HttpMessage
from payloaddocs.interfaces.field_descriptor import FieldDescriptor
from payloaddocs.interfaces.payload_handler import BasePayloadHandler, PayloadHandlingError
from payloaddocs.interfaces.renderer import BaseSnippetRenderer, PayloadValidationError
from payloaddocs.snippets.assembler import assemble_model
from payloaddocs.snippets.type_resolver import TypeResolver
from payloaddocs.snippets.validator import FieldValidator
from payloaddocs.strategies.payload_handlers import select_payload_handler

logger = logging.getLogger(__name__)

HandlerSelector = Callable[[str | None, str], BasePayloadHandler]


class PayloadSide(str, enum.Enum):
    """Which side of the exchange a snippet documents."""

    REQUEST = "request"
    RESPONSE = "response"


@dataclass(frozen=True)
class SnippetResult:
    """Outcome of documenting a payload.

    Exactly one of ``model`` and ``error`` is set.
    """

    model: dict[str, Any] | None = None
    error: PayloadValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> dict[str, Any]:
        """Return the model, or raise the validation error."""
        if self.error is not None:
            raise self.error
        return self.model


class FieldsSnippet:
    """Documents the fields of a request or response payload.

    Example:
        ```python
        snippet = response_fields([
            field_with_path("id", "Identifier of the note"),
            field_with_path("title", "Title of the note"),
        ])
        result = snippet.document(exchange)
        if result.ok:
            print(result.model["fields"])
        ```
    """

    def __init__(
        self,
        side: PayloadSide,
        descriptors: list[FieldDescriptor],
        attributes: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the snippet.

        Args:
            side: The side of the exchange to document.
            descriptors: The fields to document, in the order they are rendered.
            attributes: Extra values merged into the top level of the model.

        Raises:
            TypeError: If an entry of ``descriptors`` is not a FieldDescriptor.
        """
        for descriptor in descriptors:
            if not isinstance(descriptor, FieldDescriptor):
                raise TypeError(f"Expected a FieldDescriptor, got {type(descriptor).__name__}")
        self._side = PayloadSide(side)
        self._descriptors = list(descriptors)
        self._attributes = dict(attributes or {})

    @property
    def side(self) -> PayloadSide:
        return self._side

    @property
    def snippet_name(self) -> str:
        return f"{self._side.value}-fields"

    @property
    def descriptors(self) -> list[FieldDescriptor]:
        return list(self._descriptors)

    def _message(self, exchange: HttpExchange) -> HttpMessage:
        if self._side is PayloadSide.REQUEST:
            return exchange.request
        return exchange.response

    def document(
        self,
        exchange: HttpExchange,
        select_handler: HandlerSelector = select_payload_handler,
    ) -> SnippetResult:
        """Validate the payload and build the snippet model.

        Args:
            exchange: The captured exchange.
            select_handler: Creates the payload handler from the content type
                and body.

        Returns:
            A SnippetResult holding either the model or the validation error.

        Raises:
            PayloadHandlingError: If the payload cannot be decoded or parsed.
        """
        message = self._message(exchange)
        try:
            payload = message.text
        except UnicodeDecodeError as e:
            logger.error(f"Failed to decode {self._side.value} payload: {e}")
            raise PayloadHandlingError(f"Cannot decode {self._side.value} payload as UTF-8: {e}") from e
        payload_handler = select_handler(message.content_type, payload)

        try:
            FieldValidator(payload_handler).validate(self._descriptors)
        except PayloadValidationError as e:
            return SnippetResult(error=e)

        resolved = TypeResolver(payload_handler).resolve(self._descriptors)
        model = assemble_model(resolved)
        model.update(self._attributes)
        logger.debug(f"Documented {len(resolved)} {self._side.value} fields")
        return SnippetResult(model=model)

    def write(
        self,
        exchange: HttpExchange,
        operation_name: str,
        renderer: BaseSnippetRenderer,
    ) -> Path:
        """Document the exchange and render the snippet.

        Args:
            exchange: The captured exchange.
            operation_name: Name of the documented operation.
            renderer: The renderer that writes the snippet.

        Returns:
            Path of the written snippet.

        Raises:
            PayloadValidationError: If the payload and descriptors disagree.
            SnippetRenderingError: If rendering fails.
        """
        model = self.document(exchange).unwrap()
        return renderer.render(operation_name, self.snippet_name, model)


def request_fields(
    descriptors: list[FieldDescriptor], attributes: dict[str, Any] | None = None
) -> FieldsSnippet:
    """Create a snippet documenting the fields of the request payload."""
    return FieldsSnippet(PayloadSide.REQUEST, descriptors, attributes)


def response_fields(
    descriptors: list[FieldDescriptor], attributes: dict[str, Any] | None = None
) -> FieldsSnippet:
    """Create a snippet documenting the fields of the response payload."""
    return FieldsSnippet(PayloadSide.RESPONSE, descriptors, attributes)
