"""Field documentation API routes.

Documents a posted request or response payload against posted field
descriptors, optionally rendering the snippet to the output directory.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from payloaddocs.api.schemas import (
    ErrorResponse,
    FieldsDocumentationRequest,
    FieldsDocumentationResponse,
)
from payloaddocs.core.factory import ComponentFactory, get_factory
from payloaddocs.interfaces.exchange import HttpExchange, HttpMessage
from payloaddocs.interfaces.field_descriptor import InvalidDescriptorError
from payloaddocs.interfaces.payload_handler import PayloadHandlingError
from payloaddocs.interfaces.renderer import SnippetRenderingError
from payloaddocs.snippets.fields import FieldsSnippet, PayloadSide

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fields", tags=["fields"])


@router.post(
    "/{side}",
    response_model=FieldsDocumentationResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
    },
)
async def document_fields(
    side: PayloadSide,
    body: FieldsDocumentationRequest,
    factory: ComponentFactory = Depends(get_factory),
):
    """Document the fields of a request or response payload.

    Args:
        side: Which side of the exchange the payload belongs to.
        body: The payload, its content type and the field descriptors.
        factory: Component factory providing handlers and the renderer.

    Returns:
        FieldsDocumentationResponse with the snippet model, or a 422
        ErrorResponse listing undocumented and missing fields.

    Raises:
        HTTPException: If a descriptor or the payload is invalid, or
            rendering fails.
    """
    logger.info(f"Documenting {side.value} fields: {len(body.descriptors)} descriptors")

    try:
        descriptors = [descriptor.to_descriptor() for descriptor in body.descriptors]
    except InvalidDescriptorError as e:
        logger.warning(f"Invalid field descriptor: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    message = HttpMessage(body=body.payload, content_type=body.content_type)
    exchange = (
        HttpExchange(request=message)
        if side is PayloadSide.REQUEST
        else HttpExchange(response=message)
    )
    snippet = FieldsSnippet(side, descriptors, body.attributes)

    try:
        result = snippet.document(exchange, factory.get_payload_handler)
    except PayloadHandlingError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    if not result.ok:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorResponse(
                detail=str(result.error),
                error_code="PAYLOAD_VALIDATION_FAILED",
            ).model_dump(),
        )

    snippet_path = None
    if body.operation_name:
        try:
            snippet_path = factory.get_renderer().render(
                body.operation_name, snippet.snippet_name, result.model
            )
        except SnippetRenderingError as e:
            logger.error(f"Snippet rendering failed: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

    return FieldsDocumentationResponse(
        snippet_name=snippet.snippet_name,
        model=result.model,
        snippet_path=str(snippet_path) if snippet_path else None,
    )
