"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from payloaddocs.interfaces.field_descriptor import FieldDescriptor


# =============================================================================
# Field Documentation Schemas
# =============================================================================


class FieldDescriptorSchema(BaseModel):
    """A field descriptor as posted by clients."""

    path: str = Field(description="Path of the field in the payload")
    description: str = Field(description="Human readable description of the field")
    type: str | None = Field(default=None, description="Explicit type; inferred when omitted")
    optional: bool = Field(default=False, description="Whether the field may be absent")
    attributes: dict[str, Any] = Field(
        default_factory=dict, description="Extra values copied into the rendered row"
    )

    def to_descriptor(self) -> FieldDescriptor:
        """Convert to a FieldDescriptor, enforcing its construction rules."""
        return FieldDescriptor(
            path=self.path,
            description=self.description,
            type=self.type,
            optional=self.optional,
            attributes=dict(self.attributes),
        )


class FieldsDocumentationRequest(BaseModel):
    """Request to document the fields of one payload."""

    payload: str = Field(default="", description="The payload body as text")
    content_type: str | None = Field(
        default=None, description="Content type of the payload; selects JSON or XML handling"
    )
    descriptors: list[FieldDescriptorSchema] = Field(description="Fields to document, in order")
    attributes: dict[str, Any] = Field(
        default_factory=dict, description="Extra values merged into the snippet model"
    )
    operation_name: str | None = Field(
        default=None,
        min_length=1,
        description="When set, the snippet is also rendered below this operation's directory",
    )


class FieldsDocumentationResponse(BaseModel):
    """Response carrying the snippet model."""

    snippet_name: str = Field(description="Name of the snippet, e.g. 'response-fields'")
    model: dict[str, Any] = Field(description="The model handed to the snippet template")
    snippet_path: str | None = Field(default=None, description="Path of the rendered snippet")


# =============================================================================
# Common Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
    extra: dict[str, Any] | None = Field(default=None, description="Additional error context")
