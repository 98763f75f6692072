"""Unit tests for field descriptors."""

import pytest

from payloaddocs.interfaces.field_descriptor import (
    FieldDescriptor,
    InvalidDescriptorError,
    field_with_path,
)
from payloaddocs.interfaces.field_type import JsonFieldType


class TestFieldDescriptor:
    """Test suite for FieldDescriptor."""

    # =========================================================================
    # Construction Tests
    # =========================================================================

    @pytest.mark.parametrize("path", ["", None])
    def test_missing_path_is_rejected(self, path):
        """Test that a descriptor needs a non-empty path."""
        with pytest.raises(InvalidDescriptorError):
            FieldDescriptor(path, "Some field")

    @pytest.mark.parametrize("description", ["", "   ", None])
    def test_blank_description_is_rejected(self, description):
        """Test that a descriptor needs a description with text."""
        with pytest.raises(InvalidDescriptorError):
            FieldDescriptor("a.b", description)

    def test_invalid_descriptor_is_a_value_error(self):
        """Test that construction errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            field_with_path("", "Nothing")

    def test_type_enum_is_stored_as_value(self):
        """Test that an enum type is normalized to its tag."""
        descriptor = field_with_path("id", "Identifier", JsonFieldType.NUMBER)

        assert descriptor.type == "number"

    # =========================================================================
    # Type Resolution Tests
    # =========================================================================

    def test_with_type_sets_missing_type(self):
        """Test that an untyped descriptor receives the given type."""
        descriptor = FieldDescriptor("id", "Identifier")

        resolved = descriptor.with_type("number")

        assert resolved.type == "number"
        assert descriptor.type is None

    def test_with_type_is_noop_when_typed(self):
        """Test that an explicit type is never overwritten."""
        descriptor = FieldDescriptor("id", "Identifier", type="string")

        resolved = descriptor.with_type("number")

        assert resolved is descriptor
        assert resolved.type == "string"

    def test_with_type_twice_keeps_first(self):
        """Test that only the first resolution sticks."""
        descriptor = FieldDescriptor("id", "Identifier")

        resolved = descriptor.with_type(JsonFieldType.OBJECT).with_type(JsonFieldType.ARRAY)

        assert resolved.type == "object"

    # =========================================================================
    # Model Tests
    # =========================================================================

    def test_to_model_contains_canonical_keys(self):
        """Test the row rendered for a descriptor."""
        descriptor = FieldDescriptor("id", "Identifier", type="number")

        assert descriptor.to_model() == {
            "path": "id",
            "type": "number",
            "description": "Identifier",
            "optional": False,
        }

    def test_to_model_includes_attributes(self):
        """Test that descriptor attributes are copied into the row."""
        descriptor = field_with_path("id", "Identifier", optional=True, constraints="Must be positive")

        model = descriptor.to_model()

        assert model["optional"] is True
        assert model["constraints"] == "Must be positive"

    @pytest.mark.parametrize("key", ["path", "type", "description", "optional"])
    def test_reserved_attribute_is_rejected(self, key):
        """Test that attributes cannot replace the row keys."""
        with pytest.raises(InvalidDescriptorError, match=key):
            FieldDescriptor("id", "Identifier", type="number", attributes={key: "oops"})

    # =========================================================================
    # Immutability Tests
    # =========================================================================

    def test_attributes_are_copied(self):
        """Test that later changes to the caller's dict do not leak in."""
        attributes = {"constraints": "Must be positive"}
        descriptor = FieldDescriptor("id", "Identifier", attributes=attributes)

        attributes["constraints"] = "Changed"

        assert descriptor.to_model()["constraints"] == "Must be positive"

    def test_attributes_are_read_only(self):
        descriptor = field_with_path("id", "Identifier", constraints="Must be positive")

        with pytest.raises(TypeError):
            descriptor.attributes["constraints"] = "Changed"

    def test_descriptor_is_hashable(self):
        """Test that descriptors can be used in sets."""
        first = field_with_path("id", "Identifier", constraints="Must be positive")
        second = field_with_path("id", "Identifier", constraints="Must be positive")

        assert first == second
        assert len({first, second}) == 1

    def test_resolved_copy_keeps_attributes(self):
        descriptor = field_with_path("id", "Identifier", constraints="Must be positive")

        assert descriptor.with_type("number").attributes == {"constraints": "Must be positive"}
