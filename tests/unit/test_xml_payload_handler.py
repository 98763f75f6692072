"""Unit tests for the XML payload handler."""

import pytest

from payloaddocs.interfaces.field_descriptor import field_with_path
from payloaddocs.interfaces.payload_handler import PayloadHandlingError
from payloaddocs.strategies.payload_handlers.xml_handler import XmlFieldPath, XmlPayloadHandler

ORDER = """<order id="7">
    <customer>Ada</customer>
    <items>
        <item sku="a1">Book</item>
        <item sku="b2">Pen</item>
    </items>
</order>"""

NOTES_NS = "http://example.com/notes"

NOTE = f"""<note xmlns="{NOTES_NS}">
    <title>Groceries</title>
    <body>Milk</body>
</note>"""


def fields(*paths):
    return [field_with_path(path, f"The {path} node") for path in paths]


class TestXmlFieldPath:
    """Test suite for XmlFieldPath compilation."""

    def test_element_path(self):
        """Test that slashes separate element names."""
        path = XmlFieldPath.compile("/order/items/item")

        assert path.elements == ("order", "items", "item")
        assert path.attribute is None

    def test_attribute_path(self):
        """Test that a final @ segment selects an attribute."""
        path = XmlFieldPath.compile("/order/@id")

        assert path.elements == ("order",)
        assert path.attribute == "id"

    def test_namespaced_path(self):
        """Test that slashes inside a namespace do not split segments."""
        path = XmlFieldPath.compile("/{http://example.com/notes}note/title/@{urn:meta}lang")

        assert path.elements == ("{http://example.com/notes}note", "title")
        assert path.attribute == "{urn:meta}lang"


class TestXmlPayloadHandler:
    """Test suite for XmlPayloadHandler."""

    @pytest.fixture
    def handler(self):
        return XmlPayloadHandler(ORDER)

    # =========================================================================
    # Parsing Tests
    # =========================================================================

    def test_malformed_xml_raises(self):
        """Test that malformed XML is reported."""
        with pytest.raises(PayloadHandlingError):
            XmlPayloadHandler("<a><b></a>")

    # =========================================================================
    # Missing Field Tests
    # =========================================================================

    def test_present_fields(self, handler):
        """Test that elements and attributes are found."""
        descriptors = fields("/order/@id", "/order/customer", "/order/items/item/@sku")

        assert handler.find_missing_fields(descriptors) == []

    def test_missing_element_and_attribute(self, handler):
        """Test that absent nodes are reported in declaration order."""
        missing = handler.find_missing_fields(fields("/order/total", "/order/@status"))

        assert [descriptor.path for descriptor in missing] == ["/order/total", "/order/@status"]

    def test_wrong_root_is_missing(self, handler):
        """Test that paths are anchored at the root element."""
        assert len(handler.find_missing_fields(fields("/invoice/customer"))) == 1

    # =========================================================================
    # Undocumented Payload Tests
    # =========================================================================

    def test_fully_documented(self, handler):
        """Test that documenting every node covers the document."""
        descriptors = fields("/order/@id", "/order/customer", "/order/items")

        assert handler.get_undocumented_payload(descriptors) == ""

    def test_documenting_root_covers_everything(self, handler):
        """Test that documenting the root element covers the document."""
        assert handler.get_undocumented_payload(fields("/order")) == ""

    def test_undocumented_element(self):
        """Test that an undeclared element shows up in the dump."""
        handler = XmlPayloadHandler("<a><b>x</b><c/></a>")

        undocumented = handler.get_undocumented_payload(fields("/a/b"))

        assert "<c />" in undocumented
        assert "<b>" not in undocumented

    def test_undocumented_attribute(self, handler):
        """Test that an undeclared attribute keeps its element in the dump."""
        descriptors = fields("/order/customer", "/order/items")

        undocumented = handler.get_undocumented_payload(descriptors)

        assert 'id="7"' in undocumented

    def test_attribute_only_elements_are_covered(self):
        """Test that documenting the only attribute covers its element."""
        handler = XmlPayloadHandler('<a><b id="1"/></a>')

        assert handler.get_undocumented_payload(fields("/a/b/@id")) == ""

    # =========================================================================
    # Type Inference Tests
    # =========================================================================

    def test_text_element_is_string(self, handler):
        assert handler.determine_field_type("/order/customer") == "string"

    def test_element_with_children_is_object(self, handler):
        assert handler.determine_field_type("/order/items") == "object"

    def test_attribute_is_string(self, handler):
        assert handler.determine_field_type("/order/items/item/@sku") == "string"

    def test_mixed_matches_vary(self):
        """Test that matches of different shapes yield varies."""
        handler = XmlPayloadHandler("<a><b>x</b><b><c/></b></a>")

        assert handler.determine_field_type("/a/b") == "varies"

    def test_absent_node_varies(self, handler):
        assert handler.determine_field_type("/order/total") == "varies"

    # =========================================================================
    # Namespace Tests
    # =========================================================================

    def test_namespaced_document(self):
        """Test that namespaced elements match by full or local name."""
        handler = XmlPayloadHandler(NOTE)
        descriptors = fields(f"/{{{NOTES_NS}}}note/{{{NOTES_NS}}}title", "/note/body")

        assert handler.find_missing_fields(descriptors) == []
        assert handler.get_undocumented_payload(descriptors) == ""
        assert handler.determine_field_type("/note/title") == "string"

    def test_other_namespace_is_missing(self):
        """Test that a qualified segment only matches its own namespace."""
        handler = XmlPayloadHandler(NOTE)

        assert len(handler.find_missing_fields(fields("/{urn:other}note"))) == 1
