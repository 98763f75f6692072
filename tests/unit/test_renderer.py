"""Unit tests for snippet rendering and the component factory."""

import pytest
from pydantic import ValidationError

from payloaddocs.core.config import Settings
from payloaddocs.core.factory import ComponentFactory
from payloaddocs.interfaces.renderer import SnippetRenderingError
from payloaddocs.strategies.payload_handlers import JsonPayloadHandler, XmlPayloadHandler
from payloaddocs.strategies.renderers import JinjaSnippetRenderer

MODEL = {
    "fields": [
        {"path": "id", "type": "number", "description": "Identifier", "optional": False},
        {"path": "nickname", "type": "string", "description": "Nickname", "optional": True},
    ]
}


class TestJinjaSnippetRenderer:
    """Test suite for JinjaSnippetRenderer."""

    def test_unknown_format_is_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            JinjaSnippetRenderer(tmp_path, template_format="html")

    def test_renders_asciidoctor_table(self, tmp_path):
        """Test the bundled Asciidoctor template."""
        renderer = JinjaSnippetRenderer(tmp_path)

        path = renderer.render("get-user", "response-fields", MODEL)

        assert path == tmp_path / "get-user" / "response-fields.adoc"
        content = path.read_text(encoding="utf-8")
        assert content.startswith("|===")
        assert "|`id`" in content
        assert "|`number`" in content
        assert "|Nickname (optional)" in content

    def test_renders_markdown_table(self, tmp_path):
        """Test the bundled Markdown template."""
        renderer = JinjaSnippetRenderer(tmp_path, template_format="markdown")

        path = renderer.render("create-user", "request-fields", MODEL)

        assert path.suffix == ".md"
        content = path.read_text(encoding="utf-8")
        assert "`id` | `number` | Identifier" in content

    def test_custom_template_takes_precedence(self, tmp_path):
        """Test that templates in the template directory override the bundled ones."""
        template_dir = tmp_path / "templates"
        (template_dir / "asciidoctor").mkdir(parents=True)
        (template_dir / "asciidoctor" / "response-fields.snippet").write_text(
            "{% for field in fields %}{{ field.path }};{% endfor %}", encoding="utf-8"
        )
        renderer = JinjaSnippetRenderer(tmp_path / "out", template_dir=template_dir)

        path = renderer.render("get-user", "response-fields", MODEL)

        assert path.read_text(encoding="utf-8") == "id;nickname;"

    def test_missing_template_raises(self, tmp_path):
        renderer = JinjaSnippetRenderer(tmp_path)

        with pytest.raises(SnippetRenderingError):
            renderer.render("get-user", "links", MODEL)


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    @pytest.fixture
    def settings(self, tmp_path):
        return Settings(output_dir=tmp_path, template_format="markdown")

    def test_renderer_uses_settings(self, settings):
        renderer = ComponentFactory(settings).get_renderer()

        assert renderer.file_extension == ".md"

    def test_renderer_is_cached(self, settings):
        factory = ComponentFactory(settings)

        assert factory.get_renderer() is factory.get_renderer()

    def test_renderer_format_override(self, settings):
        renderer = ComponentFactory(settings).get_renderer("asciidoctor")

        assert renderer.file_extension == ".adoc"

    def test_default_content_type_applies(self, settings):
        """Test that payloads without a content type use the configured default."""
        xml_settings = settings.model_copy(update={"default_content_type": "application/xml"})
        factory = ComponentFactory(xml_settings)

        assert isinstance(factory.get_payload_handler(None, "<a/>"), XmlPayloadHandler)
        assert isinstance(factory.get_payload_handler("application/json", "{}"), JsonPayloadHandler)


class TestSettings:
    """Test suite for Settings validation."""

    def test_invalid_template_format(self, tmp_path):
        with pytest.raises(ValidationError):
            Settings(output_dir=tmp_path, template_format="html")

    def test_log_level_is_normalized(self, tmp_path):
        assert Settings(output_dir=tmp_path, log_level="debug").log_level == "DEBUG"
