"""Jinja2 snippet renderer.

Renders snippet models with Jinja2 templates and writes them below the output
directory as ``<operation>/<snippet>.<ext>``. Templates are looked up in the
user's template directory first, then in the templates bundled with the
package, per template format.
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, TemplateNotFound

from payloaddocs.interfaces.renderer import BaseSnippetRenderer, SnippetRenderingError

logger = logging.getLogger(__name__)

TEMPLATE_FORMATS = {
    "asciidoctor": ".adoc",
    "markdown": ".md",
}


class JinjaSnippetRenderer(BaseSnippetRenderer):
    """Writes snippets rendered from Jinja2 templates."""

    def __init__(
        self,
        output_dir: Path | str,
        template_format: str = "asciidoctor",
        template_dir: Path | str | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            output_dir: Root directory snippets are written to.
            template_format: ``"asciidoctor"`` or ``"markdown"``.
            template_dir: Optional directory with template overrides. It is
                searched for ``<format>/<snippet>.snippet`` before the
                bundled templates.

        Raises:
            ValueError: If the template format is unknown.
        """
        if template_format not in TEMPLATE_FORMATS:
            raise ValueError(
                f"Unknown template format: {template_format}. "
                f"Valid options: {', '.join(sorted(TEMPLATE_FORMATS))}"
            )

        self._output_dir = Path(output_dir)
        self._template_format = template_format

        loaders = []
        if template_dir is not None:
            loaders.append(FileSystemLoader(str(template_dir)))
        loaders.append(PackageLoader("payloaddocs", "templates"))

        self._environment = Environment(
            loader=ChoiceLoader(loaders),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        logger.info(
            f"JinjaSnippetRenderer initialized: format={template_format}, "
            f"output_dir={self._output_dir}"
        )

    def render(self, operation_name: str, snippet_name: str, model: dict[str, Any]) -> Path:
        """Render a snippet model and write it out."""
        template_name = f"{self._template_format}/{snippet_name}.snippet"

        try:
            template = self._environment.get_template(template_name)
        except TemplateNotFound as e:
            logger.error(f"No template for snippet '{snippet_name}': {template_name}")
            raise SnippetRenderingError(f"Template not found: {template_name}") from e

        try:
            content = template.render(**model)
        except Exception as e:
            logger.error(f"Rendering '{template_name}' failed: {e}", exc_info=True)
            raise SnippetRenderingError(f"Rendering failed: {e}") from e

        output_path = self._output_dir / operation_name / f"{snippet_name}{self.file_extension}"
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")

        logger.info(f"Snippet written: {output_path}")
        return output_path

    @property
    def file_extension(self) -> str:
        """Return the extension of the files this renderer writes."""
        return TEMPLATE_FORMATS[self._template_format]
