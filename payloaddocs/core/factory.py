"""Component factory for strategy instantiation.

Builds the renderer and payload handlers from settings so callers never
construct concrete strategies directly.
"""

import logging

from payloaddocs.core.config import Settings, get_settings
from payloaddocs.interfaces.payload_handler import BasePayloadHandler
from payloaddocs.interfaces.renderer import BaseSnippetRenderer
from payloaddocs.strategies.payload_handlers import select_payload_handler
from payloaddocs.strategies.renderers import JinjaSnippetRenderer

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        handler = factory.get_payload_handler("application/xml", body)
        renderer = factory.get_renderer()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._renderer_cache: BaseSnippetRenderer | None = None

    def get_payload_handler(self, content_type: str | None, payload: str) -> BasePayloadHandler:
        """Get a handler bound to a payload.

        Handlers hold their payload, so a new one is created on every call.

        Args:
            content_type: The payload's content type. If None, uses the
                configured default content type.
            payload: The body as text.

        Returns:
            A BasePayloadHandler implementation instance.

        Raises:
            PayloadHandlingError: If the payload cannot be parsed.
        """
        return select_payload_handler(content_type or self._settings.default_content_type, payload)

    def get_renderer(self, template_format: str | None = None) -> BaseSnippetRenderer:
        """Get a snippet renderer.

        Args:
            template_format: The template format to render with. If None,
                uses settings.

        Returns:
            A BaseSnippetRenderer implementation instance.

        Raises:
            ValueError: If the template format is unknown.
        """
        if self._renderer_cache is None or template_format is not None:
            template_format = template_format or self._settings.template_format

            logger.info(f"Instantiating renderer: {template_format}")

            self._renderer_cache = JinjaSnippetRenderer(
                output_dir=self._settings.output_dir,
                template_format=template_format,
                template_dir=self._settings.template_dir,
            )

        return self._renderer_cache

    def clear_cache(self) -> None:
        """Clear cached component instances."""
        self._renderer_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory
