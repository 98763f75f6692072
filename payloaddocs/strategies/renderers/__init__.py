"""Concrete snippet renderer implementations."""

from payloaddocs.strategies.renderers.jinja import TEMPLATE_FORMATS, JinjaSnippetRenderer

__all__ = [
    "JinjaSnippetRenderer",
    "TEMPLATE_FORMATS",
]
