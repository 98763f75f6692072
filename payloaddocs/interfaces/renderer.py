"""Snippet rendering interfaces.

Defines the abstract base class for turning a snippet model into a file
through a template engine, plus the error hierarchy shared by snippets.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class BaseSnippetRenderer(ABC):
    """Abstract base class for snippet rendering strategies."""

    @abstractmethod
    def render(self, operation_name: str, snippet_name: str, model: dict[str, Any]) -> Path:
        """Render a snippet model and write it out.

        Args:
            operation_name: Name of the documented operation, used as the
                directory the snippet is written to.
            snippet_name: Name of the snippet, e.g. ``"response-fields"``.
            model: The model produced by the snippet.

        Returns:
            Path of the written snippet file.

        Raises:
            SnippetRenderingError: If no template exists or rendering fails.
        """

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the extension of the files this renderer writes."""


class SnippetError(Exception):
    """Base exception for snippet failures."""

    pass


class PayloadValidationError(SnippetError):
    """Raised when a payload and its field descriptors do not agree.

    The message lists the undocumented parts of the payload and the
    descriptors that matched nothing, so both can be fixed at once.
    """

    pass


class SnippetRenderingError(SnippetError):
    """Raised when a snippet model cannot be rendered."""

    pass
