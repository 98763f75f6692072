"""Abstract base class for payload handlers.

A payload handler answers the structural questions the field validator asks
of one parsed request or response body. Concrete handlers exist per payload
shape (JSON tree, XML element tree) and are chosen by content type.
"""

from abc import ABC, abstractmethod

from payloaddocs.interfaces.field_descriptor import FieldDescriptor


class BasePayloadHandler(ABC):
    """Abstract base class for payload handling strategies.

    A handler is bound to a single payload at construction time and must not
    mutate it while answering queries.

    Example:
        ```python
        class JsonPayloadHandler(BasePayloadHandler):
            def find_missing_fields(self, descriptors):
                ...
        ```
    """

    @abstractmethod
    def find_missing_fields(self, descriptors: list[FieldDescriptor]) -> list[FieldDescriptor]:
        """Find the descriptors whose path matches nothing in the payload.

        Optional descriptors are never reported. A wildcard path is missing
        only when it matches zero locations across the whole payload.

        Args:
            descriptors: The descriptors to check, in declaration order.

        Returns:
            The missing descriptors, in declaration order.
        """

    @abstractmethod
    def get_undocumented_payload(self, descriptors: list[FieldDescriptor]) -> str:
        """Describe the parts of the payload no descriptor covers.

        Args:
            descriptors: All descriptors of the snippet.

        Returns:
            A pretty-printed rendition of the uncovered payload, or an empty
            string when the payload is fully documented.
        """

    @abstractmethod
    def determine_field_type(self, path: str) -> str:
        """Infer the type of the value(s) found at a path.

        Args:
            path: The descriptor path to inspect.

        Returns:
            A type tag. Differing types across wildcard matches, and paths
            that match nothing, yield ``"varies"``.
        """

    @property
    @abstractmethod
    def media_types(self) -> set[str]:
        """Return the media types this handler is normally selected for."""


class PayloadHandlingError(Exception):
    """Exception raised when a payload cannot be parsed by its handler."""

    pass
