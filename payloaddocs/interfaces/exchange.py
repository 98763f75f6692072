"""Captured HTTP exchange.

The exchange is captured elsewhere (by a test client or a proxy) and handed
in fully read. Only the parts the fields snippets need are modelled.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HttpMessage:
    """One side of an HTTP exchange.

    Attributes:
        body: The body, as text or as raw bytes (decoded as UTF-8).
        content_type: The Content-Type header value, if any.
        headers: Any other headers that were captured.
    """

    body: str | bytes = ""
    content_type: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """Return the body as text."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True)
class HttpExchange:
    """A request together with the response it produced."""

    request: HttpMessage = field(default_factory=HttpMessage)
    response: HttpMessage = field(default_factory=HttpMessage)
