"""FastAPI routers."""

from payloaddocs.api.fields import router as fields_router

__all__ = [
    "fields_router",
]
