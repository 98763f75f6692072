"""Core configuration and factory components."""

from payloaddocs.core.config import Settings, get_settings
from payloaddocs.core.factory import ComponentFactory, get_factory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
    "get_factory",
]
