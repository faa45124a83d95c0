"""Core configuration and factory components."""

from template_binder.core.config import Settings, get_settings
from template_binder.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
