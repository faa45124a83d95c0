"""Abstract base classes for binding strategies."""

from template_binder.interfaces.binding import BaseBindingSuggester

__all__ = [
    "BaseBindingSuggester",
]
