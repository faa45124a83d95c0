"""Concrete strategy implementations."""

from template_binder.strategies.binding_engine import BindingSuggester

__all__ = [
    "BindingSuggester",
]
