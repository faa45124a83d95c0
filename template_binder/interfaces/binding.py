"""Binding suggestion interface.

Defines the abstract base class for strategies that propose
placeholder-token to data-field bindings for a resume template.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any


class BaseBindingSuggester(ABC):
    """Abstract base class for binding suggestion strategies.

    Example:
        ```python
        suggester = BindingSuggester()
        suggestions = suggester.suggest(tokens, schema, html)
        for token, ranked in suggestions.items():
            print(token, ranked[0].field_path)
        ```
    """

    @abstractmethod
    def suggest(
        self,
        tokens: Sequence[str],
        schema: Mapping[str, Any] | None,
        html: str,
        existing_bindings: Sequence[Any] = (),
    ) -> dict[str, list[Any]]:
        """Propose ranked field bindings for template tokens.

        Args:
            tokens: Placeholder tokens found in the template.
            schema: Nested resume data schema.
            html: The template markup the tokens came from.
            existing_bindings: Bindings already confirmed for the template.

        Returns:
            Mapping of token to BindingSuggestion objects, best first.
            Tokens without suggestions are omitted.
        """

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Return the short name of this strategy."""
