"""Component Factory for strategy instantiation.

Selects the binding suggester implementation at runtime based on
configuration.
"""

import logging

from template_binder.core.config import Settings, get_settings
from template_binder.interfaces.binding import BaseBindingSuggester
from template_binder.strategies.binding_engine import BindingSuggester

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())
        suggester = factory.get_suggester()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._suggester_cache: BaseBindingSuggester | None = None

    def get_suggester(self, suggester_type: str | None = None) -> BaseBindingSuggester:
        """Get a binding suggester instance based on the specified type.

        Args:
            suggester_type: The suggester type to instantiate. If None, uses settings.

        Returns:
            A BaseBindingSuggester implementation instance.

        Raises:
            ValueError: If the suggester type is unknown.
        """
        if self._suggester_cache is None or suggester_type is not None:
            suggester_type = suggester_type or self._settings.suggester_type

            logger.info(f"Instantiating binding suggester: {suggester_type}")

            match suggester_type:
                case "heuristic":
                    self._suggester_cache = BindingSuggester(
                        max_suggestions=self._settings.max_suggestions,
                        min_confidence=self._settings.min_confidence,
                        context_window=self._settings.context_window,
                    )
                case _:
                    raise ValueError(
                        f"Unknown suggester type: {suggester_type}. "
                        f"Valid options: 'heuristic'"
                    )

        return self._suggester_cache
