"""FastAPI dependencies for dependency injection."""

import logging

from fastapi import HTTPException, Request, status

from template_binder.core.config import Settings
from template_binder.core.factory import ComponentFactory
from template_binder.interfaces.binding import BaseBindingSuggester

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_factory(request: Request) -> ComponentFactory:
    """Return the component factory created with the application."""
    return request.app.state.factory


def get_suggester(request: Request) -> BaseBindingSuggester:
    """Dependency for the configured binding suggester.

    Raises:
        HTTPException: If the configured strategy cannot be created.
    """
    try:
        return get_factory(request).get_suggester()
    except ValueError as e:
        logger.error(f"Invalid binding suggester configuration: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Binding suggester is misconfigured",
        ) from e
