"""FastAPI routers and dependencies."""

from template_binder.api.deps import get_suggester
from template_binder.api.resume import router as resume_router
from template_binder.api.templates import router as templates_router

__all__ = [
    "get_suggester",
    "resume_router",
    "templates_router",
]
