"""Resume data schema API routes."""

import logging
from typing import Any

from fastapi import APIRouter, status

from template_binder.strategies.binding_engine import get_resume_schema

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/resume", tags=["resume"])


@router.get("/schema", status_code=status.HTTP_200_OK)
async def read_resume_schema() -> dict[str, Any]:
    """Return the schema of the resume data collected by the wizard."""
    return get_resume_schema()
