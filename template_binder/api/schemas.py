"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Re-export engine models used in responses
from template_binder.strategies.binding_engine import (
    BindingSuggestion,
    ExistingBinding,
    TokenContext,
)


# =============================================================================
# Template Schemas
# =============================================================================


class TemplateTokensRequest(BaseModel):
    """Request to list the placeholder tokens of a template."""

    html: str = Field(default="", description="Template HTML markup")


class TokenWithContext(BaseModel):
    """A placeholder token with its analyzed context."""

    token: str
    context: TokenContext


class SuggestBindingsRequest(BaseModel):
    """Request to suggest bindings for a template's tokens."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "html": '<h1>{{fullName}}</h1><a href="mailto:{{email}}">{{email}}</a>',
                "existingBindings": [
                    {"placeholderToken": "{{fullName}}", "dataField": "firstName"}
                ],
            }
        },
    )

    html: str = Field(default="", description="Template HTML markup")
    resume_schema: dict[str, Any] | None = Field(
        default=None,
        alias="resumeSchema",
        description="Resume data schema; the built-in schema is used when omitted",
    )
    existing_bindings: list[ExistingBinding] = Field(
        default_factory=list,
        alias="existingBindings",
        description="Bindings already confirmed for this template",
    )


SuggestBindingsResponse = dict[str, list[BindingSuggestion]]


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
    extra: dict[str, Any] | None = Field(default=None, description="Additional error context")
