"""Template binding API routes.

Lists template placeholder tokens and suggests resume data bindings
for them. Templates and bindings are supplied by the caller.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from template_binder.api.deps import get_app_settings, get_suggester
from template_binder.api.schemas import (
    SuggestBindingsRequest,
    SuggestBindingsResponse,
    TemplateTokensRequest,
    TokenWithContext,
)
from template_binder.core.config import Settings
from template_binder.interfaces.binding import BaseBindingSuggester
from template_binder.strategies.binding_engine import (
    analyze_token_context,
    extract_template_tokens,
    get_resume_schema,
)

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/templates", tags=["templates"])


@router.post(
    "/tokens",
    response_model=list[TokenWithContext],
    status_code=status.HTTP_200_OK,
)
async def list_template_tokens(
    request: TemplateTokensRequest,
    settings: Settings = Depends(get_app_settings),
) -> list[TokenWithContext]:
    """List the placeholder tokens in a template with their context.

    Args:
        request: Request containing the template HTML.
        settings: Application settings.

    Returns:
        One entry per distinct token.
    """
    try:
        tokens = extract_template_tokens(request.html)
        logger.info(f"Extracted {len(tokens)} tokens from template")

        return [
            TokenWithContext(
                token=token,
                context=analyze_token_context(
                    token, request.html, window=settings.context_window
                ),
            )
            for token in tokens
        ]

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Token extraction failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to extract template tokens: {str(e)}",
        ) from e


@router.post(
    "/suggest-bindings",
    response_model=SuggestBindingsResponse,
    status_code=status.HTTP_200_OK,
)
async def suggest_template_bindings(
    request: SuggestBindingsRequest,
    suggester: BaseBindingSuggester = Depends(get_suggester),
) -> SuggestBindingsResponse:
    """Suggest resume data fields for each unbound template token.

    Tokens that already have a binding with a data field are skipped.
    When no schema is supplied the built-in resume schema is used.

    Args:
        request: Template HTML, optional schema and existing bindings.
        suggester: The configured binding suggester.

    Returns:
        Mapping of token to ranked suggestions.
    """
    try:
        schema = (
            request.resume_schema
            if request.resume_schema is not None
            else get_resume_schema()
        )
        tokens = extract_template_tokens(request.html)

        logger.info(
            f"Suggesting bindings: tokens={len(tokens)}, "
            f"existing_bindings={len(request.existing_bindings)}, "
            f"strategy={suggester.strategy_name}"
        )

        suggestions = suggester.suggest(
            tokens, schema, request.html, request.existing_bindings
        )

        logger.info(f"Suggestions generated for {len(suggestions)} tokens")
        return suggestions

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Binding suggestion failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate binding suggestions: {str(e)}",
        ) from e
