"""Binding suggestion strategy.

Scores every flattened schema field against each unbound template token
and keeps the best few candidates.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from template_binder.interfaces.binding import BaseBindingSuggester
from template_binder.strategies.binding_engine.context import (
    DEFAULT_CONTEXT_WINDOW,
    analyze_token_context,
)
from template_binder.strategies.binding_engine.models import (
    BindingSuggestion,
    ExistingBinding,
    FlattenedField,
)
from template_binder.strategies.binding_engine.schema import flatten_schema
from template_binder.strategies.binding_engine.scorer import generate_reasoning, score_field
from template_binder.strategies.binding_engine.tokens import extract_template_tokens

logger = logging.getLogger(__name__)


DEFAULT_MAX_SUGGESTIONS = 5
DEFAULT_MIN_CONFIDENCE = 0.1


def bound_tokens(existing_bindings: Sequence[Any]) -> dict[str, str]:
    """Map tokens to their confirmed data field, ignoring empty bindings.

    Accepts ExistingBinding models or plain dictionaries using either
    snake_case or camelCase keys.
    """
    lookup: dict[str, str] = {}
    for raw in existing_bindings or ():
        binding = raw if isinstance(raw, ExistingBinding) else ExistingBinding.model_validate(raw)
        if binding.data_field:
            lookup[binding.placeholder_token] = binding.data_field
    return lookup


def rank_fields(
    token: str,
    fields: Sequence[FlattenedField],
    html: str,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
    window: int = DEFAULT_CONTEXT_WINDOW,
) -> list[BindingSuggestion]:
    """Rank fields for one token, best first."""
    context = analyze_token_context(token, html, window=window)

    scored = [(field, score_field(field, context)) for field in fields]
    scored.sort(key=lambda pair: pair[1], reverse=True)

    return [
        BindingSuggestion(
            token=token,
            field_path=field.path,
            confidence=score,
            reasoning=generate_reasoning(field, context, score),
        )
        for field, score in scored[:max_suggestions]
        if score > min_confidence
    ]


def suggest_bindings(
    tokens: Sequence[str],
    schema: Mapping[str, Any] | None,
    html: str,
    existing_bindings: Sequence[Any] = (),
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
    window: int = DEFAULT_CONTEXT_WINDOW,
) -> dict[str, list[BindingSuggestion]]:
    """Suggest data-field bindings for template tokens.

    Tokens that already have a confirmed binding are skipped, and tokens
    with no candidate above ``min_confidence`` are left out of the result.

    Args:
        tokens: Placeholder tokens to bind.
        schema: Nested resume data schema.
        html: Template markup used for context analysis.
        existing_bindings: Confirmed bindings for the template.
        max_suggestions: Maximum suggestions kept per token.
        min_confidence: Suggestions must score strictly above this.
        window: Characters of surrounding text captured per token.

    Returns:
        Mapping of token to suggestions sorted by descending confidence.
    """
    already_bound = bound_tokens(existing_bindings)
    fields = flatten_schema(schema)
    html = html or ""

    suggestions: dict[str, list[BindingSuggestion]] = {}
    for token in tokens:
        if token in already_bound:
            continue
        ranked = rank_fields(
            token,
            fields,
            html,
            max_suggestions=max_suggestions,
            min_confidence=min_confidence,
            window=window,
        )
        if ranked:
            suggestions[token] = ranked

    logger.debug(
        f"Suggested bindings for {len(suggestions)}/{len(tokens)} tokens "
        f"against {len(fields)} fields ({len(already_bound)} already bound)"
    )
    return suggestions


class BindingSuggester(BaseBindingSuggester):
    """Heuristic binding suggester based on string similarity.

    Attributes:
        max_suggestions: Maximum suggestions kept per token.
        min_confidence: Threshold a suggestion must exceed.
        context_window: Characters of surrounding text captured per token.
    """

    def __init__(
        self,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        min_confidence: float = DEFAULT_MIN_CONFIDENCE,
        context_window: int = DEFAULT_CONTEXT_WINDOW,
    ) -> None:
        self.max_suggestions = max(1, max_suggestions)
        self.min_confidence = min_confidence
        self.context_window = max(0, context_window)

        logger.info(
            f"BindingSuggester initialized: max_suggestions={self.max_suggestions}, "
            f"min_confidence={self.min_confidence}, context_window={self.context_window}"
        )

    def suggest(
        self,
        tokens: Sequence[str],
        schema: Mapping[str, Any] | None,
        html: str,
        existing_bindings: Sequence[Any] = (),
    ) -> dict[str, list[BindingSuggestion]]:
        return suggest_bindings(
            tokens,
            schema,
            html,
            existing_bindings,
            max_suggestions=self.max_suggestions,
            min_confidence=self.min_confidence,
            window=self.context_window,
        )

    def suggest_for_template(
        self,
        html: str,
        schema: Mapping[str, Any] | None,
        existing_bindings: Sequence[Any] = (),
    ) -> dict[str, list[BindingSuggestion]]:
        """Extract tokens from ``html`` and suggest bindings for them."""
        tokens = extract_template_tokens(html)
        logger.info(f"Suggesting bindings for {len(tokens)} template tokens")
        return self.suggest(tokens, schema, html, existing_bindings)

    @property
    def strategy_name(self) -> str:
        return "heuristic"
