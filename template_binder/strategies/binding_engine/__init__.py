"""Template binding engine.

Extracts placeholder tokens from HTML resume templates and suggests
which resume data fields they should be bound to.
"""

from template_binder.strategies.binding_engine.context import analyze_token_context
from template_binder.strategies.binding_engine.models import (
    BindingSuggestion,
    ExistingBinding,
    FlattenedField,
    TokenContext,
)
from template_binder.strategies.binding_engine.resume_schema import get_resume_schema
from template_binder.strategies.binding_engine.schema import flatten_schema
from template_binder.strategies.binding_engine.similarity import (
    levenshtein_distance,
    string_similarity,
)
from template_binder.strategies.binding_engine.suggester import (
    BindingSuggester,
    suggest_bindings,
)
from template_binder.strategies.binding_engine.tokens import extract_template_tokens

__all__ = [
    "BindingSuggester",
    "BindingSuggestion",
    "ExistingBinding",
    "FlattenedField",
    "TokenContext",
    "analyze_token_context",
    "extract_template_tokens",
    "flatten_schema",
    "get_resume_schema",
    "levenshtein_distance",
    "string_similarity",
    "suggest_bindings",
]
