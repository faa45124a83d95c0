"""Field scoring and reasoning text.

A field's score is a weighted name/path similarity plus small bonuses
for string fields and for HTML tags that hint at the kind of data, e.g.
an ``<a>`` around an email address or an ``<h1>`` around a name.
"""

from template_binder.strategies.binding_engine.models import FlattenedField, TokenContext
from template_binder.strategies.binding_engine.similarity import string_similarity

NAME_WEIGHT = 0.5
PATH_WEIGHT = 0.3
STRING_TYPE_BONUS = 0.1

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

# (tags, path keywords, bonus)
TAG_HEURISTICS: tuple[tuple[frozenset[str], tuple[str, ...], float], ...] = (
    (frozenset({"a"}), ("email", "url", "website", "link"), 0.2),
    (HEADING_TAGS, ("name", "title"), 0.2),
    (frozenset({"p"}), ("description", "summary"), 0.1),
)


def score_field(field: FlattenedField, context: TokenContext) -> float:
    """Score how well ``field`` fits the token described by ``context``."""
    score = NAME_WEIGHT * string_similarity(context.clean_name, field.name)
    score += PATH_WEIGHT * string_similarity(context.clean_name, field.path)

    if field.type == "string":
        score += STRING_TYPE_BONUS

    if context.html_tag:
        path = field.path.lower()
        for tags, keywords, bonus in TAG_HEURISTICS:
            if context.html_tag in tags and any(word in path for word in keywords):
                score += bonus

    return min(1.0, score)


def generate_reasoning(field: FlattenedField, context: TokenContext, score: float) -> str:
    """Explain a score in a sentence for the admin reviewing suggestions."""
    if score > 0.9:
        return f'Perfect match based on field name "{field.name}".'
    if score > 0.7:
        return f'Strong match between "{context.clean_name}" and "{field.name}".'
    if score > 0.5:
        tag_note = f", and HTML context {context.html_tag}" if context.html_tag else ""
        return f"Good match based on naming similarity{tag_note}."
    if score > 0.3:
        return "Possible match, but low confidence."
    return "Low confidence match, consider manual binding."
