"""Token context analysis.

Derives a field-name guess and the surrounding HTML structure for a
placeholder token. Tag detection is a regex balancing heuristic, not an
HTML parse: void elements such as ``<br>`` or ``<img>`` are counted as
open tags.
"""

import logging
import re

from template_binder.strategies.binding_engine.models import TokenContext

logger = logging.getLogger(__name__)


DEFAULT_CONTEXT_WINDOW = 50

TAG_PATTERN = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)\b[^>]*>")
BLOCK_PATTERN = re.compile(r"\{\{(#each\s+([^}]+)|/each)\s*\}\}")

_TOKEN_MARKERS = ("[[FIELD:", "]]", "{{", "}}")


def clean_token_name(token: str) -> str:
    """Strip placeholder syntax markers from a token."""
    name = token
    for marker in _TOKEN_MARKERS:
        name = name.replace(marker, "")
    return name.strip()


def _close_last(stack: list[str], name: str) -> None:
    """Remove the most recently opened entry named ``name``, if any."""
    for i in range(len(stack) - 1, -1, -1):
        if stack[i] == name:
            del stack[i]
            return


def open_tags_before(html: str, position: int) -> list[str]:
    """Return the tags still open at ``position``, outermost first."""
    stack: list[str] = []
    for match in TAG_PATTERN.finditer(html, 0, position):
        closing, name = match.group(1), match.group(2).lower()
        if closing:
            _close_last(stack, name)
        else:
            stack.append(name)
    return stack


def open_blocks_before(html: str, position: int) -> list[str]:
    """Return the expressions of ``{{#each}}`` blocks open at ``position``."""
    stack: list[str] = []
    for match in BLOCK_PATTERN.finditer(html, 0, position):
        expression = match.group(2)
        if expression is not None:
            stack.append(expression.strip())
        elif stack:
            stack.pop()
    return stack


def analyze_token_context(
    token: str,
    html: str | None,
    window: int = DEFAULT_CONTEXT_WINDOW,
) -> TokenContext:
    """Analyze where a token first appears in the markup.

    Args:
        token: The literal token, e.g. ``{{email}}``.
        html: The full template markup.
        window: Characters of surrounding text kept on each side.

    Returns:
        A TokenContext. When the token does not occur in the markup only
        ``token`` and ``clean_name`` are populated.
    """
    clean_name = clean_token_name(token)
    index = html.find(token) if html and token else -1
    if index == -1:
        return TokenContext(token=token, clean_name=clean_name)

    start = max(0, index - window)
    end = min(len(html), index + len(token) + window)

    open_tags = open_tags_before(html, index)
    open_blocks = open_blocks_before(html, index)

    return TokenContext(
        token=token,
        clean_name=clean_name,
        html_tag=open_tags[-1] if open_tags else None,
        parent_tag=open_tags[-2] if len(open_tags) > 1 else None,
        surrounding_text=html[start:end],
        in_repeated_block=bool(open_blocks),
        section=open_blocks[-1] if open_blocks else None,
    )
