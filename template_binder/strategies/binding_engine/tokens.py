"""Placeholder token extraction.

Recognizes the placeholder syntaxes used by resume templates:

- ``[[FIELD:name]]``
- ``{{name}}`` (block helpers excluded)
- ``{{#each expr}}``
- ``{{#if expr}}``
"""

import logging
import re
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


BRACKET_PATTERN = re.compile(r"\[\[FIELD:([^\]]+)\]\]")
HANDLEBAR_PATTERN = re.compile(r"\{\{\s*([^{}#/]+?)\s*\}\}")
EACH_PATTERN = re.compile(r"\{\{#each\s+([^}]+)\}\}")
IF_PATTERN = re.compile(r"\{\{#if\s+([^}]+)\}\}")

# Applied in this order; the extraction result follows it.
TOKEN_PATTERNS: tuple[re.Pattern[str], ...] = (
    BRACKET_PATTERN,
    HANDLEBAR_PATTERN,
    EACH_PATTERN,
    IF_PATTERN,
)


class TokenSet:
    """Insertion-ordered set of token strings."""

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._index: dict[str, int] = {}
        self._items: list[str] = []
        for token in tokens:
            self.add(token)

    def add(self, token: str) -> bool:
        """Add a token; return False if it was already present."""
        if token in self._index:
            return False
        self._index[token] = len(self._items)
        self._items.append(token)
        return True

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[str]:
        return list(self._items)


def extract_template_tokens(html: str | None) -> list[str]:
    """Extract the distinct placeholder tokens found in template markup.

    Args:
        html: Raw template markup. ``None`` or empty yields no tokens.

    Returns:
        Full matched token strings, deduplicated, in pattern order then
        occurrence order.
    """
    if not html:
        return []

    found = TokenSet()
    for pattern in TOKEN_PATTERNS:
        for match in pattern.finditer(html):
            found.add(match.group(0))

    logger.debug(f"Extracted {len(found)} distinct tokens from {len(html)} chars of markup")
    return found.to_list()
