"""Schema flattening.

Turns a nested resume data schema into addressable field paths. Arrays
are addressed through their first element, e.g. ``workExperience[0]``.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from template_binder.strategies.binding_engine.models import (
    ArraySchema,
    FlattenedField,
    ObjectSchema,
    SchemaNode,
    parse_schema,
)

logger = logging.getLogger(__name__)


_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def humanize_key(key: str) -> str:
    """Turn a schema key into display text.

    ``jobTitle`` becomes ``Job Title`` while ``job_title`` becomes
    ``Job title``: only the first letter is capitalized.
    """
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", key).replace("_", " ")
    return spaced[:1].upper() + spaced[1:]


def flatten_schema(
    schema: Mapping[str, Any] | None,
    parent_path: str = "",
) -> list[FlattenedField]:
    """Flatten a nested schema into a list of fields, parents first.

    Args:
        schema: ``{key: node}`` mapping; nodes may be raw JSON dictionaries
            or typed schema nodes.
        parent_path: Path prefix for every key.

    Returns:
        Flattened fields in depth-first order.
    """
    fields: list[FlattenedField] = []
    _flatten_into(fields, parse_schema(schema), parent_path)
    return fields


def _flatten_into(
    fields: list[FlattenedField],
    schema: Mapping[str, SchemaNode],
    parent_path: str,
) -> None:
    for key, node in schema.items():
        path = f"{parent_path}.{key}" if parent_path else key
        name = node.title or humanize_key(key)

        fields.append(
            FlattenedField(
                path=path,
                name=name,
                type=node.type or "string",
                description=node.description,
                title=node.title,
            )
        )

        if isinstance(node, ObjectSchema) and node.properties:
            _flatten_into(fields, node.properties, path)
        elif isinstance(node, ArraySchema) and node.items is not None:
            item_path = f"{path}[0]"
            items = node.items
            if isinstance(items, ObjectSchema) and items.properties:
                _flatten_into(fields, items.properties, item_path)
            else:
                fields.append(
                    FlattenedField(
                        path=item_path,
                        name=f"{name} Item",
                        type=items.type or "string",
                        description=f"First item in {name} array",
                    )
                )
