"""Binding suggestion script.

Prints binding suggestions for an HTML template as JSON.

Usage:
    python scripts/suggest_bindings.py template.html
    python scripts/suggest_bindings.py template.html --schema schema.json --existing bindings.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from template_binder.core.config import get_settings
from template_binder.core.factory import ComponentFactory
from template_binder.strategies.binding_engine import (
    extract_template_tokens,
    get_resume_schema,
)

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Suggest data bindings for template tokens.")
    parser.add_argument("template", type=Path, help="HTML template file")
    parser.add_argument("--schema", type=Path, help="Resume schema JSON (default: built-in)")
    parser.add_argument("--existing", type=Path, help="JSON list of confirmed bindings")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Print suggestions for the given template."""
    args = parse_args(argv)

    html = args.template.read_text(encoding="utf-8")
    schema = (
        json.loads(args.schema.read_text(encoding="utf-8"))
        if args.schema
        else get_resume_schema()
    )
    existing = (
        json.loads(args.existing.read_text(encoding="utf-8")) if args.existing else []
    )

    suggester = ComponentFactory(get_settings()).get_suggester()
    tokens = extract_template_tokens(html)
    suggestions = suggester.suggest(tokens, schema, html, existing)

    logger.info(f"{len(suggestions)} of {len(tokens)} tokens have suggestions")
    output = {
        token: [suggestion.model_dump() for suggestion in ranked]
        for token, ranked in suggestions.items()
    }
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
