"""Auto-detect the text format of an AsyncAPI document."""

import json
from pathlib import Path


def detect_format(text: str) -> str:
    """Detect whether a document is written as JSON or YAML.

    Returns: 'json' or 'yaml'. YAML is the fallback since it is a superset of JSON.
    """
    if text.lstrip().startswith(("{", "[")):
        try:
            json.loads(text)
            return "json"
        except (json.JSONDecodeError, ValueError):
            pass
    return "yaml"


def format_for_path(path: Path) -> str:
    """Pick the output format implied by a file suffix."""
    if path.suffix.lower() == ".json":
        return "json"
    return "yaml"
