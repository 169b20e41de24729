"""Render compiled documents as YAML or JSON text."""

import json

import yaml

FORMATS = ("yaml", "json")


def render_document(document: dict, fmt: str = "yaml") -> str:
    """Serialize a document, keeping key order as built."""
    if fmt == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format: {fmt}")
