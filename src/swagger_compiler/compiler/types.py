"""Map one field declaration to a Swagger property descriptor.

Handles:
- Bare type tags as well as full field options
- Arrays of sub-schemas (normalized one level deep)
- Reference ids ($ref to another definition)
- Unsupported complex types (no property)
"""

from __future__ import annotations

from typing import Any

from swagger_compiler.errors import UnrecognizedTypeError
from swagger_compiler.schema.base import FieldSpec, FieldType, Schema

DEFINITIONS_PREFIX = "#/definitions/"


def _string_array() -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}}


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def map_property(
    options: Any,
    diagnostics: list | None = None,
    name: str = "",
) -> dict[str, Any] | None:
    """Convert a field's options into a property descriptor.

    Returns None when the field should not appear in the definition.
    ``name`` labels a nested array-of-schema definition in fallback diagnostics.
    Raises UnrecognizedTypeError for a scalar tag that matches no rule.
    """
    if isinstance(options, dict) and "type" in options:
        options = FieldSpec(**options)
    elif not isinstance(options, FieldSpec):
        options = FieldSpec(type=options)

    tag = options.type
    if isinstance(tag, list):
        if tag and isinstance(tag[0], Schema):
            from swagger_compiler.compiler.normalizer import normalize_schema

            return {
                "type": "array",
                "items": normalize_schema(tag[0], name, diagnostics),
            }
        return _string_array()

    if not tag:
        return None

    if tag is FieldType.STRING:
        return {"type": "string"}
    if tag is FieldType.NUMBER:
        return {"type": "integer", "format": "int64"}
    if tag is FieldType.DATE:
        return {"type": "string", "format": "date"}
    if tag is FieldType.BOOLEAN:
        return {"type": "boolean"}
    if tag in (FieldType.OBJECT_ID, FieldType.OID):
        return {"$ref": f"{DEFINITIONS_PREFIX}{options.ref or ''}"}
    if tag is FieldType.ARRAY:
        return _string_array()
    if tag in (FieldType.MIXED, FieldType.BUFFER):
        return {"type": "string"}
    if tag is FieldType.OBJECT:
        return None

    if not _is_scalar(tag):
        return None
    raise UnrecognizedTypeError(tag)
