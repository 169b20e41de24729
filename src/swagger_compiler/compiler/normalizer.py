"""Normalize a data model schema into a Swagger definition.

Each field goes through the type mapper; descriptions, examples, enum
values and numeric ranges are then merged into the resulting property.
"""

from __future__ import annotations

import copy
import logging
import math
from enum import Enum
from typing import Any

from pydantic import BaseModel

from swagger_compiler.compiler.types import map_property
from swagger_compiler.errors import UnrecognizedTypeError
from swagger_compiler.schema.base import Schema

logger = logging.getLogger(__name__)

PRIVATE_PREFIX = "__"


class TypeFallback(BaseModel):
    """A property whose type could not be determined and was forced to string."""

    definition: str
    field: str
    type_tag: str


def _is_number(value: Any) -> bool:
    """True for int/float values usable as a range bound (bools and NaN excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def _describe_tag(tag: Any) -> str:
    if isinstance(tag, Enum):
        return str(tag.value)
    return repr(tag)


def normalize_schema(
    schema: Schema,
    name: str = "",
    diagnostics: list[TypeFallback] | None = None,
) -> dict[str, Any]:
    """Build a definition ``{"properties": {...}}`` from a schema.

    Fields are emitted in declaration order. Names starting with ``__`` and
    fields whose type maps to nothing are left out. When ``diagnostics`` is
    given, every string fallback is appended to it.
    """
    definition: dict[str, Any] = {"properties": {}}
    required: list[str] = []

    for field_name, options in schema.fields.items():
        if field_name.startswith(PRIVATE_PREFIX):
            continue

        try:
            prop = map_property(
                options,
                diagnostics=diagnostics,
                name=f"{name}.{field_name}" if name else field_name,
            )
        except UnrecognizedTypeError as e:
            if e.field is not None:
                raise
            raise UnrecognizedTypeError(e.type_tag, field=field_name) from e
        if prop is None:
            continue

        if options.description:
            prop["description"] = options.description

        if options.example is not None:
            prop["example"] = copy.deepcopy(options.example)

        # Tracked but never written to the definition.
        if options.required:
            required.append(field_name)

        if options.enum:
            prop["allowableValues"] = {"valueType": "LIST", "values": list(options.enum)}

        # A range replaces any enum list set above.
        if _is_number(options.min) or _is_number(options.max):
            prop["allowableValues"] = {"valueType": "RANGE"}
            if _is_number(options.min):
                prop["allowableValues"]["min"] = options.min
            if _is_number(options.max):
                prop["allowableValues"]["max"] = options.max

        if "type" not in prop:
            fallback = TypeFallback(
                definition=name,
                field=field_name,
                type_tag=_describe_tag(options.type),
            )
            logger.warning(
                "Field type not supported in Swagger definitions, using \"string\": "
                "%s.%s (type: %s)",
                fallback.definition,
                fallback.field,
                fallback.type_tag,
            )
            if diagnostics is not None:
                diagnostics.append(fallback)
            prop["type"] = "string"

        definition["properties"][field_name] = prop

    return definition


def required_fields(schema: Schema) -> list[str]:
    """Names of required, non-private fields in declaration order."""
    return [
        name
        for name, options in schema.fields.items()
        if options.required and not name.startswith(PRIVATE_PREFIX)
    ]
