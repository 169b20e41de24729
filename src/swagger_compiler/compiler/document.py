"""Synthesize the Swagger document for one resource.

Registers the model definition and its ``<Model>List`` wrapper, then emits
one operation per enabled method on the collection or item path.
"""

from __future__ import annotations

import copy
from typing import Any, Callable

from swagger_compiler.compiler.normalizer import TypeFallback, normalize_schema
from swagger_compiler.compiler.operations import (
    delete_operation,
    get_operation,
    index_operation,
    item_path,
    model_ref,
    post_operation,
    put_operation,
)
from swagger_compiler.errors import CompilerError
from swagger_compiler.schema.base import Method, ResourceDescriptor, Schema

# Method -> (HTTP verb, on item path, template), in emission order
_OPERATIONS: dict[Method, tuple[str, bool, Callable[[ResourceDescriptor], dict[str, Any]]]] = {
    Method.INDEX: ("get", False, index_operation),
    Method.POST: ("post", False, post_operation),
    Method.GET: ("get", True, get_operation),
    Method.PUT: ("put", True, put_operation),
    Method.DELETE: ("delete", True, delete_operation),
}


def compile_resource(
    resource: ResourceDescriptor,
    schema: Schema | None = None,
    definition: dict[str, Any] | None = None,
    diagnostics: list[TypeFallback] | None = None,
) -> dict[str, Any]:
    """Compile a resource into ``{"definitions": ..., "paths": ...}``.

    ``definition`` is used verbatim as the model definition when given;
    otherwise ``schema`` is normalized. Raises UnrecognizedTypeError if a
    field's type cannot be mapped, in which case nothing is returned.
    """
    if definition is not None:
        model_definition = copy.deepcopy(definition)
    elif schema is not None:
        model_definition = normalize_schema(schema, resource.model_name, diagnostics)
    else:
        raise CompilerError(f"No schema or definition given for resource {resource.name!r}")

    model = resource.model_name
    document: dict[str, Any] = {
        "definitions": {
            model: model_definition,
            f"{model}List": {"type": "array", "items": model_ref(model)},
        },
        "paths": {},
    }

    enabled = [m for m in _OPERATIONS if resource.has(m)]
    paths = document["paths"]
    if any(not _OPERATIONS[m][1] for m in enabled):
        paths[resource.route] = {}
    if any(_OPERATIONS[m][1] for m in enabled):
        paths[item_path(resource)] = {}

    for method in enabled:
        verb, on_item, template = _OPERATIONS[method]
        path = item_path(resource) if on_item else resource.route
        paths[path][verb] = template(resource)

    return document


def update_properties(definition: dict[str, Any], schema: Schema) -> list[dict[str, Any]]:
    """Property descriptors of ``definition`` whose source field is writable."""
    properties = []
    for name, prop in definition.get("properties", {}).items():
        options = schema.fields.get(name)
        if options is None or not options.readonly:
            properties.append(prop)
    return properties
