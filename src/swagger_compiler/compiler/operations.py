"""Operation templates for the five CRUD methods of a resource.

Pattern (resource ``user``, model ``User``):
  - index  -> GET    /users           getUsers
  - post   -> POST   /users           createUser
  - get    -> GET    /users/{userId}  getUser
  - put    -> PUT    /users/{userId}  updateUser
  - delete -> DELETE /users/{userId}  deleteUser
"""

from __future__ import annotations

from typing import Any

from swagger_compiler.schema.base import ResourceDescriptor

JSON = "application/json"


def model_ref(model_name: str) -> dict[str, str]:
    return {"$ref": f"#/definitions/{model_name}"}


def item_path(resource: ResourceDescriptor) -> str:
    """The path addressing a single member: ``/users/{userId}``."""
    return f"{resource.route}/{{{id_param_name(resource)}}}"


def id_param_name(resource: ResourceDescriptor) -> str:
    return f"{resource.name}Id"


def _id_parameter(resource: ResourceDescriptor, action: str) -> dict[str, Any]:
    return {
        "name": id_param_name(resource),
        "in": "path",
        "description": f"The ID of the {resource.name} that will be {action}.",
        "required": True,
        "type": "string",
    }


def _body_parameter(description: str, model_name: str) -> dict[str, Any]:
    return {
        "in": "body",
        "name": "body",
        "description": description,
        "required": True,
        "schema": model_ref(model_name),
    }


def _query_parameter(name: str, param_type: str, default: Any, description: str) -> dict[str, Any]:
    return {
        "name": name,
        "in": "query",
        "description": description,
        "required": False,
        "type": param_type,
        "default": default,
    }


def index_operation(resource: ResourceDescriptor) -> dict[str, Any]:
    """GET on the collection: list and search with paging query arguments."""
    model = resource.model_name
    return {
        "tags": [resource.name],
        "summary": f"List multiple {model} resources.",
        "description": (
            f"This operation allows you to list and search for {model} resources "
            "provided query arguments."
        ),
        "operationId": f"get{model}s",
        "produces": [JSON],
        "responses": {
            "401": {"description": "Unauthorized."},
            "200": {
                "description": "Resource(s) found.  Returned as array.",
                "schema": model_ref(f"{model}List"),
            },
        },
        "parameters": [
            _query_parameter("skip", "integer", 0, "How many records to skip when listing. Used for pagination."),
            _query_parameter("limit", "integer", 10, "How many records to limit the output."),
            _query_parameter(
                "count", "boolean", False,
                "Set to true to return the number of records instead of the documents.",
            ),
            _query_parameter("sort", "string", "", "Which fields to sort the records on."),
            _query_parameter("select", "string", "", "Select which fields will be returned by the query."),
            _query_parameter(
                "populate", "string", "",
                "Select which fields will be fully populated with the reference.",
            ),
        ],
    }


def post_operation(resource: ResourceDescriptor) -> dict[str, Any]:
    model = resource.model_name
    return {
        "tags": [resource.name],
        "summary": f"Create a new {model}",
        "description": f"Create a new {model}",
        "operationId": f"create{model}",
        "consumes": [JSON],
        "produces": [JSON],
        "security": [],
        "responses": {
            "401": {"description": "Unauthorized.  Note that anonymous submissions are *enabled* by default."},
            "400": {"description": "An error has occured trying to create the resource."},
            "201": {"description": "The resource has been created."},
        },
        "parameters": [_body_parameter(f"Data used to create a new {model}", model)],
    }


def get_operation(resource: ResourceDescriptor) -> dict[str, Any]:
    model = resource.model_name
    return {
        "tags": [resource.name],
        "summary": f"Return a specific {resource.name} instance.",
        "description": f"Return a specific {resource.name} instance.",
        "operationId": f"get{model}",
        "produces": [JSON],
        "responses": {
            "500": {"description": "An error has occurred."},
            "404": {"description": "Resource not found"},
            "401": {"description": "Unauthorized."},
            "200": {"description": "Resource found", "schema": model_ref(model)},
        },
        "parameters": [_id_parameter(resource, "retrieved")],
    }


def put_operation(resource: ResourceDescriptor) -> dict[str, Any]:
    model = resource.model_name
    return {
        "tags": [resource.name],
        "summary": f"Update a specific {resource.name} instance.",
        "description": f"Update a specific {resource.name} instance.",
        "operationId": f"update{model}",
        "consumes": [JSON],
        "produces": [JSON],
        "responses": {
            "500": {"description": "An error has occurred."},
            "404": {"description": "Resource not found"},
            "401": {"description": "Unauthorized."},
            "400": {"description": "Resource could not be updated."},
            "200": {"description": "Resource updated", "schema": model_ref(model)},
        },
        "parameters": [
            _id_parameter(resource, "updated"),
            _body_parameter(f"Data used to update {model}", model),
        ],
    }


def delete_operation(resource: ResourceDescriptor) -> dict[str, Any]:
    model = resource.model_name
    return {
        "tags": [resource.name],
        "summary": f"Delete a specific {resource.name}",
        "description": f"Delete a specific {resource.name}",
        "operationId": f"delete{model}",
        "consumes": [JSON],
        "produces": [JSON],
        "responses": {
            "500": {"description": "An error has occurred."},
            "404": {"description": "Resource not found"},
            "401": {"description": "Unauthorized."},
            "400": {"description": "Resource could not be deleted."},
            "204": {"description": "Resource was deleted"},
        },
        "parameters": [_id_parameter(resource, "deleted")],
    }
