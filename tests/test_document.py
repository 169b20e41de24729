import pytest
from pydantic import ValidationError

from swagger_compiler.compiler.document import compile_resource, update_properties
from swagger_compiler.errors import CompilerError, UnrecognizedTypeError
from swagger_compiler.schema.base import ResourceDescriptor, Schema

ALL_METHODS = ["index", "post", "get", "put", "delete"]


def _resource(methods: list[str]) -> ResourceDescriptor:
    return ResourceDescriptor(route="/users", name="user", model_name="User", methods=methods)


def _users_schema() -> Schema:
    return Schema(fields={
        "name": {"type": "String", "required": True},
        "age": {"type": "Number", "min": 0, "max": 150},
    })


def _container_ids(obj, seen=None) -> set[int]:
    seen = set() if seen is None else seen
    if isinstance(obj, dict):
        seen.add(id(obj))
        for value in obj.values():
            _container_ids(value, seen)
    elif isinstance(obj, list):
        seen.add(id(obj))
        for value in obj:
            _container_ids(value, seen)
    return seen


class TestEndToEnd:
    def test_users_resource(self):
        document = compile_resource(_resource(["index", "post", "get"]), _users_schema())

        assert document["definitions"]["User"]["properties"] == {
            "name": {"type": "string"},
            "age": {
                "type": "integer",
                "format": "int64",
                "allowableValues": {"valueType": "RANGE", "min": 0, "max": 150},
            },
        }
        assert document["definitions"]["UserList"] == {
            "type": "array",
            "items": {"$ref": "#/definitions/User"},
        }
        assert set(document["paths"]["/users"]) == {"get", "post"}
        assert set(document["paths"]["/users/{userId}"]) == {"get"}

    def test_explicit_definition_used(self):
        body = {"properties": {"email": {"type": "string"}}}
        document = compile_resource(_resource(["post"]), definition=body)
        assert document["definitions"]["User"] == body
        assert document["definitions"]["User"] is not body

    def test_explicit_definition_wins_over_schema(self):
        body = {"properties": {}}
        document = compile_resource(_resource(["post"]), _users_schema(), definition=body)
        assert document["definitions"]["User"] == {"properties": {}}

    def test_no_schema_or_definition(self):
        with pytest.raises(CompilerError):
            compile_resource(_resource(["get"]))

    def test_unrecognized_type_aborts(self):
        schema = Schema(fields={"amount": "Decimal128"})
        with pytest.raises(UnrecognizedTypeError):
            compile_resource(_resource(ALL_METHODS), schema)

    def test_diagnostics_collected(self):
        schema = Schema(fields={"team": {"type": "ObjectId", "ref": "Team"}})
        diagnostics = []
        compile_resource(_resource(["get"]), schema, diagnostics=diagnostics)
        assert len(diagnostics) == 1
        assert diagnostics[0].definition == "User"


class TestIdempotence:
    def test_repeated_compiles_are_equal(self):
        resource = _resource(ALL_METHODS)
        first = compile_resource(resource, _users_schema())
        second = compile_resource(resource, _users_schema())
        assert first == second

    def test_no_shared_objects(self):
        resource = _resource(ALL_METHODS)
        schema = Schema(fields={
            "name": {"type": "String", "example": {"first": "Ada"}},
            "tags": {"type": "String", "enum": ["a", "b"]},
        })
        first = compile_resource(resource, schema)
        second = compile_resource(resource, schema)
        assert _container_ids(first).isdisjoint(_container_ids(second))

    def test_explicit_definition_not_shared(self):
        body = {"properties": {"email": {"type": "string"}}}
        first = compile_resource(_resource(["get"]), definition=body)
        second = compile_resource(_resource(["get"]), definition=body)
        assert _container_ids(first).isdisjoint(_container_ids(second))


class TestPathSelection:
    def test_get_only(self):
        paths = compile_resource(_resource(["get"]), _users_schema())["paths"]
        assert list(paths) == ["/users/{userId}"]
        assert list(paths["/users/{userId}"]) == ["get"]

    def test_collection_only(self):
        paths = compile_resource(_resource(["index", "post"]), _users_schema())["paths"]
        assert list(paths) == ["/users"]
        assert set(paths["/users"]) == {"get", "post"}

    def test_all_methods(self):
        paths = compile_resource(_resource(ALL_METHODS), _users_schema())["paths"]
        assert len(paths) == 2
        assert set(paths["/users"]) == {"get", "post"}
        assert set(paths["/users/{userId}"]) == {"get", "put", "delete"}

    def test_no_methods(self):
        document = compile_resource(_resource([]), _users_schema())
        assert document["paths"] == {}
        assert set(document["definitions"]) == {"User", "UserList"}

    def test_collection_get_is_index(self):
        paths = compile_resource(_resource(["index", "get"]), _users_schema())["paths"]
        assert paths["/users"]["get"]["operationId"] == "getUsers"
        assert paths["/users/{userId}"]["get"]["operationId"] == "getUser"


class TestOperations:
    def _paths(self):
        return compile_resource(_resource(ALL_METHODS), _users_schema())["paths"]

    def test_index(self):
        op = self._paths()["/users"]["get"]
        assert op["tags"] == ["user"]
        assert op["produces"] == ["application/json"]
        assert "consumes" not in op
        assert list(op["responses"]) == ["401", "200"]
        assert op["responses"]["200"]["schema"] == {"$ref": "#/definitions/UserList"}
        defaults = {p["name"]: (p["in"], p["type"], p["default"]) for p in op["parameters"]}
        assert defaults == {
            "skip": ("query", "integer", 0),
            "limit": ("query", "integer", 10),
            "count": ("query", "boolean", False),
            "sort": ("query", "string", ""),
            "select": ("query", "string", ""),
            "populate": ("query", "string", ""),
        }
        assert all(p["required"] is False for p in op["parameters"])

    def test_post(self):
        op = self._paths()["/users"]["post"]
        assert op["operationId"] == "createUser"
        assert op["consumes"] == ["application/json"]
        assert op["security"] == []
        assert list(op["responses"]) == ["401", "400", "201"]
        body = op["parameters"][0]
        assert body["in"] == "body"
        assert body["required"] is True
        assert body["schema"] == {"$ref": "#/definitions/User"}

    def test_get(self):
        op = self._paths()["/users/{userId}"]["get"]
        assert op["summary"] == "Return a specific user instance."
        assert list(op["responses"]) == ["500", "404", "401", "200"]
        assert op["responses"]["200"]["schema"] == {"$ref": "#/definitions/User"}
        assert op["parameters"] == [{
            "name": "userId",
            "in": "path",
            "description": "The ID of the user that will be retrieved.",
            "required": True,
            "type": "string",
        }]

    def test_put(self):
        op = self._paths()["/users/{userId}"]["put"]
        assert op["operationId"] == "updateUser"
        assert list(op["responses"]) == ["500", "404", "401", "400", "200"]
        assert [p["in"] for p in op["parameters"]] == ["path", "body"]
        assert op["parameters"][1]["schema"] == {"$ref": "#/definitions/User"}

    def test_delete(self):
        op = self._paths()["/users/{userId}"]["delete"]
        assert op["operationId"] == "deleteUser"
        assert list(op["responses"]) == ["500", "404", "401", "400", "204"]
        assert "schema" not in op["responses"]["204"]
        assert [p["name"] for p in op["parameters"]] == ["userId"]


class TestResourceDescriptor:
    def test_item_route_rejected(self):
        with pytest.raises(ValidationError):
            ResourceDescriptor(route="/users/{userId}", name="user", model_name="User")

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError):
            _resource(["patch"])


class TestUpdateProperties:
    def test_readonly_fields_skipped(self):
        schema = Schema(fields={
            "name": "String",
            "created": {"type": "Date", "readonly": True},
        })
        definition = compile_resource(_resource(["put"]), schema)["definitions"]["User"]
        assert update_properties(definition, schema) == [{"type": "string"}]
