"""Data models for schemas and resources handed to the compiler.

Native type names are translated into the closed ``FieldType`` enum here,
so the type mapper only ever matches on recognized members.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class FieldType(str, Enum):
    """Recognized scalar and category type tags."""

    STRING = "String"
    NUMBER = "Number"
    DATE = "Date"
    BOOLEAN = "Boolean"
    OBJECT_ID = "ObjectId"
    OID = "Oid"
    ARRAY = "Array"
    MIXED = "Mixed"
    BUFFER = "Buffer"
    OBJECT = "Object"


_FIELD_TYPES = {t.value: t for t in FieldType}


class Method(str, Enum):
    """The five CRUD operations a resource can enable."""

    INDEX = "index"
    POST = "post"
    GET = "get"
    PUT = "put"
    DELETE = "delete"


class FieldSpec(BaseModel):
    """One field's declaration: a type tag plus modifiers."""

    type: Any = None  # FieldType / [element] / Schema / other object / raw scalar
    required: bool = False
    description: Optional[str] = None
    example: Any = None
    enum: list[str] = []
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    ref: Optional[str] = None  # target definition for ObjectId / Oid
    readonly: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type_tag(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_coerce_element(v) for v in value]
        return _coerce_tag(value)


class Schema(BaseModel):
    """A data model schema: field names to declarations, in declared order."""

    fields: dict[str, FieldSpec] = {}

    @field_validator("fields", mode="before")
    @classmethod
    def _wrap_bare_tags(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        wrapped = {}
        for name, options in value.items():
            if isinstance(options, FieldSpec) or (isinstance(options, dict) and "type" in options):
                wrapped[name] = options
            else:
                wrapped[name] = {"type": options}
        return wrapped


class ResourceDescriptor(BaseModel):
    """Route, naming and enabled operations of one resource."""

    model_config = ConfigDict(protected_namespaces=())

    route: str  # /users
    name: str  # user
    model_name: str  # User
    methods: list[Method] = []

    @field_validator("route")
    @classmethod
    def _no_item_placeholder(cls, value: str) -> str:
        last = value.rstrip("/").rsplit("/", 1)[-1]
        if last.startswith("{") and last.endswith("}"):
            raise ValueError(f"route must address the collection, got {value!r}")
        return value

    def has(self, method: Method) -> bool:
        return method in self.methods


def _coerce_tag(value: Any) -> Any:
    if isinstance(value, str) and value in _FIELD_TYPES:
        return _FIELD_TYPES[value]
    return value


def _coerce_element(value: Any) -> Any:
    if isinstance(value, dict) and "fields" in value:
        return Schema(**value)
    return _coerce_tag(value)
