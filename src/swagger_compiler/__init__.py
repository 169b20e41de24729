"""
swagger-compiler - Swagger documents from data model schemas.

Turns a data model schema and a resource descriptor into the
``definitions`` and ``paths`` of a Swagger 2.0 document.
"""

from .compiler.document import compile_resource
from .compiler.normalizer import TypeFallback, normalize_schema
from .compiler.types import map_property
from .errors import CompilerError, ResourceFileError, UnrecognizedTypeError
from .schema.base import FieldSpec, FieldType, Method, ResourceDescriptor, Schema

__version__ = "0.1.0"

__all__ = [
    'compile_resource',
    'normalize_schema',
    'map_property',
    'TypeFallback',
    'FieldSpec',
    'FieldType',
    'Method',
    'ResourceDescriptor',
    'Schema',
    'CompilerError',
    'ResourceFileError',
    'UnrecognizedTypeError',
]
