"""
Exceptions raised by the schema compiler.

Only genuinely unexpected input aborts a compile call; unsupported
complex field types are dropped without raising.
"""

from typing import Any, Optional


class CompilerError(Exception):
    """Base exception for all compiler errors."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field

        error_parts = [message]
        if field is not None:
            error_parts.append(f"Field: {field}")

        super().__init__(" | ".join(error_parts))


class UnrecognizedTypeError(CompilerError):
    """Raised when a field's type tag is a scalar no mapping rule knows."""

    def __init__(self, type_tag: Any, field: Optional[str] = None):
        self.type_tag = type_tag
        super().__init__(f"Unrecognized type: {type_tag!r}", field=field)


class ResourceFileError(CompilerError):
    """Raised when a resource file cannot be read or does not validate."""
    pass
