"""Resource file loader.

Reads a YAML or JSON resource file (JSON is parsed as YAML) into the
models the compiler consumes.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from swagger_compiler.errors import ResourceFileError
from swagger_compiler.schema.base import Method, ResourceDescriptor, Schema


class ResourceFile(BaseModel):
    """Contents of one resource file."""

    resource: ResourceDescriptor
    schema_: Schema | None = None
    definition: dict | None = None


def load_resource_file(file_path: Path) -> ResourceFile:
    """Parse a resource file into a ResourceFile."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceFileError(f"Cannot read {file_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ResourceFileError(f"Invalid YAML in {file_path}: {e}") from e

    if not isinstance(data, dict) or "resource" not in data:
        raise ResourceFileError(f"{file_path} has no 'resource' section")

    try:
        return ResourceFile(
            resource=data["resource"],
            schema_=data.get("schema"),
            definition=data.get("definition"),
        )
    except ValidationError as e:
        raise ResourceFileError(f"Invalid resource file {file_path}: {e}") from e


def parse_methods(value: str) -> list[Method]:
    """Parse a comma-separated method list like ``index,post,get``."""
    names = [m.strip().lower() for m in value.split(",") if m.strip()]
    try:
        return [Method(name) for name in names]
    except ValueError as e:
        raise ResourceFileError(f"Unknown method in {value!r}") from e
