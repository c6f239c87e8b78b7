"""Explicit schema registries and field spec resolution."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from record_shapes.leaf_setters.leaf_kinds import LeafSetter

from .schema_models import (
    CollectionDescriptor,
    CollectionField,
    FieldSpec,
    LeafField,
    NestedField,
    Schema,
)

_LOGGER = logging.getLogger("record_shapes.schema_registry")
_LOGGER.addHandler(logging.NullHandler())

FieldDeclaration = LeafSetter | Schema | CollectionDescriptor | FieldSpec
FieldMapSource = Mapping[str, FieldDeclaration] | Callable[[], Mapping[str, FieldDeclaration]]


class SchemaDeclarationError(Exception):
    """Raised when a schema declaration is invalid."""


class UnknownSchemaError(KeyError):
    """Raised when a registry has no schema with the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


def resolve_field_spec(field_name: str, declaration: Any) -> FieldSpec:
    """Turn one field declaration into its explicit field spec."""
    if isinstance(declaration, (LeafField, NestedField, CollectionField)):
        return declaration
    if isinstance(declaration, LeafSetter):
        return LeafField(setter=declaration)
    if isinstance(declaration, Schema):
        return NestedField(schema=declaration)
    if isinstance(declaration, CollectionDescriptor):
        return CollectionField(element_schema=declaration.element_schema)
    raise SchemaDeclarationError(
        f"Field '{field_name}' must be a leaf setter, a schema or a collection, "
        f"got {type(declaration).__name__}."
    )


def build_schema(name: str, fields: FieldMapSource) -> Schema:
    """Resolve a field map into an unregistered schema."""
    if not isinstance(name, str) or not name.strip():
        raise SchemaDeclarationError("Schema name must be a non-empty string.")
    declared = fields() if callable(fields) else fields
    if not isinstance(declared, Mapping):
        raise SchemaDeclarationError(f"Schema '{name}' must declare a mapping of fields.")

    resolved: dict[str, FieldSpec] = {}
    for field_name, declaration in declared.items():
        if not isinstance(field_name, str) or not field_name.strip():
            raise SchemaDeclarationError(f"Schema '{name}' has an empty or non-string field name.")
        resolved[field_name] = resolve_field_spec(field_name, declaration)
    return Schema(name=name, fields=resolved)


class SchemaRegistry:
    """Named collection of schemas for one domain.

    Registries are plain values, so several independent ones can coexist.
    A name can only be defined once.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, Schema] = {}

    def define(self, name: str, fields: FieldMapSource) -> Schema:
        """Resolve and register a schema, returning it."""
        if name in self._schemas:
            raise SchemaDeclarationError(f"Schema '{name}' is already defined.")
        schema = build_schema(name, fields)
        self._schemas[name] = schema
        _LOGGER.debug("Registered schema %s with fields %s", name, list(schema.fields))
        return schema

    def get(self, name: str) -> Schema:
        """Return the schema registered as `name`."""
        try:
            return self._schemas[name]
        except KeyError as exc:
            raise UnknownSchemaError(f"Unknown schema: {name}") from exc

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)
