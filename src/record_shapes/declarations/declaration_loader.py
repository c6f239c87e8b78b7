"""Schema declaration file loader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from record_shapes.leaf_setters.leaf_kinds import LeafKind, setter_for
from record_shapes.schema_registry.registry import SchemaDeclarationError, SchemaRegistry
from record_shapes.schema_registry.schema_models import (
    CollectionField,
    FieldSpec,
    LeafField,
    NestedField,
)

_LEAF_KIND_NAMES = frozenset(kind.value for kind in LeafKind)
_COLLECTION_KEY = "collection"


class DeclarationFileError(Exception):
    """Raised when a schema declaration file cannot be read or parsed."""


def load_registry(declaration_path: Path | str) -> SchemaRegistry:
    """Load a declaration file and return a registry holding its schemas."""
    path = Path(declaration_path)
    if not path.exists():
        raise DeclarationFileError(f"Schema declaration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DeclarationFileError(f"Failed to read schema declaration file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DeclarationFileError(f"Failed to parse schema declaration file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise DeclarationFileError("Schema declaration root must be a mapping.")
    return parse_registry(parsed)


def parse_registry(document: Mapping[str, Any]) -> SchemaRegistry:
    """Build a registry from an already parsed declaration document.

    Schema references may point forward; schemas are defined dependencies
    first. Unresolved names and reference cycles are rejected.
    """
    declarations = _require_mapping(document.get("schemas"), "schemas")
    field_maps: dict[str, Mapping[str, Any]] = {}
    for schema_name, fields in declarations.items():
        if not isinstance(schema_name, str) or not schema_name.strip():
            raise SchemaDeclarationError("Schema names must be non-empty strings.")
        field_maps[schema_name] = _require_mapping(fields, f"schemas.{schema_name}")

    registry = SchemaRegistry()
    for schema_name in field_maps:
        _define_with_dependencies(schema_name, field_maps, registry, resolving=())
    return registry


def _define_with_dependencies(
    schema_name: str,
    field_maps: Mapping[str, Mapping[str, Any]],
    registry: SchemaRegistry,
    *,
    resolving: tuple[str, ...],
) -> None:
    if schema_name in registry:
        return
    if schema_name in resolving:
        cycle = " -> ".join((*resolving, schema_name))
        raise SchemaDeclarationError(f"Schema reference cycle detected: {cycle}")

    for reference in _referenced_schemas(schema_name, field_maps[schema_name]):
        if reference not in field_maps:
            raise SchemaDeclarationError(
                f"Schema '{schema_name}' references undeclared schema '{reference}'."
            )
        _define_with_dependencies(
            reference, field_maps, registry, resolving=(*resolving, schema_name)
        )

    resolved = {
        field_name: _resolve_declaration(schema_name, field_name, declaration, registry)
        for field_name, declaration in field_maps[schema_name].items()
    }
    registry.define(schema_name, resolved)


def _referenced_schemas(schema_name: str, fields: Mapping[str, Any]) -> list[str]:
    references: list[str] = []
    for field_name, declaration in fields.items():
        target = _reference_target(schema_name, field_name, declaration)
        if target is not None:
            references.append(target)
    return references


def _reference_target(schema_name: str, field_name: Any, declaration: Any) -> str | None:
    if isinstance(declaration, str):
        kind_name = declaration.strip()
        return None if kind_name in _LEAF_KIND_NAMES else kind_name
    if isinstance(declaration, Mapping):
        if set(declaration) != {_COLLECTION_KEY}:
            raise SchemaDeclarationError(
                f"schemas.{schema_name}.{field_name} mapping must only set '{_COLLECTION_KEY}'."
            )
        return _require_non_empty_string(
            declaration[_COLLECTION_KEY], f"schemas.{schema_name}.{field_name}.collection"
        )
    raise SchemaDeclarationError(
        f"schemas.{schema_name}.{field_name} must be a kind name, a schema name "
        f"or a collection mapping."
    )


def _resolve_declaration(
    schema_name: str, field_name: Any, declaration: Any, registry: SchemaRegistry
) -> FieldSpec:
    target = _reference_target(schema_name, field_name, declaration)
    if isinstance(declaration, Mapping):
        return CollectionField(element_schema=registry.get(str(target)))
    if target is None:
        return LeafField(setter=setter_for(declaration.strip()))
    return NestedField(schema=registry.get(target))


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaDeclarationError(f"Declaration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise SchemaDeclarationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise SchemaDeclarationError(f"{field_name} must not be empty.")
    return stripped
