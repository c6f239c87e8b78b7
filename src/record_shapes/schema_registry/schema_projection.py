"""Schema flattening service."""

from __future__ import annotations

from .schema_models import CollectionField, FlattenedField, LeafField, NestedField, Schema


def flatten_schema(schema: Schema) -> list[FlattenedField]:
    """Return deterministic flattened fields in declaration order."""
    fields: list[FlattenedField] = []
    _flatten(schema, prefix="", fields=fields)
    return fields


def _flatten(schema: Schema, *, prefix: str, fields: list[FlattenedField]) -> None:
    for field_name, spec in schema.fields.items():
        path = field_name if not prefix else f"{prefix}.{field_name}"
        if isinstance(spec, LeafField):
            fields.append(FlattenedField(path=path, kind=spec.setter.kind.value))
        elif isinstance(spec, NestedField):
            _flatten(spec.schema, prefix=path, fields=fields)
        elif isinstance(spec, CollectionField):
            fields.append(
                FlattenedField(
                    path=path,
                    kind="collection",
                    element_schema_name=spec.element_schema.name,
                )
            )
