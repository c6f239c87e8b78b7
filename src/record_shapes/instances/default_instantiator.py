"""Default data tree construction."""

from __future__ import annotations

from typing import Any

from record_shapes.hashsets.collection_models import new_collection
from record_shapes.schema_registry.schema_models import (
    CollectionField,
    LeafField,
    NestedField,
    Schema,
)


def instantiate(schema: Schema) -> dict[str, Any]:
    """Return a fresh all-defaults data tree for `schema`."""
    data: dict[str, Any] = {}
    for field_name, spec in schema.fields.items():
        if isinstance(spec, LeafField):
            data[field_name] = spec.setter.default()
        elif isinstance(spec, NestedField):
            data[field_name] = instantiate(spec.schema)
        elif isinstance(spec, CollectionField):
            data[field_name] = new_collection(spec.element_schema)
    return data
