"""Instance creation, property access and export."""

from __future__ import annotations

import copy
import logging
from typing import Any

from record_shapes.hashsets.collection_models import CollectionState
from record_shapes.leaf_setters.leaf_kinds import TypeMismatch
from record_shapes.schema_registry.schema_models import (
    CollectionField,
    LeafField,
    NestedField,
    Schema,
)

from .default_instantiator import instantiate
from .instance_models import Instance

_LOGGER = logging.getLogger("record_shapes.instances")
_LOGGER.addHandler(logging.NullHandler())


def create(schema: Schema) -> Instance:
    """Create an instance holding the schema's default tree."""
    return Instance(schema=schema, data=instantiate(schema))


def set_property(instance: Instance, field_name: str, raw_value: Any) -> None:
    """Validate and store one field value.

    Leaf values are coerced and raise TypeMismatch when rejected, leaving the
    tree untouched. Unknown fields, nested fields and foreign collections are
    ignored without raising.
    """
    spec = instance.schema.fields.get(field_name)
    if spec is None:
        _LOGGER.warning("Ignoring write to unknown field %s.%s", instance.schema.name, field_name)
        return

    if isinstance(spec, LeafField):
        try:
            coerced = spec.setter.coerce(raw_value)
        except TypeMismatch as exc:
            raise exc.for_field(field_name) from exc
        instance.data[field_name] = coerced
    elif isinstance(spec, CollectionField):
        _assign_collection(instance, field_name, spec, raw_value)
    elif isinstance(spec, NestedField):
        _LOGGER.warning(
            "Ignoring direct write to nested field %s.%s", instance.schema.name, field_name
        )


def _assign_collection(
    instance: Instance, field_name: str, spec: CollectionField, raw_value: Any
) -> None:
    if (
        not isinstance(raw_value, CollectionState)
        or raw_value.element_schema is not spec.element_schema
    ):
        _LOGGER.warning(
            "Ignoring non-matching collection value for %s.%s",
            instance.schema.name,
            field_name,
        )
        return
    stored: CollectionState = instance.data[field_name]
    stored.items[:] = copy.deepcopy(raw_value.items)


def get_property(instance: Instance, field_name: str) -> Any:
    """Return a leaf value, a nested view or the stored collection.

    Nested views share storage with `instance`; unknown fields return None.
    """
    spec = instance.schema.fields.get(field_name)
    if spec is None:
        return None
    if isinstance(spec, NestedField):
        return Instance(schema=spec.schema, data=instance.data[field_name])
    return instance.data[field_name]


def get_data(instance: Instance) -> Any:
    """Export the instance as plain dicts, lists and scalars.

    A schema made of a single collection field exports as that collection's
    item list rather than a one-key mapping.
    """
    fields = instance.schema.fields
    if len(fields) == 1:
        field_name, spec = next(iter(fields.items()))
        if isinstance(spec, CollectionField):
            return _export_collection(instance.data[field_name])
    return _export_tree(instance.schema, instance.data)


def _export_tree(schema: Schema, data: dict[str, Any]) -> dict[str, Any]:
    exported: dict[str, Any] = {}
    for field_name, spec in schema.fields.items():
        value = data[field_name]
        if isinstance(spec, NestedField):
            exported[field_name] = _export_tree(spec.schema, value)
        elif isinstance(spec, CollectionField):
            exported[field_name] = _export_collection(value)
        else:
            exported[field_name] = copy.deepcopy(value)
    return exported


def _export_collection(collection: CollectionState) -> list[dict[str, Any]]:
    return [_export_tree(collection.element_schema, item) for item in collection.items]
