"""Apply plain value trees to instances through the validating accessors."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from record_shapes.hashsets.collection_operations import add_hash
from record_shapes.instances.instance_accessors import create, get_property, set_property
from record_shapes.instances.instance_models import Instance
from record_shapes.schema_registry.schema_models import CollectionField, NestedField

_LOGGER = logging.getLogger("record_shapes.population")
_LOGGER.addHandler(logging.NullHandler())


def populate(instance: Instance, values: Mapping[str, Any]) -> Instance:
    """Write every known key of `values` into `instance` and return it.

    Leaf values go through set_property, so a rejected value raises
    TypeMismatch. Mappings fill nested fields in place. Sequences append one
    element per entry to collection fields.
    """
    for field_name, value in values.items():
        spec = instance.schema.fields.get(field_name)
        if isinstance(spec, NestedField) and isinstance(value, Mapping):
            populate(get_property(instance, field_name), value)
        elif isinstance(spec, CollectionField) and _is_entry_sequence(value):
            collection = get_property(instance, field_name)
            for entry in value:
                if not isinstance(entry, Mapping):
                    _LOGGER.warning(
                        "Skipping non-mapping entry for collection %s.%s",
                        instance.schema.name,
                        field_name,
                    )
                    continue
                element = populate(create(spec.element_schema), entry)
                add_hash(collection, element)
        else:
            set_property(instance, field_name, value)
    return instance


def _is_entry_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
