"""Default instantiator tests."""

from __future__ import annotations

from record_shapes.hashsets import CollectionState
from record_shapes.instances.default_instantiator import instantiate
from record_shapes.leaf_setters import BOOLEAN, LIST, MAP, NUMBER, TEXT
from record_shapes.schema_registry import (
    CollectionField,
    NestedField,
    Schema,
    SchemaRegistry,
    collection_of,
)


def _order_schema() -> Schema:
    registry = SchemaRegistry()
    address = registry.define("address", {"address_1": TEXT, "address_2": TEXT, "city": TEXT})
    customer = registry.define(
        "customer", {"name": TEXT, "is_verified": BOOLEAN, "address": address}
    )
    return registry.define(
        "order",
        {
            "total": NUMBER,
            "notes": LIST,
            "metadata": MAP,
            "customer": customer,
            "shipping_addresses": collection_of(address),
        },
    )


def _assert_shape(schema: Schema, data: dict) -> None:
    assert list(data) == list(schema.fields)
    for field_name, spec in schema.fields.items():
        if isinstance(spec, NestedField):
            _assert_shape(spec.schema, data[field_name])
        elif isinstance(spec, CollectionField):
            assert isinstance(data[field_name], CollectionState)
            assert data[field_name].element_schema is spec.element_schema


def test_instantiate_builds_all_defaults_tree() -> None:
    order = _order_schema()

    data = instantiate(order)

    assert data["total"] == 0
    assert data["notes"] == []
    assert data["metadata"] == {}
    assert data["customer"] == {
        "name": "",
        "is_verified": 0,
        "address": {"address_1": "", "address_2": "", "city": ""},
    }
    assert data["shipping_addresses"].count == 0
    assert data["shipping_addresses"].items == []


def test_instantiate_mirrors_schema_keys_at_every_depth() -> None:
    order = _order_schema()

    _assert_shape(order, instantiate(order))


def test_instantiate_returns_independent_trees() -> None:
    order = _order_schema()

    first = instantiate(order)
    second = instantiate(order)
    first["customer"]["address"]["city"] = "Springfield"
    first["notes"].append("fragile")

    assert second["customer"]["address"]["city"] == ""
    assert second["notes"] == []
    assert first["shipping_addresses"] is not second["shipping_addresses"]
