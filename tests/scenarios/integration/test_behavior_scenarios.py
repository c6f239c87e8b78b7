"""Scenario-style integration tests for core record behaviors."""

from __future__ import annotations

import pytest
from record_shapes import (
    BOOLEAN,
    LIST,
    MAP,
    NUMBER,
    TEXT,
    Schema,
    SchemaRegistry,
    TypeMismatch,
    add_hash,
    clear_hash,
    collection_of,
    create,
    get_data,
    get_hash,
    get_property,
    instantiate,
    new_collection,
    set_property,
    size_hash,
)
from record_shapes.hashsets import CollectionState
from record_shapes.schema_registry import CollectionField, NestedField


def _order_registry() -> SchemaRegistry:
    registry = SchemaRegistry()
    address = registry.define("address", {"address_1": TEXT, "address_2": TEXT, "city": TEXT})
    customer = registry.define(
        "customer", {"name": TEXT, "is_verified": BOOLEAN, "address": address}
    )
    registry.define(
        "order",
        {
            "total": NUMBER,
            "notes": LIST,
            "metadata": MAP,
            "customer": customer,
            "shipping_addresses": collection_of(address),
        },
    )
    return registry


def _key_shape(schema: Schema, data: dict) -> dict:
    shape: dict = {}
    for field_name, spec in schema.fields.items():
        if isinstance(spec, NestedField):
            shape[field_name] = _key_shape(spec.schema, data[field_name])
        elif isinstance(spec, CollectionField):
            collection: CollectionState = data[field_name]
            shape[field_name] = [
                _key_shape(collection.element_schema, item) for item in collection.items
            ]
        else:
            shape[field_name] = None
    assert set(data) == set(schema.fields)
    return shape


def test_default_address_exports_empty_strings() -> None:
    address = create(_order_registry().get("address"))

    assert get_data(address) == {"address_1": "", "address_2": "", "city": ""}


def test_set_address_line_is_reflected_in_export() -> None:
    address = create(_order_registry().get("address"))

    set_property(address, "address_1", "300 Test St.")

    assert get_data(address) == {"address_1": "300 Test St.", "address_2": "", "city": ""}


def test_unknown_field_write_leaves_export_unchanged() -> None:
    address = create(_order_registry().get("address"))
    set_property(address, "address_1", "300 Test St.")
    before = get_data(address)

    set_property(address, "kitties", "Meow")

    assert get_data(address) == before


@pytest.mark.parametrize(("raw", "expected"), [(False, 0), (True, 1)])
def test_boolean_field_reads_back_as_integer(raw: bool, expected: int) -> None:
    customer = create(_order_registry().get("customer"))

    set_property(customer, "is_verified", raw)

    assert get_property(customer, "is_verified") == expected


def test_collection_accounting_and_clear() -> None:
    address = _order_registry().get("address")
    collection = new_collection(address)

    add_hash(collection, create(address))
    add_hash(collection, create(address))

    assert size_hash(collection) == 2
    clear_hash(collection)
    assert size_hash(collection) == 0


def test_non_numeric_total_raises_and_keeps_previous_value() -> None:
    order = create(_order_registry().get("order"))
    set_property(order, "total", 25)

    with pytest.raises(TypeMismatch):
        set_property(order, "total", "not-a-number")

    assert get_property(order, "total") == 25


def test_shape_invariant_holds_after_every_mutation() -> None:
    registry = _order_registry()
    order_schema = registry.get("order")
    order = create(order_schema)
    _key_shape(order_schema, order.data)

    customer = get_property(order, "customer")
    set_property(customer, "name", "Ada")
    set_property(get_property(customer, "address"), "city", "London")
    set_property(order, "doesNotExist", 1)
    set_property(order, "customer", "flattened")
    with pytest.raises(TypeMismatch):
        set_property(order, "notes", "not-a-list")
    add_hash(get_property(order, "shipping_addresses"), create(registry.get("address")))
    add_hash(get_property(order, "shipping_addresses"), create(registry.get("customer")))

    _key_shape(order_schema, order.data)
    exported_items = get_data(order)["shipping_addresses"]
    assert size_hash(get_property(order, "shipping_addresses")) == len(exported_items) == 1


def test_round_trip_and_determinism() -> None:
    order_schema = _order_registry().get("order")

    first = instantiate(order_schema)
    second = instantiate(order_schema)

    assert _key_shape(order_schema, first) == _key_shape(order_schema, second)
    assert get_data(create(order_schema)) == {
        "total": 0,
        "notes": [],
        "metadata": {},
        "customer": {
            "name": "",
            "is_verified": 0,
            "address": {"address_1": "", "address_2": "", "city": ""},
        },
        "shipping_addresses": [],
    }


def test_fill_parent_through_nested_view_then_store_in_collection() -> None:
    registry = _order_registry()
    orders = new_collection(registry.get("order"))
    order = create(registry.get("order"))
    set_property(get_property(get_property(order, "customer"), "address"), "city", "Paris")

    add_hash(orders, order)
    set_property(get_property(get_property(order, "customer"), "address"), "city", "Rome")

    stored_customer = get_property(get_hash(orders, 0), "customer")
    assert get_property(get_property(stored_customer, "address"), "city") == "Paris"
