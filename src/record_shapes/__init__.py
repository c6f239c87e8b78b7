"""Schema-shaped records: declared fields, typed defaults and validated writes."""

from .hashsets import (
    CollectionState,
    IndexOutOfRange,
    add_hash,
    clear_hash,
    get_hash,
    new_collection,
    size_hash,
)
from .instances import Instance, create, get_data, get_property, instantiate, set_property
from .leaf_setters import BOOLEAN, LIST, MAP, NUMBER, TEXT, TypeMismatch
from .population import populate
from .schema_registry import (
    Schema,
    SchemaDeclarationError,
    SchemaRegistry,
    UnknownSchemaError,
    collection_of,
    flatten_schema,
)

__all__ = [
    "BOOLEAN",
    "LIST",
    "MAP",
    "NUMBER",
    "TEXT",
    "CollectionState",
    "IndexOutOfRange",
    "Instance",
    "Schema",
    "SchemaDeclarationError",
    "SchemaRegistry",
    "TypeMismatch",
    "UnknownSchemaError",
    "add_hash",
    "clear_hash",
    "collection_of",
    "create",
    "flatten_schema",
    "get_data",
    "get_hash",
    "get_property",
    "instantiate",
    "new_collection",
    "populate",
    "set_property",
    "size_hash",
]
