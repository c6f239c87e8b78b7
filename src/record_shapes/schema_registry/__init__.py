"""Schema registry exports."""

from .registry import (
    SchemaDeclarationError,
    SchemaRegistry,
    UnknownSchemaError,
    build_schema,
    resolve_field_spec,
)
from .schema_models import (
    CollectionDescriptor,
    CollectionField,
    FieldSpec,
    FlattenedField,
    LeafField,
    NestedField,
    Schema,
    collection_of,
)
from .schema_projection import flatten_schema

__all__ = [
    "CollectionDescriptor",
    "CollectionField",
    "FieldSpec",
    "FlattenedField",
    "LeafField",
    "NestedField",
    "Schema",
    "SchemaDeclarationError",
    "SchemaRegistry",
    "UnknownSchemaError",
    "build_schema",
    "collection_of",
    "flatten_schema",
    "resolve_field_spec",
]
