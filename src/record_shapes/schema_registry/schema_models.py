"""Schema and field spec entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from record_shapes.leaf_setters.leaf_kinds import LeafSetter


@dataclass(frozen=True)
class LeafField:
    """Field holding a primitive value governed by a leaf setter."""

    setter: LeafSetter


@dataclass(frozen=True)
class NestedField:
    """Field whose value is itself governed by another schema."""

    schema: Schema


@dataclass(frozen=True)
class CollectionField:
    """Field holding a homogeneous, growable list of element trees."""

    element_schema: Schema


FieldSpec = LeafField | NestedField | CollectionField


@dataclass(frozen=True, eq=False)
class Schema:
    """Immutable, named field map.

    Equality and hashing are by identity: two schemas with the same fields are
    still different schemas, which is what collection membership checks rely on.
    """

    name: str
    fields: Mapping[str, FieldSpec]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def field_names(self) -> tuple[str, ...]:
        """Return field names in declaration order."""
        return tuple(self.fields)

    def __repr__(self) -> str:
        return f"Schema(name={self.name!r}, fields={list(self.fields)!r})"

    # Schemas are shared; copying a data tree must keep pointing at the same one.
    def __copy__(self) -> Schema:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Schema:
        return self


@dataclass(frozen=True)
class CollectionDescriptor:
    """Declaration-time marker for a collection field."""

    element_schema: Schema


def collection_of(element_schema: Schema) -> CollectionDescriptor:
    """Declare a field as a collection of `element_schema` instances."""
    return CollectionDescriptor(element_schema=element_schema)


@dataclass(frozen=True)
class FlattenedField:
    """Flattened schema field definition."""

    path: str
    kind: str
    element_schema_name: str | None = None
