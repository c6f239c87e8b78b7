"""Collection entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from record_shapes.schema_registry.schema_models import Schema


@dataclass(eq=False)
class CollectionState:
    """Growable list of data trees that all follow one element schema."""

    element_schema: Schema
    items: list[dict[str, Any]] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of stored elements."""
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)


def new_collection(element_schema: Schema) -> CollectionState:
    """Return an empty collection for `element_schema`."""
    return CollectionState(element_schema=element_schema)
