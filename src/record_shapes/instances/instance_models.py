"""Instance entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from record_shapes.schema_registry.schema_models import Schema


@dataclass(frozen=True, eq=False)
class Instance:
    """A schema paired with the mutable data tree it governs.

    The pairing is fixed; the tree is mutated in place. Instances returned for
    nested fields and collection elements share their tree with the owner.
    """

    schema: Schema
    data: dict[str, Any]
