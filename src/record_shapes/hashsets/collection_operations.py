"""Collection append, size, clear and indexed read."""

from __future__ import annotations

import copy
import logging

from record_shapes.instances.instance_models import Instance

from .collection_models import CollectionState

_LOGGER = logging.getLogger("record_shapes.hashsets")
_LOGGER.addHandler(logging.NullHandler())


class IndexOutOfRange(IndexError):
    """Raised when a collection index does not address a stored element."""


def add_hash(collection: CollectionState, element: Instance) -> None:
    """Append a deep copy of `element` when it follows the element schema.

    Elements of any other schema are ignored without raising.
    """
    if element.schema is not collection.element_schema:
        _LOGGER.warning(
            "Ignoring %s element for collection of %s",
            element.schema.name,
            collection.element_schema.name,
        )
        return
    collection.items.append(copy.deepcopy(element.data))


def size_hash(collection: CollectionState) -> int:
    """Return the number of stored elements."""
    return collection.count


def clear_hash(collection: CollectionState) -> None:
    """Drop every stored element."""
    collection.items.clear()


def get_hash(collection: CollectionState, index: int) -> Instance:
    """Return a view over the element stored at `index`."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise IndexOutOfRange(f"Collection index must be an integer, got {index!r}.")
    if not 0 <= index < collection.count:
        raise IndexOutOfRange(
            f"Index {index} is out of range for collection of {collection.count} "
            f"{collection.element_schema.name} elements."
        )
    return Instance(schema=collection.element_schema, data=collection.items[index])
