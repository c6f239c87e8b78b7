"""Collection engine exports."""

from .collection_models import CollectionState, new_collection
from .collection_operations import IndexOutOfRange, add_hash, clear_hash, get_hash, size_hash

__all__ = [
    "CollectionState",
    "IndexOutOfRange",
    "add_hash",
    "clear_hash",
    "get_hash",
    "new_collection",
    "size_hash",
]
