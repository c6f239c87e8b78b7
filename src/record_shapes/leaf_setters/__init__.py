"""Leaf setter exports."""

from .leaf_kinds import (
    BOOLEAN,
    LIST,
    MAP,
    NUMBER,
    TEXT,
    LeafKind,
    LeafSetter,
    TypeMismatch,
    setter_for,
)

__all__ = [
    "BOOLEAN",
    "LIST",
    "MAP",
    "NUMBER",
    "TEXT",
    "LeafKind",
    "LeafSetter",
    "TypeMismatch",
    "setter_for",
]
