"""Leaf value coercion for primitive field kinds."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off", ""})
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class LeafKind(str, Enum):
    """Supported primitive value kinds."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    MAP = "map"
    LIST = "list"


class TypeMismatch(TypeError):
    """Raised when a value cannot be interpreted as the declared leaf kind."""

    def __init__(self, kind: LeafKind, value: object, field_name: str | None = None) -> None:
        self.kind = kind
        self.value = value
        self.field_name = field_name
        target = f"field '{field_name}'" if field_name else "value"
        super().__init__(f"Cannot use {value!r} for {kind.value} {target}.")

    def for_field(self, field_name: str) -> TypeMismatch:
        """Return a copy of this error bound to a field name."""
        return TypeMismatch(self.kind, self.value, field_name)


@dataclass(frozen=True)
class LeafSetter:
    """Validator and default factory for one primitive kind."""

    kind: LeafKind
    _coerce: Callable[[Any], Any]
    _default: Callable[[], Any]

    def coerce(self, raw_value: Any) -> Any:
        """Return the normalized value or raise TypeMismatch."""
        return self._coerce(raw_value)

    def default(self) -> Any:
        """Return a fresh zero value for this kind."""
        return self._default()


def _is_plain_number(value: object) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if _is_plain_number(value):
        return str(value)
    raise TypeMismatch(LeafKind.TEXT, value)


def _coerce_number(value: Any) -> int | float:
    if isinstance(value, bool):
        raise TypeMismatch(LeafKind.NUMBER, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _finite(value, value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise TypeMismatch(LeafKind.NUMBER, value)
        if value == value.to_integral_value():
            return int(value)
        return _finite(float(value), value)
    if isinstance(value, str):
        stripped = value.strip()
        if _INTEGER_PATTERN.fullmatch(stripped):
            return int(stripped)
        if _DECIMAL_PATTERN.fullmatch(stripped):
            return _finite(float(stripped), value)
    raise TypeMismatch(LeafKind.NUMBER, value)


def _finite(number: float, raw_value: object) -> float:
    if not math.isfinite(number):
        raise TypeMismatch(LeafKind.NUMBER, raw_value)
    return number


def _coerce_boolean(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int) and value in (0, 1):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_WORDS:
            return 1
        if lowered in _FALSE_WORDS:
            return 0
    raise TypeMismatch(LeafKind.BOOLEAN, value)


def _coerce_map(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeMismatch(LeafKind.MAP, value)


def _coerce_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    raise TypeMismatch(LeafKind.LIST, value)


TEXT = LeafSetter(LeafKind.TEXT, _coerce_text, str)
NUMBER = LeafSetter(LeafKind.NUMBER, _coerce_number, int)
BOOLEAN = LeafSetter(LeafKind.BOOLEAN, _coerce_boolean, int)
MAP = LeafSetter(LeafKind.MAP, _coerce_map, dict)
LIST = LeafSetter(LeafKind.LIST, _coerce_list, list)

_SETTERS_BY_KIND: Mapping[LeafKind, LeafSetter] = {
    setter.kind: setter for setter in (TEXT, NUMBER, BOOLEAN, MAP, LIST)
}


def setter_for(kind: LeafKind | str) -> LeafSetter:
    """Return the shared setter for a kind name."""
    return _SETTERS_BY_KIND[LeafKind(kind)]
