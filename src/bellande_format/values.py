"""Value types for Bellande documents."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Union


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VInteger:
    value: int  # signed 64-bit range


@dataclass(slots=True)
class VFloat:
    value: float

    def __eq__(self, other: object) -> bool:
        # NaN equals NaN so parsed trees compare equal to what was written
        if other.__class__ is not self.__class__:
            return NotImplemented
        if math.isnan(self.value) and math.isnan(other.value):
            return True
        return self.value == other.value


@dataclass(slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


class _NullType:
    """Singleton for the ``null`` literal."""

    _instance: _NullType | None = None

    def __new__(cls) -> _NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __str__(self) -> str:
        return "null"

    def __bool__(self) -> bool:
        return False


Null = _NullType()


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VList:
    items: list[Value] = field(default_factory=list)


@dataclass(slots=True)
class VMap:
    # dict keeps insertion order, which the serializer relies on
    entries: dict[str, Value] = field(default_factory=dict)


Value = Union[VString, VInteger, VFloat, VBool, _NullType, VList, VMap]


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------

class ValueKind(Enum):
    String = auto()
    Integer = auto()
    Float = auto()
    Boolean = auto()
    Null = auto()
    List = auto()
    Map = auto()


_KINDS: dict[type, ValueKind] = {
    VString: ValueKind.String,
    VInteger: ValueKind.Integer,
    VFloat: ValueKind.Float,
    VBool: ValueKind.Boolean,
    _NullType: ValueKind.Null,
    VList: ValueKind.List,
    VMap: ValueKind.Map,
}


def kind_of(value: Value) -> ValueKind:
    try:
        return _KINDS[type(value)]
    except KeyError:
        raise TypeError(f"not a document value: {value!r}") from None


def is_container(value: Value) -> bool:
    return isinstance(value, (VList, VMap))


def is_scalar(value: Value) -> bool:
    return type(value) in _KINDS and not is_container(value)


# ---------------------------------------------------------------------------
# Python bridges
# ---------------------------------------------------------------------------

def from_python(obj: Any) -> Value:
    """Build a Value tree from plain Python data.

    ``None`` → Null, ``bool`` → VBool, ``int`` → VInteger, ``float`` → VFloat,
    ``str`` → VString, list/tuple → VList, dict → VMap (keys must be str).
    Existing Values are returned unchanged.
    """
    if type(obj) in _KINDS:
        return obj
    if obj is None:
        return Null
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, int):
        return VInteger(obj)
    if isinstance(obj, float):
        return VFloat(obj)
    if isinstance(obj, str):
        return VString(obj)
    if isinstance(obj, (list, tuple)):
        return VList([from_python(item) for item in obj])
    if isinstance(obj, dict):
        entries: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"map keys must be str, got {type(key).__name__}")
            entries[key] = from_python(item)
        return VMap(entries)
    raise TypeError(f"cannot convert {type(obj).__name__} to a document value")


def to_python(value: Value) -> Any:
    """Inverse of :func:`from_python`."""
    if isinstance(value, _NullType):
        return None
    if isinstance(value, VList):
        return [to_python(item) for item in value.items]
    if isinstance(value, VMap):
        return {key: to_python(item) for key, item in value.entries.items()}
    if isinstance(value, (VString, VInteger, VFloat, VBool)):
        return value.value
    raise TypeError(f"not a document value: {value!r}")
