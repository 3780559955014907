"""Typed per-element attribute storage and the handles that read and write it."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Callable

from enzo.basetypes import AttributeType

_TYPE_SIZES: dict[AttributeType, int] = {
    AttributeType.INT: 1,
    AttributeType.FLOAT: 1,
    AttributeType.VECTOR: 3,
    AttributeType.BOOL: 1,
}


def _to_vector3(value: Any) -> tuple[float, float, float]:
    components = tuple(float(c) for c in value)
    if len(components) != 3:
        raise ValueError(f"vector value must have 3 components, got {len(components)}")
    return components  # type: ignore[return-value]


_COERCERS: dict[AttributeType, Callable[[Any], Any]] = {
    AttributeType.INT: int,
    AttributeType.FLOAT: float,
    AttributeType.VECTOR: _to_vector3,
    AttributeType.BOOL: bool,
}

_ZEROS: dict[AttributeType, Any] = {
    AttributeType.INT: 0,
    AttributeType.FLOAT: 0.0,
    AttributeType.VECTOR: (0.0, 0.0, 0.0),
    AttributeType.BOOL: False,
}


class Attribute:
    """A named, strongly typed column of geometry data.

    Values are read and written through :class:`AttributeHandle` or
    :class:`AttributeHandleRO`, which share the attribute's storage.
    """

    def __init__(self, name: str, type: AttributeType) -> None:
        if type not in _TYPE_SIZES:
            raise ValueError(
                f"Type {type.name} was not properly accounted for in Attribute constructor"
            )
        self._name = name
        self._type = type
        self._type_size = _TYPE_SIZES[type]
        self._store: list[Any] = []
        self.private = False
        self.hidden = False
        self.read_only = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> AttributeType:
        return self._type

    @property
    def type_size(self) -> int:
        """Number of components in the stored type (vectors have 3)."""
        return self._type_size

    def __len__(self) -> int:
        return len(self._store)

    def copy(self) -> Attribute:
        """Return a deep copy with its own storage."""
        other = Attribute(self._name, self._type)
        other.private = self.private
        other.hidden = self.hidden
        other.read_only = self.read_only
        other._store = list(self._store)
        return other

    def resize(self, size: int) -> None:
        """Change the number of stored elements, padding with zero values."""
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        current = len(self._store)
        if size < current:
            del self._store[size:]
        else:
            self._store.extend([_ZEROS[self._type]] * (size - current))

    def _coerce(self, value: Any) -> Any:
        return _COERCERS[self._type](value)

    def __repr__(self) -> str:
        return f"Attribute(name={self._name!r}, type={self._type.name}, size={len(self)})"


class AttributeHandleRO:
    """Read-only typed view of an attribute's values."""

    def __init__(self, attribute: Attribute) -> None:
        self._attribute = attribute
        self._data = attribute._store

    @property
    def type(self) -> AttributeType:
        return self._attribute.type

    @property
    def name(self) -> str:
        return self._attribute.name

    @property
    def attribute(self) -> Attribute:
        return self._attribute

    def values(self) -> list[Any]:
        """Return a copy of every stored value."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._data))

    def _check(self, offset: int) -> None:
        if not 0 <= offset < len(self._data):
            raise IndexError(
                f"offset {offset} out of range for attribute: {self.name}"
            )

    def __getitem__(self, offset: int) -> Any:
        self._check(offset)
        return self._data[offset]


class AttributeHandle(AttributeHandleRO):
    """Read-write typed view of an attribute's values."""

    def __init__(self, attribute: Attribute) -> None:
        super().__init__(attribute)

    def append(self, value: Any) -> None:
        """Add an element to the end of the attribute."""
        self._data.append(self._attribute._coerce(value))

    def reserve(self, capacity: int) -> None:
        """Hint that ``capacity`` elements will be stored; lists grow on demand."""
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")

    def values(self) -> list[Any]:
        """Return a copy of every stored value."""
        return super().values()

    def __len__(self) -> int:
        return super().__len__()

    def __getitem__(self, offset: int) -> Any:
        return super().__getitem__(offset)

    def __setitem__(self, offset: int, value: Any) -> None:
        self._check(offset)
        self._data[offset] = self._attribute._coerce(value)