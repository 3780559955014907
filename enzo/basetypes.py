"""Core enumerations, type aliases and a lightweight signal used across the engine."""

from __future__ import annotations

import enum
from typing import Any, Callable

Offset = int
"""Index of an element (point, vertex, primitive or global) within its owner."""

OpId = int
"""Unique identifier assigned to each node in the network."""

Vector3 = tuple[float, float, float]
Vector4 = tuple[float, float, float, float]


class AttributeOwner(enum.Enum):
    """The segment of geometry that owns an attribute."""

    POINT = enum.auto()
    VERTEX = enum.auto()
    PRIMITIVE = enum.auto()
    GLOBAL = enum.auto()


class AttributeType(enum.Enum):
    """Data types available to store attribute values in."""

    INT = enum.auto()
    FLOAT = enum.auto()
    LIST = enum.auto()
    VECTOR = enum.auto()
    BOOL = enum.auto()


class ParmType(enum.Enum):
    """Kinds of node parameters."""

    LIST_TERMINATOR = enum.auto()
    STRING = enum.auto()
    FLOAT = enum.auto()
    BOOL = enum.auto()
    XYZ = enum.auto()
    INT = enum.auto()
    TOGGLE = enum.auto()


class SocketIOType(enum.Enum):
    """Direction of a node socket."""

    INPUT = enum.auto()
    OUTPUT = enum.auto()


class Signal:
    """A list of callbacks invoked in connection order when the signal is emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``slot``; returns it so this can be used as a decorator."""
        self._slots.append(slot)
        return slot

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove every registration of ``slot``; unknown slots are ignored."""
        self._slots = [s for s in self._slots if s != slot]

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __call__(self, *args: Any) -> None:
        self.emit(*args)

    def __len__(self) -> int:
        return len(self._slots)