"""Attribute based geometry container exchanged and modified by nodes."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from enzo.attribute import Attribute, AttributeHandle
from enzo.basetypes import AttributeOwner, AttributeType, Offset, Vector3

_VERTEX_COUNT = "vertexCount"
_CLOSED = "closed"
_POINT = "point"
_POSITION = "P"


class Geometry:
    """Points, vertices and primitives stored as columns of attributes.

    A new geometry holds the intrinsic attributes needed to describe a mesh:
    ``P`` on points, ``point`` on vertices, and ``vertexCount`` and
    ``closed`` on primitives. Use the helper methods rather than editing
    these attributes directly.
    """

    def __init__(self) -> None:
        self._stores: dict[AttributeOwner, list[Attribute]] = {
            owner: [] for owner in AttributeOwner
        }
        self._solo_points: set[Offset] = set()
        self._vertex_prims: list[Offset] = []
        self._prim_starts: list[Offset] = []
        self._prim_starts_dirty = True
        self._prim_starts_lock = threading.Lock()

        self._vertex_count_prim = self.add_int_attribute(
            AttributeOwner.PRIMITIVE, _VERTEX_COUNT
        )
        self._closed_prim = self.add_bool_attribute(AttributeOwner.PRIMITIVE, _CLOSED)
        self._point_offset_vert = self.add_int_attribute(AttributeOwner.VERTEX, _POINT)
        self._pos_point = self.add_vector3_attribute(AttributeOwner.POINT, _POSITION)

    def _bind_intrinsic_handles(self) -> None:
        def handle(owner: AttributeOwner, name: str) -> AttributeHandle:
            attribute = self.attribute_by_name(owner, name)
            if attribute is None:
                raise RuntimeError(f"intrinsic attribute missing: {name}")
            return AttributeHandle(attribute)

        self._vertex_count_prim = handle(AttributeOwner.PRIMITIVE, _VERTEX_COUNT)
        self._closed_prim = handle(AttributeOwner.PRIMITIVE, _CLOSED)
        self._point_offset_vert = handle(AttributeOwner.VERTEX, _POINT)
        self._pos_point = handle(AttributeOwner.POINT, _POSITION)

    def copy(self) -> Geometry:
        """Return a deep copy whose attributes have their own storage."""
        other = Geometry.__new__(Geometry)
        other._stores = {
            owner: [attribute.copy() for attribute in store]
            for owner, store in self._stores.items()
        }
        other._solo_points = set(self._solo_points)
        other._vertex_prims = list(self._vertex_prims)
        other._prim_starts = list(self._prim_starts)
        other._prim_starts_dirty = self._prim_starts_dirty
        other._prim_starts_lock = threading.Lock()
        other._bind_intrinsic_handles()
        return other

    def __copy__(self) -> Geometry:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Geometry:
        return self.copy()

    # attributes

    def _add_attribute(
        self, owner: AttributeOwner, name: str, type: AttributeType
    ) -> AttributeHandle:
        attribute = Attribute(name, type)
        self._stores[owner].append(attribute)
        return AttributeHandle(attribute)

    def add_int_attribute(self, owner: AttributeOwner, name: str) -> AttributeHandle:
        """Add an integer attribute and return a handle to it."""
        return self._add_attribute(owner, name, AttributeType.INT)

    def add_bool_attribute(self, owner: AttributeOwner, name: str) -> AttributeHandle:
        """Add a boolean attribute and return a handle to it."""
        return self._add_attribute(owner, name, AttributeType.BOOL)

    def add_vector3_attribute(
        self, owner: AttributeOwner, name: str
    ) -> AttributeHandle:
        """Add a 3D vector attribute and return a handle to it."""
        return self._add_attribute(owner, name, AttributeType.VECTOR)

    def attribute_by_name(
        self, owner: AttributeOwner, name: str
    ) -> Optional[Attribute]:
        """Return the first attribute of ``owner`` called ``name``, or None."""
        return next(
            (a for a in self._stores[owner] if a.name == name),
            None,
        )

    def num_attributes(self, owner: AttributeOwner) -> int:
        """Return how many attributes ``owner`` has."""
        return len(self._stores[owner])

    def attribute_by_index(self, owner: AttributeOwner, index: int) -> Attribute:
        """Return the attribute of ``owner`` at position ``index``."""
        store = self._stores[owner]
        if not 0 <= index < len(store):
            raise IndexError(
                f"Attribute index out of range: {index} max size: {len(store)}"
            )
        return store[index]

    def attributes(self, owner: AttributeOwner) -> Iterator[Attribute]:
        """Iterate over the attributes of ``owner`` in creation order."""
        return iter(list(self._stores[owner]))

    # construction

    def add_face(self, point_offsets: Iterable[Offset], closed: bool = True) -> None:
        """Add a primitive built from the given point offsets."""
        offsets: Sequence[Offset] = list(point_offsets)
        prim_num = len(self._vertex_count_prim)
        for point_offset in offsets:
            self._point_offset_vert.append(point_offset)
            self._vertex_prims.append(prim_num)
            self._solo_points.discard(point_offset)
        self._vertex_count_prim.append(len(offsets))
        self._closed_prim.append(closed)
        self._prim_starts_dirty = True

    def add_point(self, pos: Vector3) -> None:
        """Add a point at ``pos``; it stays solo until a face uses it."""
        self._pos_point.append(pos)
        self._solo_points.add(len(self._pos_point) - 1)

    def solo_points(self) -> Iterator[Offset]:
        """Iterate over the offsets of points not used by any face, in order."""
        return iter(sorted(self._solo_points))

    def set_point_pos(self, offset: Offset, pos: Vector3) -> None:
        """Move the point at ``offset`` to ``pos``."""
        self._pos_point[offset] = pos

    # queries

    def prim_start_vertex(self, prim_offset: Offset) -> Offset:
        """Return the offset of the first vertex of a primitive."""
        if self._prim_starts_dirty:
            with self._prim_starts_lock:
                if self._prim_starts_dirty:
                    self.compute_prim_start_vertices()
        if not 0 <= prim_offset < len(self._prim_starts):
            raise IndexError(f"primitive offset out of range: {prim_offset}")
        return self._prim_starts[prim_offset]

    def compute_prim_start_vertices(self) -> None:
        """Recompute the first vertex offset of every primitive."""
        starts: list[Offset] = []
        start = 0
        for count in self._vertex_count_prim.values():
            starts.append(start)
            start += count
        self._prim_starts = starts
        self._prim_starts_dirty = False

    def pos_from_vert(self, vertex_offset: Offset) -> Vector3:
        """Return the position of the point a vertex refers to."""
        return self._pos_point[self._point_offset_vert[vertex_offset]]

    def point_pos(self, point_offset: Offset) -> Vector3:
        """Return the position of a point."""
        return self._pos_point[point_offset]

    def prim_vert_count(self, prim_offset: Offset) -> int:
        """Return the number of vertices in a primitive."""
        return self._vertex_count_prim[prim_offset]

    def vertex_prim(self, vertex_offset: Offset) -> Offset:
        """Return the primitive that owns a vertex."""
        if not 0 <= vertex_offset < len(self._vertex_prims):
            raise IndexError(f"vertex offset out of range: {vertex_offset}")
        return self._vertex_prims[vertex_offset]

    def is_closed(self, prim_offset: Offset) -> bool:
        """Return whether a primitive is closed; open ones are curves."""
        return self._closed_prim[prim_offset]

    @property
    def num_prims(self) -> int:
        return len(self._vertex_count_prim)

    @property
    def num_verts(self) -> int:
        return len(self._point_offset_vert)

    @property
    def num_points(self) -> int:
        return len(self._pos_point)

    @property
    def num_solo_points(self) -> int:
        return len(self._solo_points)

    def __repr__(self) -> str:
        return (
            f"Geometry(points={self.num_points}, verts={self.num_verts}, "
            f"prims={self.num_prims})"
        )