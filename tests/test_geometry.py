import pytest

from enzo.basetypes import AttributeOwner, AttributeType
from enzo.geometry import Geometry


def _quad_and_tri() -> Geometry:
    geo = Geometry()
    for pos in [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0), (2, 2, 2)]:
        geo.add_point(pos)
    geo.add_face([0, 1, 2, 3])
    geo.add_face([1, 2, 4], closed=False)
    return geo


def test_intrinsic_attributes():
    geo = Geometry()
    assert geo.num_attributes(AttributeOwner.POINT) == 1
    assert geo.num_attributes(AttributeOwner.VERTEX) == 1
    assert geo.num_attributes(AttributeOwner.PRIMITIVE) == 2
    assert geo.num_attributes(AttributeOwner.GLOBAL) == 0
    assert geo.attribute_by_name(AttributeOwner.POINT, "P").type is AttributeType.VECTOR
    assert geo.attribute_by_name(AttributeOwner.VERTEX, "point").type is AttributeType.INT
    assert (
        geo.attribute_by_name(AttributeOwner.PRIMITIVE, "vertexCount").type
        is AttributeType.INT
    )
    assert geo.attribute_by_name(AttributeOwner.PRIMITIVE, "closed").type is AttributeType.BOOL


def test_missing_attribute_is_none():
    geo = Geometry()
    assert geo.attribute_by_name(AttributeOwner.POINT, "Cd") is None


def test_points_are_solo_until_used():
    geo = Geometry()
    geo.add_point((0, 0, 0))
    geo.add_point((1, 0, 0))
    geo.add_point((2, 0, 0))
    assert list(geo.solo_points()) == [0, 1, 2]
    geo.add_face([0, 2])
    assert list(geo.solo_points()) == [1]
    assert geo.num_solo_points == 1


def test_counts_and_connectivity():
    geo = _quad_and_tri()
    assert geo.num_points == 5
    assert geo.num_prims == 2
    assert geo.num_verts == 7
    assert geo.prim_vert_count(0) == 4
    assert geo.prim_vert_count(1) == 3
    assert geo.is_closed(0) is True
    assert geo.is_closed(1) is False
    assert [geo.vertex_prim(v) for v in range(geo.num_verts)] == [0, 0, 0, 0, 1, 1, 1]


def test_prim_start_vertex():
    geo = _quad_and_tri()
    assert geo.prim_start_vertex(0) == 0
    assert geo.prim_start_vertex(1) == geo.prim_vert_count(0)


def test_prim_start_updates_after_new_face():
    geo = _quad_and_tri()
    geo.prim_start_vertex(0)
    geo.add_face([0, 4])
    assert geo.prim_start_vertex(2) == geo.prim_vert_count(0) + geo.prim_vert_count(1)


def test_prim_start_out_of_range():
    geo = _quad_and_tri()
    with pytest.raises(IndexError):
        geo.prim_start_vertex(5)


def test_positions():
    geo = _quad_and_tri()
    assert geo.point_pos(2) == (1.0, 1.0, 0.0)
    assert geo.pos_from_vert(6) == geo.point_pos(4)
    geo.set_point_pos(4, (5, 6, 7))
    assert geo.point_pos(4) == (5.0, 6.0, 7.0)
    assert geo.pos_from_vert(6) == (5.0, 6.0, 7.0)


def test_attribute_by_index():
    geo = Geometry()
    assert geo.attribute_by_index(AttributeOwner.PRIMITIVE, 0).name == "vertexCount"
    assert geo.attribute_by_index(AttributeOwner.PRIMITIVE, 1).name == "closed"
    with pytest.raises(IndexError):
        geo.attribute_by_index(AttributeOwner.GLOBAL, 0)


def test_user_attribute_round_trip():
    geo = Geometry()
    handle = geo.add_int_attribute(AttributeOwner.GLOBAL, "frame")
    handle.append(12)
    attr = geo.attribute_by_name(AttributeOwner.GLOBAL, "frame")
    assert len(attr) == 1
    assert geo.num_attributes(AttributeOwner.GLOBAL) == 1
    vec = geo.add_vector3_attribute(AttributeOwner.POINT, "N")
    vec.append((0, 0, 1))
    assert vec[0] == (0.0, 0.0, 1.0)
    flag = geo.add_bool_attribute(AttributeOwner.POINT, "group")
    flag.append(1)
    assert flag[0] is True


def test_copy_is_independent():
    geo = _quad_and_tri()
    clone = geo.copy()
    clone.set_point_pos(0, (9, 9, 9))
    clone.add_point((3, 3, 3))
    clone.add_face([0, 1, 2])
    assert geo.point_pos(0) == (0.0, 0.0, 0.0)
    assert geo.num_points == 5
    assert geo.num_prims == 2
    assert clone.num_prims == 3
    assert clone.point_pos(0) == (9.0, 9.0, 9.0)
    assert list(clone.solo_points()) == [5]
    assert list(geo.solo_points()) == []


def test_copy_preserves_queries():
    geo = _quad_and_tri()
    clone = geo.copy()
    assert [clone.pos_from_vert(v) for v in range(clone.num_verts)] == [
        geo.pos_from_vert(v) for v in range(geo.num_verts)
    ]
    assert clone.prim_start_vertex(1) == geo.prim_start_vertex(1)


def test_vertex_prim_out_of_range():
    geo = Geometry()
    with pytest.raises(IndexError):
        geo.vertex_prim(0)


def test_point_pos_out_of_range():
    geo = Geometry()
    with pytest.raises(IndexError):
        geo.point_pos(0)