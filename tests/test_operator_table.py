from enzo.basetypes import ParmType
from enzo.opdef import GeometryOpDef, OpInfo
from enzo.operator_table import OperatorTable
from enzo.prmdefs import Name
from enzo.template import TERMINATOR, Template


class _GridDef(GeometryOpDef):
    def cook_op(self, context):
        self.set_output_geometry(0, self.output_geo(0))


class _BoxDef(GeometryOpDef):
    def cook_op(self, context):
        self.set_output_geometry(0, self.output_geo(0))


def _grid():
    return OpInfo(
        "grid",
        "Grid",
        _GridDef,
        (Template(ParmType.INT, Name("size", "Size")), TERMINATOR),
    )


def _box():
    return OpInfo("box", "Box", _BoxDef)


def test_lookup_by_internal_name():
    table = OperatorTable()
    grid, box = _grid(), _box()
    table.add_operator(grid)
    table.add_operator(box)
    assert table.op_info("box") is box
    assert table.op_constructor("grid") is _GridDef


def test_missing_names_return_none():
    table = OperatorTable()
    table.add_operator(_grid())
    assert table.op_info("Grid") is None
    assert table.op_constructor("sphere") is None


def test_data_keeps_order_and_is_a_copy():
    table = OperatorTable()
    grid, box = _grid(), _box()
    table.add_operator(grid)
    table.add_operator(box)
    data = table.data()
    assert data == [grid, box]
    data.clear()
    assert len(table) == 2


def test_first_registration_wins():
    table = OperatorTable()
    first = _grid()
    second = OpInfo("grid", "Other Grid", _BoxDef)
    table.add_operator(first)
    table.add_operator(second)
    assert table.op_info("grid") is first
    assert "grid" in table
    assert "box" not in table


def test_constructor_builds_definition():
    table = OperatorTable()
    info = _grid()
    table.add_operator(info)
    op_def = table.op_constructor("grid")(None, info)
    assert op_def.max_outputs == 1
    assert op_def.output_geo(0).num_points == 0