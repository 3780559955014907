# enzo

The core building blocks of a procedural 3D geometry tool. It covers attribute-based geometry, parameter descriptions, the base class that operator types derive from, the connections between operators, and a registry of operator types.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Modules

| Module                | Contents                                                                          |
|-----------------------|-----------------------------------------------------------------------------------|
| `enzo.basetypes`      | `AttributeOwner`, `AttributeType`, `ParmType`, `SocketIOType` and a small `Signal` |
| `enzo.attribute`      | `Attribute`, `AttributeHandle`, `AttributeHandleRO`                                |
| `enzo.geometry`       | `Geometry`                                                                        |
| `enzo.prmdefs`        | `Default`, `Range`, `RangeFlag`, `Name`                                           |
| `enzo.template`       | `Template` and the `TERMINATOR` template                                          |
| `enzo.connection`     | `GeometryConnection`                                                              |
| `enzo.opdef`          | `OpInfo` and the abstract `GeometryOpDef`                                         |
| `enzo.operator_table` | `OperatorTable`                                                                   |

## Geometry and attributes

`Geometry` works like a spreadsheet. Each column is an `Attribute`, and each attribute belongs to one owner: `POINT`, `VERTEX`, `PRIMITIVE` or `GLOBAL`.

A new geometry already holds these attributes:

| Attribute     | Owner     | Holds                            |
|---------------|-----------|----------------------------------|
| `P`           | point     | position                         |
| `point`       | vertex    | offset of the point it refers to |
| `vertexCount` | primitive | number of vertices               |
| `closed`      | primitive | whether the primitive is closed  |

An `AttributeHandle` reads and writes an attribute's values. An `AttributeHandleRO` only reads them.

Values are converted to the attribute's type as they are stored:

- int attributes store `int` values.
- float attributes store `float` values.
- bool attributes store `bool` values.
- vector attributes store tuples of three floats.

An offset that is out of range raises `IndexError`.

```python
from enzo.geometry import Geometry
from enzo.basetypes import AttributeOwner

geo = Geometry()
for pos in [(0, 0, 0), (1, 0, 0), (0, 1, 0)]:
    geo.add_point(pos)
geo.add_face([0, 1, 2], True)

geo.prim_vert_count(0)       # 3
geo.pos_from_vert(1)         # (1.0, 0.0, 0.0)
geo.prim_start_vertex(0)     # 0
list(geo.solo_points())      # [] - every point is used by a face
geo.num_points, geo.num_prims

weights = geo.add_int_attribute(AttributeOwner.POINT, "weight")
weights.append(7)
geo.attribute_by_name(AttributeOwner.POINT, "weight")

clone = geo.copy()           # deep copy; its attributes have their own storage
```

## Parameter descriptions

A `Template` describes one parameter. It holds:

- a `ParmType`
- a `Name`, which has a token and a label
- per-component `Default` values
- a vector size
- per-component `Range` values

A single `Default` or `Range` is repeated for every component. A list of ranges shorter than the vector size is padded with its first entry. A `Template()` built with no arguments is a list terminator.

```python
from enzo.template import Template
from enzo.prmdefs import Default, Name, Range
from enzo.basetypes import ParmType

size = Template(ParmType.XYZ, Name("size", "Size"), Default(1.0), 3, Range(0, max_value=5))
size.size             # 3
size.default(2)       # Default(float_value=1.0, string_value='')
size.range(1).max_value  # 5
```

## Operators

An operator type subclasses `GeometryOpDef` and implements `cook_op(context)`. Inside `cook_op` it publishes its results with `set_output_geometry(index, geometry)`, which stores a copy of the geometry. Any output that is never set holds empty geometry.

`OpInfo` describes an operator type. It holds:

- the internal name and the display name
- the constructor
- the parameter templates
- the input and output limits

`OperatorTable` stores these descriptions and looks them up by internal name.

```python
from enzo.opdef import GeometryOpDef, OpInfo
from enzo.operator_table import OperatorTable
from enzo.geometry import Geometry

class PointOp(GeometryOpDef):
    def cook_op(self, context):
        geo = Geometry()
        geo.add_point((0, 0, 0))
        self.set_output_geometry(0, geo)

table = OperatorTable()
table.add_operator(OpInfo("point", "Point", PointOp))
info = table.op_info("point")
op = table.op_constructor("point")(None, info)
op.cook_op(None)
op.output_geo(0).num_points   # 1
```

A `GeometryConnection` records an edge between two operators. It stores:

- the node and socket that data flows from (`input_op_id`, `input_index`)
- the node and socket that data flows to (`output_op_id`, `output_index`)

Its `remove()` method does three things:

1. It asks the network it was given for both operators with `geo_operator(op_id)`.
2. It calls `remove_output_connection` and `remove_input_connection` on them.
3. It emits its `removed` signal.

## What this package does not do

The package has no network manager, no live parameter values and no cooking context. Nothing here creates operators from the table, wires them together, tracks which nodes are dirty or cooks a graph in dependency order.

- The `context` passed to `cook_op` is whatever the caller supplies.
- A `GeometryConnection` must be given an object that provides `geo_operator` before `remove()` can work.

There is no command-line tool, no viewport and no file storage for geometry.

## Running the tests

```
pytest
```