"""Directional edges that carry geometry from one node to another."""

from __future__ import annotations

from typing import Any

from enzo.basetypes import OpId, Signal


class GeometryConnection:
    """A connection between two nodes, named in the direction data flows.

    ``input_op_id`` is the node data flows from and ``input_index`` its
    output socket; ``output_op_id`` is the node data flows to and
    ``output_index`` its input socket.
    """

    def __init__(
        self,
        input_op_id: OpId,
        input_index: int,
        output_op_id: OpId,
        output_index: int,
        network: Any,
    ) -> None:
        self._input_op_id = input_op_id
        self._input_index = input_index
        self._output_op_id = output_op_id
        self._output_index = output_index
        self._network = network
        self.removed = Signal()

    @property
    def input_op_id(self) -> OpId:
        """The node data flows from."""
        return self._input_op_id

    @property
    def output_op_id(self) -> OpId:
        """The node data flows to."""
        return self._output_op_id

    @property
    def input_index(self) -> int:
        """The socket of :attr:`input_op_id` data flows from."""
        return self._input_index

    @property
    def output_index(self) -> int:
        """The socket of :attr:`output_op_id` data flows to."""
        return self._output_index

    @property
    def network(self) -> Any:
        return self._network

    def remove(self) -> None:
        """Detach the connection from both of its nodes and emit :attr:`removed`."""
        self._network.geo_operator(self._input_op_id).remove_output_connection(self)
        self._network.geo_operator(self._output_op_id).remove_input_connection(
            self._input_index
        )
        self.removed.emit()

    def __str__(self) -> str:
        return (
            f"{self._input_op_id}:{self._input_index} -> "
            f"{self._output_op_id}:{self._output_index}"
        )

    def __repr__(self) -> str:
        return f"GeometryConnection({self})"