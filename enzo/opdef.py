"""Operator descriptions and the base class that operator definitions derive from."""

from __future__ import annotations

import abc
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable

from enzo.geometry import Geometry
from enzo.template import Template

_log = logging.getLogger(__name__)


@dataclass
class OpInfo:
    """The static properties that set one kind of operator apart from another."""

    internal_name: str
    display_name: str
    ctor_func: Callable[[Any, "OpInfo"], "GeometryOpDef"]
    templates: Sequence[Template] = field(default_factory=tuple)
    min_inputs: int = 0
    max_inputs: int = 1
    max_outputs: int = 1

    def iter_templates(self) -> Iterator[Template]:
        """Yield the parameter templates up to the first list terminator."""
        for template in self.templates:
            if template.is_terminator:
                return
            yield template


class GeometryOpDef(abc.ABC):
    """Base class for operator definitions.

    Subclasses implement :meth:`cook_op`, read their inputs and parameters
    from the context, and publish results with :meth:`set_output_geometry`.
    Outputs that are never set hold empty geometry.
    """

    def __init__(self, network: Any, op_info: OpInfo) -> None:
        self._op_info = op_info
        self._network = network
        self._output_geometry = [Geometry() for _ in range(op_info.max_outputs)]

    @property
    def op_info(self) -> OpInfo:
        return self._op_info

    @property
    def network(self) -> Any:
        return self._network

    @property
    def min_inputs(self) -> int:
        """Minimum number of input connections the operator needs."""
        return self._op_info.min_inputs

    @property
    def max_inputs(self) -> int:
        """Maximum number of input connections the operator accepts."""
        return self._op_info.max_inputs

    @property
    def max_outputs(self) -> int:
        """Number of outputs the operator provides."""
        return self._op_info.max_outputs

    @abc.abstractmethod
    def cook_op(self, context: Any) -> None:
        """Compute the output geometry for the given context."""

    def _check_output(self, output_index: int) -> None:
        if not 0 <= output_index < len(self._output_geometry):
            raise IndexError(
                f"output index {output_index} out of range, "
                f"operator has {self.max_outputs} outputs"
            )

    def output_geo(self, output_index: int) -> Geometry:
        """Return the current geometry of an output without cooking."""
        self._check_output(output_index)
        return self._output_geometry[output_index]

    def throw_error(self, error: str) -> None:
        """Report an error raised while cooking."""
        _log.error("NODE EXCEPTION: %s", error)

    def output_requested(self, output_index: int) -> bool:
        """Return whether an output is wanted; every output currently is."""
        return True

    def set_output_geometry(self, output_index: int, geometry: Geometry) -> None:
        """Store a copy of ``geometry`` as the given output."""
        self._check_output(output_index)
        self._output_geometry[output_index] = geometry.copy()