"""Parameter templates: the static description a parameter is built from."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Union

from enzo.basetypes import ParmType
from enzo.prmdefs import Default, Name, Range


class Template:
    """Describes a parameter's type, name, per-component defaults and ranges.

    ``defaults`` may be a single :class:`Default`, repeated for every
    component, or a sequence of them kept as given. ``ranges`` may be a
    single :class:`Range`, repeated for every component, or a sequence that
    is padded up to ``vector_size`` with its first entry (or ``Range()``
    when empty). A template built with no arguments is a list terminator.
    """

    def __init__(
        self,
        type: ParmType = ParmType.LIST_TERMINATOR,
        name: Optional[Name] = None,
        defaults: Union[Default, Sequence[Default], None] = None,
        vector_size: int = 1,
        ranges: Union[Range, Sequence[Range], None] = None,
    ) -> None:
        if vector_size < 0:
            raise ValueError(f"vector size must not be negative: {vector_size}")
        self._type = type
        self._name = name if name is not None else Name()
        self._vector_size = vector_size

        if defaults is None:
            defaults = Default()
        if isinstance(defaults, Default):
            self._defaults = [
                Default(defaults.float_value, defaults.string_value)
                for _ in range(vector_size)
            ]
        else:
            self._defaults = list(defaults)

        if ranges is None:
            ranges = Range()
        if isinstance(ranges, Range):
            self._ranges = [ranges] * vector_size
        else:
            self._ranges = list(ranges)
            if len(self._ranges) < vector_size:
                filler = self._ranges[0] if self._ranges else Range()
                self._ranges.extend([filler] * (vector_size - len(self._ranges)))

    @property
    def type(self) -> ParmType:
        return self._type

    @property
    def is_terminator(self) -> bool:
        return self._type is ParmType.LIST_TERMINATOR

    @property
    def name(self) -> str:
        """The parameter token; identical to :attr:`token`."""
        return self._name.token

    @property
    def token(self) -> str:
        return self._name.token

    @property
    def label(self) -> str:
        return self._name.label

    @property
    def size(self) -> int:
        """Number of components in the parameter."""
        return self._vector_size

    @property
    def num_defaults(self) -> int:
        return len(self._defaults)

    @property
    def defaults(self) -> tuple[Default, ...]:
        return tuple(self._defaults)

    @property
    def ranges(self) -> tuple[Range, ...]:
        return tuple(self._ranges)

    def default(self, index: int = 0) -> Default:
        """Return a copy of the default for component ``index``."""
        if not 0 <= index < len(self._defaults):
            raise IndexError(
                f"default index {index} out of range for parameter: {self.name}"
            )
        d = self._defaults[index]
        return Default(d.float_value, d.string_value)

    def range(self, index: int = 0) -> Range:
        """Return the range for component ``index``."""
        if not 0 <= index < len(self._ranges):
            raise IndexError(
                f"range index {index} out of range for parameter: {self.name}"
            )
        return self._ranges[index]

    def __repr__(self) -> str:
        return (
            f"Template(type={self._type.name}, name={self._name!r}, "
            f"vector_size={self._vector_size})"
        )


TERMINATOR = Template()
"""Marks the end of a template list."""