"""Small value types describing parameters: defaults, ranges and names."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass
class Default:
    """Default value of one parameter component, held as a float and a string."""

    float_value: float = 0.0
    string_value: str = ""

    @property
    def int_value(self) -> int:
        """The float default truncated towards zero."""
        return int(self.float_value)

    @int_value.setter
    def int_value(self, value: int) -> None:
        self.float_value = float(int(value))

    def set(self, float_value: float, string_value: str) -> None:
        """Replace both the float and the string default."""
        self.float_value = float_value
        self.string_value = string_value


class RangeFlag(enum.Enum):
    """Whether a range bound may be exceeded by the user."""

    UNLOCKED = enum.auto()
    LOCKED = enum.auto()


@dataclass(frozen=True)
class Range:
    """Suggested or enforced value range of a parameter component."""

    min_value: float = 0.0
    min_flag: RangeFlag = RangeFlag.UNLOCKED
    max_value: float = 10.0
    max_flag: RangeFlag = RangeFlag.UNLOCKED


@dataclass(frozen=True)
class Name:
    """Internal token and user facing label of a parameter."""

    token: str = ""
    label: str = ""