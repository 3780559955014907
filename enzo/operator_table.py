"""Registry of the operator types available to the network."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Callable, Optional

from enzo.opdef import OpInfo

_log = logging.getLogger(__name__)


class OperatorTable:
    """Stores operator descriptions and looks them up by internal name."""

    def __init__(self) -> None:
        self._store: list[OpInfo] = []

    def add_operator(self, info: OpInfo) -> None:
        """Register an operator type."""
        _log.debug("adding operator: %s", info.display_name)
        for template in info.iter_templates():
            _log.debug("name: %s", template.name)
        self._store.append(info)

    def op_info(self, name: str) -> Optional[OpInfo]:
        """Return the first operator registered under ``name``, or None."""
        return next((i for i in self._store if i.internal_name == name), None)

    def op_constructor(self, name: str) -> Optional[Callable[..., Any]]:
        """Return the constructor of the operator registered under ``name``, or None."""
        info = self.op_info(name)
        return info.ctor_func if info is not None else None

    def data(self) -> list[OpInfo]:
        """Return every registered operator in registration order."""
        return list(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[OpInfo]:
        return iter(list(self._store))

    def __contains__(self, name: object) -> bool:
        return any(i.internal_name == name for i in self._store)