"""Physical input to action lookup tables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic

from rebind.api.actions import A
from rebind.api.physical import Keyboard, MouseButton, PhysicalInput

DENSE_BUTTON_LIMIT = 256


class BindingTable(Generic[A]):
    """Hash-based, read-only mapping of physical inputs to actions."""

    def __init__(self, bindings: Iterable[tuple[PhysicalInput, A]] = ()) -> None:
        self._bindings: dict[PhysicalInput, A] = {}
        for physical, action in bindings:
            self._bindings[physical] = action

    def lookup(self, physical: PhysicalInput) -> A | None:
        return self._bindings.get(physical)

    def items(self) -> Iterator[tuple[PhysicalInput, A]]:
        return iter(tuple(self._bindings.items()))

    def actions(self) -> frozenset[A]:
        return frozenset(action for _, action in self.items())

    def inputs_for(self, action: A) -> tuple[PhysicalInput, ...]:
        return tuple(physical for physical, bound in self.items() if bound == action)

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, physical: object) -> bool:
        if not isinstance(physical, (Keyboard, MouseButton)):
            return False
        return self.lookup(physical) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindingTable):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


class DenseBindingTable(BindingTable[A]):
    """Binding table with low mouse button codes stored in a list.

    Buttons below ``DENSE_BUTTON_LIMIT`` are indexed directly by code; key
    names and higher button codes stay in a dict.
    """

    def __init__(self, bindings: Iterable[tuple[PhysicalInput, A]] = ()) -> None:
        self._sparse: dict[PhysicalInput, A] = {}
        self._buttons: list[A | None] = []
        self._order: dict[PhysicalInput, None] = {}
        for physical, action in bindings:
            self._order[physical] = None
            if isinstance(physical, MouseButton) and physical.button < DENSE_BUTTON_LIMIT:
                missing = physical.button + 1 - len(self._buttons)
                if missing > 0:
                    self._buttons.extend([None] * missing)
                self._buttons[physical.button] = action
            else:
                self._sparse[physical] = action

    def lookup(self, physical: PhysicalInput) -> A | None:
        if isinstance(physical, MouseButton) and physical.button < DENSE_BUTTON_LIMIT:
            if physical.button < len(self._buttons):
                return self._buttons[physical.button]
            return None
        return self._sparse.get(physical)

    def items(self) -> Iterator[tuple[PhysicalInput, A]]:
        pairs: list[tuple[PhysicalInput, A]] = []
        for physical in self._order:
            action = self.lookup(physical)
            if action is not None:
                pairs.append((physical, action))
        return iter(pairs)

    def __len__(self) -> int:
        return len(self._order)


__all__ = ["DENSE_BUTTON_LIMIT", "BindingTable", "DenseBindingTable"]
