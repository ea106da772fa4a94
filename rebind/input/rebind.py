"""Editable per-action view of translator bindings."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Generic

from rebind.api.actions import A, require_action
from rebind.api.physical import PhysicalInput, require_physical_input
from rebind.input.bindings import BindingTable
from rebind.input.mouse import MouseMode, MouseSettings, validate_viewport_size
from rebind.input.translator import Translator
from rebind.runtime.config import DEFAULT_VIEWPORT
from rebind.runtime.errors import InvalidBindingError

MAX_BINDINGS_PER_ACTION = 3

logger = logging.getLogger(__name__)


class InputRebind(Generic[A]):
    """Action-keyed bindings for rebinding screens.

    Where a translator answers "which action does this key produce", a rebind
    answers "which keys produce this action". Each action holds at most
    ``MAX_BINDINGS_PER_ACTION`` physical inputs. Converting back with
    ``into_translator`` produces a fresh translator with all actions up.
    """

    def __init__(self, size: tuple[float, float] = DEFAULT_VIEWPORT) -> None:
        self._keymap: dict[A, tuple[PhysicalInput, ...]] = {}
        self._mouse = MouseSettings(*validate_viewport_size(size))

    @classmethod
    def from_mappings(
        cls,
        mappings: Iterable[tuple[PhysicalInput, A]],
        mouse_settings: MouseSettings,
    ) -> InputRebind[A]:
        grouped: dict[A, list[PhysicalInput]] = {}
        for physical, action in mappings:
            grouped.setdefault(action, []).append(physical)
        rebind: InputRebind[A] = cls(mouse_settings.size)
        rebind._mouse = mouse_settings
        for action in sorted(grouped):
            inputs = grouped[action]
            if len(inputs) > MAX_BINDINGS_PER_ACTION:
                logger.warning(
                    "rebind_inputs_dropped action=%s kept=%d dropped=%s",
                    action,
                    MAX_BINDINGS_PER_ACTION,
                    inputs[MAX_BINDINGS_PER_ACTION:],
                )
            rebind._keymap[action] = tuple(inputs[:MAX_BINDINGS_PER_ACTION])
        return rebind

    @classmethod
    def from_translator(cls, translator: Translator[A]) -> InputRebind[A]:
        return cls.from_mappings(translator.bindings.items(), translator.mouse_settings)

    def insert_action(self, action: A) -> tuple[PhysicalInput, ...] | None:
        """Register ``action`` with no inputs, returning any inputs it had."""
        action = require_action(action)
        previous = self._keymap.get(action)
        self._keymap[action] = ()
        return previous

    def insert_action_with_inputs(
        self,
        action: A,
        inputs: Iterable[PhysicalInput],
    ) -> tuple[PhysicalInput, ...] | None:
        """Assign ``inputs`` to ``action``, returning the inputs it replaced."""
        action = require_action(action)
        unique = tuple(dict.fromkeys(require_physical_input(item) for item in inputs))
        if len(unique) > MAX_BINDINGS_PER_ACTION:
            raise InvalidBindingError(
                f"at most {MAX_BINDINGS_PER_ACTION} inputs per action, got {len(unique)} for {action!r}"
            )
        previous = self._keymap.get(action)
        self._keymap[action] = unique
        return previous

    def add_input(self, action: A, physical: PhysicalInput) -> bool:
        """Append ``physical`` to ``action`` if there is room.

        Returns ``False`` when the action is full or already holds the input.
        """
        action = require_action(action)
        physical = require_physical_input(physical)
        current = self._keymap.get(action, ())
        if physical in current or len(current) >= MAX_BINDINGS_PER_ACTION:
            return False
        self._keymap[action] = current + (physical,)
        return True

    def remove_input(self, action: A, physical: PhysicalInput) -> bool:
        current = self._keymap.get(action)
        if current is None or physical not in current:
            return False
        self._keymap[action] = tuple(item for item in current if item != physical)
        return True

    def remove_action(self, action: A) -> tuple[PhysicalInput, ...] | None:
        return self._keymap.pop(action, None)

    def bindings_for(self, action: A) -> tuple[PhysicalInput, ...] | None:
        return self._keymap.get(action)

    def actions(self) -> tuple[A, ...]:
        return tuple(sorted(self._keymap))

    @property
    def mouse_settings(self) -> MouseSettings:
        return self._mouse

    @property
    def viewport_size(self) -> tuple[float, float]:
        return self._mouse.size

    @viewport_size.setter
    def viewport_size(self, size: tuple[float, float]) -> None:
        self._mouse = self._mouse.with_size(size)

    @property
    def mouse_mode(self) -> MouseMode:
        return self._mouse.mode

    @mouse_mode.setter
    def mouse_mode(self, mode: MouseMode | str) -> None:
        self._mouse = replace(self._mouse, mode=MouseMode.parse(mode))

    @property
    def x_motion_inverted(self) -> bool:
        return self._mouse.x_motion_inverted

    @x_motion_inverted.setter
    def x_motion_inverted(self, invert: bool) -> None:
        self._mouse = replace(self._mouse, x_motion_inverted=bool(invert))

    @property
    def y_motion_inverted(self) -> bool:
        return self._mouse.y_motion_inverted

    @y_motion_inverted.setter
    def y_motion_inverted(self, invert: bool) -> None:
        self._mouse = replace(self._mouse, y_motion_inverted=bool(invert))

    @property
    def x_scroll_inverted(self) -> bool:
        return self._mouse.x_scroll_inverted

    @x_scroll_inverted.setter
    def x_scroll_inverted(self, invert: bool) -> None:
        self._mouse = replace(self._mouse, x_scroll_inverted=bool(invert))

    @property
    def y_scroll_inverted(self) -> bool:
        return self._mouse.y_scroll_inverted

    @y_scroll_inverted.setter
    def y_scroll_inverted(self, invert: bool) -> None:
        self._mouse = replace(self._mouse, y_scroll_inverted=bool(invert))

    def into_translator(self) -> Translator[A]:
        """Build a translator; an input listed under two actions goes to the later one."""
        mappings: dict[PhysicalInput, A] = {}
        for action, inputs in self._keymap.items():
            for physical in inputs:
                previous = mappings.get(physical)
                if previous is not None and previous != action:
                    logger.debug(
                        "rebind_input_reassigned input=%s old=%s new=%s", physical, previous, action
                    )
                mappings[physical] = action
        return Translator(BindingTable(mappings.items()), self._mouse)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputRebind):
            return NotImplemented
        return self._keymap == other._keymap and self._mouse == other._mouse

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"InputRebind(keymap={self._keymap!r}, mouse_settings={self._mouse!r})"


__all__ = ["MAX_BINDINGS_PER_ACTION", "InputRebind"]
