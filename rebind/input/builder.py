"""Fluent builder for translators and rebind views."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Generic

from rebind.api.actions import A, require_action
from rebind.api.physical import PhysicalInput, require_physical_input
from rebind.input.bindings import BindingTable, DenseBindingTable
from rebind.input.mouse import MouseMode, MouseSettings, validate_viewport_size
from rebind.input.rebind import InputRebind
from rebind.input.translator import Translator
from rebind.runtime.config import get_runtime_config

logger = logging.getLogger(__name__)


class TranslatorBuilder(Generic[A]):
    """Accumulate bindings and mouse settings, then build a translator.

    Every configuration method validates its arguments immediately and
    returns the builder, so calls chain::

        translator = (
            TranslatorBuilder((800, 600))
            .with_action_mapping(Keyboard("w"), Move.FORWARD)
            .with_action_mapping(Keyboard("up"), Move.FORWARD)
            .with_mouse_mode(MouseMode.RELATIVE)
            .build_translator()
        )
    """

    def __init__(self, size: tuple[float, float]) -> None:
        self._mappings: dict[PhysicalInput, A] = {}
        self._mouse = MouseSettings(*validate_viewport_size(size))

    @classmethod
    def new(cls, size: tuple[float, float]) -> TranslatorBuilder[A]:
        return cls(size)

    @classmethod
    def default(cls) -> TranslatorBuilder[A]:
        """Create a builder with viewport size and mouse mode from runtime config."""
        mouse = get_runtime_config().mouse
        builder: TranslatorBuilder[A] = cls((mouse.viewport_width, mouse.viewport_height))
        return builder.with_mouse_mode(mouse.mode_name)

    def with_action_mapping(self, physical: PhysicalInput, action: A) -> TranslatorBuilder[A]:
        """Bind ``physical`` to ``action``; rebinding the same input replaces it."""
        physical = require_physical_input(physical)
        action = require_action(action)
        previous = self._mappings.get(physical)
        if previous is not None and previous != action:
            logger.debug("binding_replaced input=%s old=%s new=%s", physical, previous, action)
        self._mappings[physical] = action
        return self

    def with_mouse_mode(self, mode: MouseMode | str) -> TranslatorBuilder[A]:
        self._mouse = replace(self._mouse, mode=MouseMode.parse(mode))
        return self

    def viewport_size(self, size: tuple[float, float]) -> TranslatorBuilder[A]:
        self._mouse = self._mouse.with_size(size)
        return self

    def x_motion_inverted(self, invert: bool) -> TranslatorBuilder[A]:
        self._mouse = replace(self._mouse, x_motion_inverted=bool(invert))
        return self

    def y_motion_inverted(self, invert: bool) -> TranslatorBuilder[A]:
        self._mouse = replace(self._mouse, y_motion_inverted=bool(invert))
        return self

    def x_scroll_inverted(self, invert: bool) -> TranslatorBuilder[A]:
        self._mouse = replace(self._mouse, x_scroll_inverted=bool(invert))
        return self

    def y_scroll_inverted(self, invert: bool) -> TranslatorBuilder[A]:
        self._mouse = replace(self._mouse, y_scroll_inverted=bool(invert))
        return self

    @property
    def mouse_settings(self) -> MouseSettings:
        return self._mouse

    @property
    def mappings(self) -> tuple[tuple[PhysicalInput, A], ...]:
        return tuple(self._mappings.items())

    def build_translator(self, *, dense: bool = False) -> Translator[A]:
        """Create a translator from the current configuration."""
        table_cls = DenseBindingTable if dense else BindingTable
        table: BindingTable[A] = table_cls(self._mappings.items())
        logger.debug(
            "translator_built bindings=%d actions=%d mode=%s dense=%s",
            len(table),
            len(table.actions()),
            self._mouse.mode.value,
            dense,
        )
        return Translator(table, self._mouse)

    def build_rebind(self) -> InputRebind[A]:
        """Create an editable per-action view from the current configuration."""
        return InputRebind.from_mappings(self._mappings.items(), self._mouse)


__all__ = ["TranslatorBuilder"]
