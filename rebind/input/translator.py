"""Runtime translation of raw input events into action edges and motion."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Generic

from rebind.api.actions import A
from rebind.api.input_events import KeyEvent, PointerEvent, WheelEvent
from rebind.api.physical import Keyboard, MouseButton, PhysicalInput
from rebind.api.translated import Press, Release, Translated
from rebind.input.bindings import BindingTable
from rebind.input.mouse import MouseSettings, MouseTranslator
from rebind.runtime.config import get_runtime_config

if TYPE_CHECKING:
    from rebind.input.rebind import InputRebind

logger = logging.getLogger(__name__)

_PRESS_TYPES = frozenset({"key_down", "pointer_down"})
_RELEASE_TYPES = frozenset({"key_up", "pointer_up"})


class Translator(Generic[A]):
    """Translate raw input events one at a time.

    Tracks a Down/Up state per action so only the rising and falling edges
    are reported: a second press of an action that is already down (key
    auto-repeat, or another key bound to the same action) yields nothing,
    as does a release of an action that is already up. Not thread-safe;
    callers serialize access.
    """

    def __init__(
        self,
        bindings: BindingTable[A],
        mouse_settings: MouseSettings,
        *,
        trace_enabled: bool | None = None,
    ) -> None:
        self._bindings = bindings
        self._mouse = MouseTranslator(mouse_settings)
        self._pressed: set[A] = set()
        if trace_enabled is None:
            trace_enabled = get_runtime_config().input.trace_enabled
        self._trace = bool(trace_enabled)

    @property
    def bindings(self) -> BindingTable[A]:
        return self._bindings

    @property
    def mouse_settings(self) -> MouseSettings:
        return self._mouse.settings

    def translate(self, event: object) -> Translated[A] | None:
        """Return the translation of one raw event, or ``None``."""
        result = self._translate(event)
        if self._trace:
            logger.debug("input_translate event=%r result=%r", event, result)
        return result

    def translate_all(self, events: Iterable[object]) -> Iterator[Translated[A]]:
        """Yield the translations of ``events`` in order, skipping empty results."""
        for event in events:
            translated = self.translate(event)
            if translated is not None:
                yield translated

    def into_rebind(self) -> InputRebind[A]:
        """Return an editable per-action view of this translator's configuration."""
        from rebind.input.rebind import InputRebind

        return InputRebind.from_translator(self)

    def _translate(self, event: object) -> Translated[A] | None:
        if isinstance(event, (KeyEvent, PointerEvent)) and not isinstance(event.event_type, str):
            return None
        if isinstance(event, KeyEvent):
            if event.event_type == "char" or not isinstance(event.value, str):
                return None
            if not event.value.strip():
                return None
            return self._translate_edge(event.event_type, Keyboard(event.value))
        if isinstance(event, PointerEvent):
            if event.event_type == "pointer_move":
                if not (_is_number(event.x) and _is_number(event.y)):
                    return None
                return self._mouse.translate_cursor(event.x, event.y)
            if isinstance(event.button, bool) or not isinstance(event.button, int):
                return None
            if event.button < 0:
                return None
            return self._translate_edge(event.event_type, MouseButton(event.button))
        if isinstance(event, WheelEvent):
            if not (_is_number(event.dx) and _is_number(event.dy)):
                return None
            return self._mouse.translate_scroll(event.dx, event.dy)
        return None

    def _translate_edge(self, event_type: str, physical: PhysicalInput) -> Translated[A] | None:
        action = self._bindings.lookup(physical)
        if action is None:
            return None
        if event_type in _PRESS_TYPES:
            if action in self._pressed:
                return None
            self._pressed.add(action)
            return Press(action)
        if event_type in _RELEASE_TYPES:
            if action not in self._pressed:
                return None
            self._pressed.discard(action)
            return Release(action)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Translator):
            return NotImplemented
        return self._bindings == other._bindings and self.mouse_settings == other.mouse_settings

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Translator(bindings={self._bindings!r}, mouse_settings={self.mouse_settings!r})"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = ["Translator"]
