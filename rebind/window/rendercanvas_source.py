"""Raw input event source over a rendercanvas canvas."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any

from rebind.api.input_events import KeyEvent, PointerEvent, RawInputEvent, ResizeEvent, WheelEvent
from rebind.runtime.config import get_runtime_config
from rebind.runtime.logging import setup_rebind_logging

_LOG = logging.getLogger("rebind.window")

_POINTER_ALIASES: dict[str, tuple[str, ...]] = {
    "pointer_down": ("pointer_down", "mouse_down"),
    "pointer_move": ("pointer_move", "mouse_move"),
    "pointer_up": ("pointer_up", "mouse_up"),
}


@dataclass(slots=True)
class RenderCanvasInputSource:
    """Collect normalized raw input events from a canvas for polling by the app loop.

    Works with any object exposing ``add_event_handler(handler, event_type)``
    and delivering rendercanvas-style event dicts.
    """

    canvas: Any
    _input_events: deque[RawInputEvent] = field(default_factory=deque)
    _rc_auto: Any | None = field(default=None, repr=False)
    _trace: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        self._trace = get_runtime_config().input.trace_enabled
        self._bind_events()

    def poll_input_events(self) -> tuple[RawInputEvent, ...]:
        """Return and clear queued raw input events."""
        drained = tuple(self._input_events)
        self._input_events.clear()
        return drained

    def run_loop(self) -> None:
        """Run the rendercanvas backend loop."""
        setup_rebind_logging()
        rc_auto = self._rc_auto
        if rc_auto is None:
            import rendercanvas.auto as rc_auto
        loop = getattr(rc_auto, "loop", None)
        if loop is not None and hasattr(loop, "run"):
            loop.run()
            return
        run_func = getattr(rc_auto, "run", None)
        if callable(run_func):
            run_func()
            return
        raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")

    def _bind_events(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if not callable(add_handler):
            raise RuntimeError("Canvas does not support event handlers.")
        add_handler(self._on_pointer_down, "pointer_down")
        add_handler(self._on_pointer_move, "pointer_move")
        add_handler(self._on_pointer_up, "pointer_up")
        add_handler(self._on_pointer_down, "mouse_down")
        add_handler(self._on_pointer_move, "mouse_move")
        add_handler(self._on_pointer_up, "mouse_up")
        add_handler(self._on_key_down, "key_down")
        add_handler(self._on_key_up, "key_up")
        add_handler(self._on_char, "char")
        add_handler(self._on_wheel, "wheel")
        add_handler(self._on_resize, "resize")

    def _push(self, event: RawInputEvent | None) -> None:
        if event is None:
            return
        self._input_events.append(event)
        if self._trace:
            _LOG.debug("input_event_queued event=%r", event)

    def _on_pointer_down(self, event: object) -> None:
        self._push(_parse_pointer_event(event, expected_type="pointer_down"))

    def _on_pointer_move(self, event: object) -> None:
        self._push(_parse_pointer_event(event, expected_type="pointer_move"))

    def _on_pointer_up(self, event: object) -> None:
        self._push(_parse_pointer_event(event, expected_type="pointer_up"))

    def _on_key_down(self, event: object) -> None:
        self._push(_parse_key_event(event, expected_type="key_down"))

    def _on_key_up(self, event: object) -> None:
        self._push(_parse_key_event(event, expected_type="key_up"))

    def _on_char(self, event: object) -> None:
        if str(_event_value(event, "event_type", "")) != "char":
            return
        value = _event_value(event, "data")
        if isinstance(value, str):
            self._push(KeyEvent("char", value))

    def _on_wheel(self, event: object) -> None:
        self._push(_parse_wheel_event(event))

    def _on_resize(self, event: object) -> None:
        if str(_event_value(event, "event_type", "")) != "resize":
            return
        size = _event_value(event, "size")
        if isinstance(size, (tuple, list)) and len(size) >= 2:
            width, height = size[0], size[1]
        else:
            width = _event_value(event, "width")
            height = _event_value(event, "height")
        if not _is_number(width) or not _is_number(height):
            return
        self._push(ResizeEvent(float(width), float(height)))


def create_rendercanvas_input_source(
    canvas: Any | None = None,
    *,
    width: int = 800,
    height: int = 600,
    title: str = "rebind",
) -> RenderCanvasInputSource:
    """Create an input source over an existing or newly created rendercanvas canvas."""
    if canvas is not None:
        return RenderCanvasInputSource(canvas=canvas)
    import rendercanvas.auto as rc_auto

    canvas = rc_auto.RenderCanvas(size=(int(width), int(height)), title=title)
    return RenderCanvasInputSource(canvas=canvas, _rc_auto=rc_auto)


def _parse_pointer_event(event: object, *, expected_type: str) -> PointerEvent | None:
    raw_type = str(_event_value(event, "event_type", "")).strip().lower()
    if raw_type not in _POINTER_ALIASES.get(expected_type, (expected_type,)):
        return None
    x = _event_value(event, "x")
    y = _event_value(event, "y")
    button = _event_value(event, "button", 0)
    if not _is_number(x) or not _is_number(y):
        return None
    if not isinstance(button, int) or isinstance(button, bool):
        button = 0
    return PointerEvent(expected_type, float(x), float(y), int(button))


def _parse_key_event(event: object, *, expected_type: str) -> KeyEvent | None:
    if str(_event_value(event, "event_type", "")) != expected_type:
        return None
    key = _event_value(event, "key")
    if not isinstance(key, str):
        return None
    return KeyEvent(expected_type, key)


def _parse_wheel_event(event: object) -> WheelEvent | None:
    if str(_event_value(event, "event_type", "")) != "wheel":
        return None
    x = _event_value(event, "x")
    y = _event_value(event, "y")
    dy = _event_value(event, "dy")
    dx = _event_value(event, "dx", 0.0)
    if not all(_is_number(value) for value in (x, y, dy)):
        return None
    if not _is_number(dx):
        dx = 0.0
    return WheelEvent(float(x), float(y), float(dy), float(dx))


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = ["RenderCanvasInputSource", "create_rendercanvas_input_source"]
