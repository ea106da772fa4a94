"""Public raw input event types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event in window coordinates."""

    event_type: str  # pointer_down|pointer_up|pointer_move
    x: float
    y: float
    button: int


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key/char event."""

    event_type: str  # key_down|key_up|char
    value: str


@dataclass(frozen=True, slots=True)
class WheelEvent:
    """Mouse wheel event in window coordinates."""

    x: float
    y: float
    dy: float
    dx: float = 0.0


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    """Window logical size change."""

    width: float
    height: float


RawInputEvent = PointerEvent | KeyEvent | WheelEvent | ResizeEvent


__all__ = ["KeyEvent", "PointerEvent", "RawInputEvent", "ResizeEvent", "WheelEvent"]
