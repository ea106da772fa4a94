"""Public rebind API contracts."""

from rebind.api.actions import Action, require_action
from rebind.api.input_events import KeyEvent, PointerEvent, RawInputEvent, ResizeEvent, WheelEvent
from rebind.api.logging import RebindLoggingConfig
from rebind.api.physical import Keyboard, MouseButton, PhysicalInput
from rebind.api.translated import Motion, MotionKind, Press, Release, Translated

__all__ = [
    "Action",
    "KeyEvent",
    "Keyboard",
    "Motion",
    "MotionKind",
    "MouseButton",
    "PhysicalInput",
    "PointerEvent",
    "Press",
    "RawInputEvent",
    "RebindLoggingConfig",
    "Release",
    "ResizeEvent",
    "Translated",
    "WheelEvent",
    "require_action",
]
