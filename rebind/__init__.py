"""Bind physical keys and mouse buttons to logical actions.

Build a translator once, then feed it every raw input event from the
window layer::

    translator = (
        TranslatorBuilder((800, 600))
        .with_action_mapping(Keyboard("space"), Action.JUMP)
        .with_action_mapping(MouseButton(1), Action.FIRE)
        .build_translator()
    )
    for event in source.poll_input_events():
        match translator.translate(event):
            case Press(Action.JUMP):
                player.jump()
            case Release(action):
                ...
"""

from rebind.api.actions import Action
from rebind.api.input_events import KeyEvent, PointerEvent, ResizeEvent, WheelEvent
from rebind.api.physical import Keyboard, MouseButton, PhysicalInput
from rebind.api.translated import Motion, MotionKind, Press, Release, Translated
from rebind.input import (
    MAX_BINDINGS_PER_ACTION,
    BindingTable,
    DenseBindingTable,
    InputRebind,
    MouseMode,
    MouseSettings,
    Translator,
    TranslatorBuilder,
)
from rebind.runtime.errors import (
    InvalidBindingError,
    InvalidMouseModeError,
    InvalidViewportError,
    RebindConfigError,
)

__all__ = [
    "MAX_BINDINGS_PER_ACTION",
    "Action",
    "BindingTable",
    "DenseBindingTable",
    "InputRebind",
    "InvalidBindingError",
    "InvalidMouseModeError",
    "InvalidViewportError",
    "KeyEvent",
    "Keyboard",
    "Motion",
    "MotionKind",
    "MouseButton",
    "MouseMode",
    "MouseSettings",
    "PhysicalInput",
    "PointerEvent",
    "Press",
    "RebindConfigError",
    "Release",
    "ResizeEvent",
    "Translated",
    "Translator",
    "TranslatorBuilder",
    "WheelEvent",
]
