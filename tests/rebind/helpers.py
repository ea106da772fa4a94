from __future__ import annotations

from enum import IntEnum

from rebind.api.input_events import KeyEvent


class GameAction(IntEnum):
    FORWARD = 1
    BACK = 2
    LEFT = 3
    RIGHT = 4
    JUMP = 5
    FIRE = 6


class FakeCanvas:
    def __init__(self) -> None:
        self.handlers: dict[str, list] = {}

    def add_event_handler(self, handler, event_type: str) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def emit(self, event_type: str, **payload) -> None:
        event = {"event_type": event_type, **payload}
        for handler in self.handlers.get(event_type, []):
            handler(event)


def key_down(key: str) -> KeyEvent:
    return KeyEvent("key_down", key)


def key_up(key: str) -> KeyEvent:
    return KeyEvent("key_up", key)
