"""Physical input identifiers used as binding keys."""

from __future__ import annotations

from dataclasses import dataclass

from rebind.runtime.errors import InvalidBindingError


@dataclass(frozen=True, slots=True, order=True)
class Keyboard:
    """Keyboard key by normalized key name."""

    key: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise InvalidBindingError(f"key name must be a string, got {self.key!r}")
        normalized = normalize_key_name(self.key)
        if not normalized:
            raise InvalidBindingError("key name must not be empty")
        object.__setattr__(self, "key", normalized)


@dataclass(frozen=True, slots=True, order=True)
class MouseButton:
    """Mouse button by numeric button code."""

    button: int

    def __post_init__(self) -> None:
        if isinstance(self.button, bool) or not isinstance(self.button, int):
            raise InvalidBindingError(f"button code must be an int, got {self.button!r}")
        if self.button < 0:
            raise InvalidBindingError("button code must be >= 0")


PhysicalInput = Keyboard | MouseButton


def normalize_key_name(key: str) -> str:
    return key.strip().lower()


def require_physical_input(value: object) -> PhysicalInput:
    if isinstance(value, (Keyboard, MouseButton)):
        return value
    raise InvalidBindingError(f"expected Keyboard or MouseButton, got {value!r}")


__all__ = [
    "Keyboard",
    "MouseButton",
    "PhysicalInput",
    "normalize_key_name",
    "require_physical_input",
]
