"""Mouse interpretation settings and motion resolution."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import StrEnum

from rebind.api.translated import Motion, MotionKind
from rebind.runtime.errors import InvalidMouseModeError, InvalidViewportError


class MouseMode(StrEnum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"

    @classmethod
    def parse(cls, value: MouseMode | str) -> MouseMode:
        if isinstance(value, MouseMode):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidMouseModeError(f"unknown mouse mode: {value!r}")


def validate_viewport_size(size: tuple[float, float]) -> tuple[float, float]:
    """Return ``(width, height)`` or raise for missing/non-positive extents."""
    try:
        width, height = size
    except (TypeError, ValueError) as exc:
        raise InvalidViewportError(f"viewport size must be a (width, height) pair, got {size!r}") from exc
    for label, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidViewportError(f"viewport {label} must be a number, got {value!r}")
        if not value > 0:
            raise InvalidViewportError(f"viewport {label} must be > 0, got {value!r}")
    return width, height


@dataclass(frozen=True, slots=True)
class MouseSettings:
    """Window extents, interpretation mode and axis inversion."""

    width: float
    height: float
    mode: MouseMode = MouseMode.ABSOLUTE
    x_motion_inverted: bool = False
    y_motion_inverted: bool = False
    x_scroll_inverted: bool = False
    y_scroll_inverted: bool = False

    def __post_init__(self) -> None:
        validate_viewport_size((self.width, self.height))
        object.__setattr__(self, "mode", MouseMode.parse(self.mode))

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def with_size(self, size: tuple[float, float]) -> MouseSettings:
        width, height = validate_viewport_size(size)
        return replace(self, width=width, height=height)


class MouseTranslator:
    """Resolve raw cursor and wheel samples according to ``MouseSettings``.

    Samples that do not convert to finite floats are dropped and leave the
    relative-mode anchor untouched.
    """

    def __init__(self, settings: MouseSettings) -> None:
        self._settings = settings
        self._last_position: tuple[float, float] | None = None

    @property
    def settings(self) -> MouseSettings:
        return self._settings

    def translate_cursor(self, x: float, y: float) -> Motion | None:
        sample = _finite_pair(x, y)
        if sample is None:
            return None
        fx, fy = sample
        settings = self._settings
        if settings.mode is MouseMode.RELATIVE:
            previous = self._last_position
            self._last_position = sample
            if previous is None:
                return None
            return Motion(MotionKind.RELATIVE, fx - previous[0], fy - previous[1])
        cx = min(max(fx, 0.0), float(settings.width))
        cy = min(max(fy, 0.0), float(settings.height))
        if settings.x_motion_inverted:
            cx = float(settings.width) - cx
        if settings.y_motion_inverted:
            cy = float(settings.height) - cy
        return Motion(MotionKind.CURSOR, cx, cy)

    def translate_scroll(self, dx: float, dy: float) -> Motion | None:
        sample = _finite_pair(dx, dy)
        if sample is None:
            return None
        mx = -1.0 if self._settings.x_scroll_inverted else 1.0
        my = -1.0 if self._settings.y_scroll_inverted else 1.0
        return Motion(MotionKind.SCROLL, sample[0] * mx, sample[1] * my)


def _finite_pair(x: object, y: object) -> tuple[float, float] | None:
    try:
        fx = float(x)  # type: ignore[arg-type]
        fy = float(y)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None
    if not (math.isfinite(fx) and math.isfinite(fy)):
        return None
    return fx, fy


__all__ = ["MouseMode", "MouseSettings", "MouseTranslator", "validate_viewport_size"]
