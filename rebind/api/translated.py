"""Translated output variants produced by the translator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic

from rebind.api.actions import A


@dataclass(frozen=True, slots=True)
class Press(Generic[A]):
    """Rising edge of a bound action."""

    action: A


@dataclass(frozen=True, slots=True)
class Release(Generic[A]):
    """Falling edge of a bound action."""

    action: A


class MotionKind(StrEnum):
    CURSOR = "cursor"
    RELATIVE = "relative"
    SCROLL = "scroll"


@dataclass(frozen=True, slots=True)
class Motion:
    """Resolved mouse motion.

    ``CURSOR`` carries window coordinates with the origin in the top left
    corner, ``RELATIVE`` carries the delta since the previous sample and
    ``SCROLL`` carries wheel deltas.
    """

    kind: MotionKind
    x: float
    y: float


Translated = Press[A] | Release[A] | Motion


__all__ = ["Motion", "MotionKind", "Press", "Release", "Translated"]
