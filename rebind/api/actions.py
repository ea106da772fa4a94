"""Logical action capability contract."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from rebind.runtime.errors import InvalidBindingError


class Action(Protocol):
    """Small closed-set value the embedding application binds inputs to.

    Any hashable, totally ordered value works: ``IntEnum``/``StrEnum``
    members, small ints or short strings.
    """

    def __hash__(self) -> int: ...

    def __eq__(self, other: object, /) -> bool: ...

    def __lt__(self, other: Any, /) -> bool: ...


A = TypeVar("A", bound=Action)


def require_action(action: A) -> A:
    """Validate the action contract, raising at configuration time."""
    if action is None:
        raise InvalidBindingError("action must not be None")
    try:
        hash(action)
    except TypeError as exc:
        raise InvalidBindingError(f"action {action!r} is not hashable") from exc
    try:
        action < action  # noqa: B015
    except TypeError as exc:
        raise InvalidBindingError(f"action {action!r} is not orderable") from exc
    return action


__all__ = ["A", "Action", "require_action"]
