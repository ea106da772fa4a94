from __future__ import annotations

import pytest

from rebind.api.physical import Keyboard, MouseButton, require_physical_input
from rebind.runtime.errors import InvalidBindingError


def test_keyboard_names_are_normalized() -> None:
    assert Keyboard(" Space ") == Keyboard("space")
    assert Keyboard("ArrowUp").key == "arrowup"
    assert hash(Keyboard("A")) == hash(Keyboard("a"))


def test_keyboard_and_button_are_distinct_inputs() -> None:
    assert Keyboard("1") != MouseButton(1)
    assert len({Keyboard("1"), MouseButton(1), Keyboard("1")}) == 2


@pytest.mark.parametrize("key", ["", "   ", 5, None])
def test_invalid_key_names_are_rejected(key) -> None:
    with pytest.raises(InvalidBindingError):
        Keyboard(key)


@pytest.mark.parametrize("button", [-1, 1.0, True, "1"])
def test_invalid_button_codes_are_rejected(button) -> None:
    with pytest.raises(InvalidBindingError):
        MouseButton(button)


def test_inputs_of_one_kind_are_ordered() -> None:
    assert sorted([MouseButton(3), MouseButton(1)]) == [MouseButton(1), MouseButton(3)]
    assert sorted([Keyboard("b"), Keyboard("a")]) == [Keyboard("a"), Keyboard("b")]


def test_require_physical_input() -> None:
    assert require_physical_input(MouseButton(0)) == MouseButton(0)
    with pytest.raises(InvalidBindingError):
        require_physical_input("space")
