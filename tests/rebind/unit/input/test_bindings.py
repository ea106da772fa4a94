from __future__ import annotations

import pytest

from rebind.api.physical import Keyboard, MouseButton
from rebind.input.bindings import DENSE_BUTTON_LIMIT, BindingTable, DenseBindingTable
from tests.rebind.helpers import GameAction

PAIRS = (
    (Keyboard("w"), GameAction.FORWARD),
    (Keyboard("up"), GameAction.FORWARD),
    (MouseButton(1), GameAction.FIRE),
    (MouseButton(4), GameAction.JUMP),
)


@pytest.mark.parametrize("table_cls", [BindingTable, DenseBindingTable])
def test_lookup_and_introspection(table_cls) -> None:
    table = table_cls(PAIRS)

    assert table.lookup(Keyboard("W")) == GameAction.FORWARD
    assert table.lookup(MouseButton(4)) == GameAction.JUMP
    assert table.lookup(MouseButton(2)) is None
    assert table.lookup(MouseButton(40)) is None
    assert table.lookup(Keyboard("q")) is None
    assert len(table) == 4
    assert table.actions() == frozenset({GameAction.FORWARD, GameAction.FIRE, GameAction.JUMP})
    assert table.inputs_for(GameAction.FORWARD) == (Keyboard("w"), Keyboard("up"))
    assert table.inputs_for(GameAction.BACK) == ()
    assert Keyboard("up") in table
    assert MouseButton(3) not in table
    assert "w" not in table


@pytest.mark.parametrize("table_cls", [BindingTable, DenseBindingTable])
def test_later_pairs_override_earlier_ones(table_cls) -> None:
    table = table_cls(
        [
            (MouseButton(1), GameAction.FIRE),
            (MouseButton(1), GameAction.JUMP),
            (Keyboard("x"), GameAction.LEFT),
            (Keyboard("x"), GameAction.RIGHT),
        ]
    )
    assert table.lookup(MouseButton(1)) == GameAction.JUMP
    assert table.lookup(Keyboard("x")) == GameAction.RIGHT
    assert len(table) == 2


def test_dense_and_hash_tables_compare_equal() -> None:
    assert BindingTable(PAIRS) == DenseBindingTable(PAIRS)
    assert BindingTable(PAIRS) != BindingTable(PAIRS[:2])
    assert BindingTable() == DenseBindingTable()


def test_empty_table_has_no_actions() -> None:
    table: BindingTable[GameAction] = BindingTable()
    assert len(table) == 0
    assert table.actions() == frozenset()
    assert list(table.items()) == []


def test_dense_table_keeps_high_button_codes_out_of_the_list() -> None:
    below = MouseButton(DENSE_BUTTON_LIMIT - 1)
    above = MouseButton(DENSE_BUTTON_LIMIT)
    far = MouseButton(20_000_000)
    pairs = [(below, GameAction.FIRE), (above, GameAction.JUMP), (far, GameAction.BACK)]
    dense = DenseBindingTable(pairs)
    sparse = BindingTable(pairs)

    assert len(dense._buttons) == DENSE_BUTTON_LIMIT
    for physical in (below, above, far, MouseButton(DENSE_BUTTON_LIMIT + 1), MouseButton(0)):
        assert dense.lookup(physical) == sparse.lookup(physical)
    assert len(dense) == len(sparse) == 3
    assert dense == sparse
