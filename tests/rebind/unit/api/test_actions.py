from __future__ import annotations

from enum import Enum, IntEnum, StrEnum

import pytest

from rebind.api.actions import require_action
from rebind.runtime.errors import InvalidBindingError


class Weapon(IntEnum):
    SWORD = 1


class Stance(StrEnum):
    CROUCH = "crouch"


class Plain(Enum):
    ONLY = 1


@pytest.mark.parametrize("action", [Weapon.SWORD, Stance.CROUCH, 7, "jump", (1, 2)])
def test_hashable_ordered_values_satisfy_contract(action) -> None:
    assert require_action(action) is action


@pytest.mark.parametrize("action", [None, [1], {"a": 1}, Plain.ONLY, object()])
def test_values_violating_contract_are_rejected(action) -> None:
    with pytest.raises(InvalidBindingError):
        require_action(action)
