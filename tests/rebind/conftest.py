from __future__ import annotations

import pytest

from rebind.api.physical import Keyboard
from rebind.input.builder import TranslatorBuilder
from rebind.runtime.config import reset_runtime_config
from tests.rebind.helpers import GameAction


@pytest.fixture(autouse=True)
def _isolated_runtime_config():
    reset_runtime_config()
    yield
    reset_runtime_config()


@pytest.fixture
def movement_builder() -> TranslatorBuilder[GameAction]:
    return (
        TranslatorBuilder((800, 600))
        .with_action_mapping(Keyboard("Up"), GameAction.FORWARD)
        .with_action_mapping(Keyboard("w"), GameAction.FORWARD)
        .with_action_mapping(Keyboard("Down"), GameAction.BACK)
        .with_action_mapping(Keyboard("s"), GameAction.BACK)
        .with_action_mapping(Keyboard("Left"), GameAction.LEFT)
        .with_action_mapping(Keyboard("a"), GameAction.LEFT)
        .with_action_mapping(Keyboard("Right"), GameAction.RIGHT)
        .with_action_mapping(Keyboard("d"), GameAction.RIGHT)
    )
