"""
Keyboard state shared between the window and the simulation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from game.configs.duel_config import KEY_BINDINGS
from .entities import Side


@dataclass(frozen=True)
class KeyBindings:
    """Keys controlling one player"""
    up: str
    down: str
    fire: str

    @classmethod
    def for_side(cls, side: Side) -> "KeyBindings":
        return cls(**KEY_BINDINGS[side.value])


@dataclass
class InputState:
    """Held/released state per key identifier, updated by key edges"""
    held: Dict[str, bool] = field(default_factory=dict)

    def key_down(self, key: str):
        self.held[key] = True

    def key_up(self, key: str):
        self.held[key] = False

    def is_held(self, key: str) -> bool:
        return self.held.get(key, False)

    def clear(self):
        self.held.clear()
