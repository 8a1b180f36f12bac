"""
Duel entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum


class Side(str, Enum):
    """Which half of the playfield an entity belongs to"""
    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT

    @property
    def direction(self) -> int:
        """Horizontal travel direction of this side's projectiles"""
        return 1 if self is Side.LEFT else -1


@dataclass
class Player:
    """One of the two duelists"""
    side: Side
    x: float
    y: float
    width: float
    height: float
    health: int = 30
    can_shoot: bool = True
    last_shot: float = 0.0  # ms


@dataclass
class Projectile:
    """Horizontal projectile fired by a player"""
    owner: Side
    x: float
    y: float
    speed: float  # signed, px per tick
    width: float = 40.0
    height: float = 40.0
    alive: bool = True


@dataclass
class TrailParticle:
    """Fading marker left behind a moving projectile"""
    x: float
    y: float
    alpha: float = 0.5
    radius: float = 6.0


@dataclass
class Explosion:
    """Flash left where two opposing projectiles clashed"""
    x: float
    y: float
    radius: float = 15.0
    duration: int = 12
    max_duration: int = 12

    @property
    def alpha(self) -> float:
        return max(0.0, self.duration / self.max_duration)
