import pytest

from game.duel.entities import Projectile, Side
from game.duel.world import new_world


@pytest.fixture
def world():
    return new_world()


@pytest.fixture
def place():
    """Drop a stationary projectile into a world"""
    def _place(world, owner: Side, x: float, y: float, speed: float = 0.0) -> Projectile:
        b = Projectile(owner=owner, x=x, y=y, speed=speed)
        world.projectiles.append(b)
        return b
    return _place
