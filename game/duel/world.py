"""
World state and the per-tick simulation step
--------------------------------------------
- One World owns everything a session mutates: both players, live
  projectiles, trail particles, explosions and the key map
- step() advances exactly one tick: movement, firing/cooldown, projectile
  advance + trail emission, out-of-bounds culling, player hits, clashes
- decay_effects() fades trails and counts down explosions
- check_outcome() is the termination check run by the loop driver

Coordinates use a top-left origin with y growing downward.
Entities are removed by flagging them dead and compacting afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from game.configs.duel_config import BANNERS, PLAYER_CONFIG, RULES_CONFIG, WINDOW_CONFIG
from .entities import Explosion, Player, Projectile, Side, TrailParticle
from .input_state import InputState, KeyBindings
from .utils import boxes_overlap, clamp, midpoint


@dataclass(frozen=True)
class Rules:
    """Game constants, all per tick unless stated otherwise"""
    start_health: int = 30
    damage: int = 10
    move_step: float = 4
    shoot_cooldown_ms: float = 300
    projectile_speed: float = 5
    projectile_size: Tuple[float, float] = (40, 40)
    trail_alpha: float = 0.5
    trail_decay: float = 0.03
    trail_radius: float = 6
    explosion_radius: float = 15
    explosion_duration: int = 12
    tick_rate: int = 60

    def __post_init__(self):
        assert self.start_health > 0, "start_health must be positive"
        assert self.damage > 0, "damage must be positive"
        assert self.explosion_duration > 0, "explosion_duration must be positive"


@dataclass
class Outcome:
    """How a finished session ended"""
    winner: Side
    banner: str

    @property
    def loser(self) -> Side:
        return self.winner.opponent


@dataclass
class StepResult:
    """Effects created during one step"""
    trails: List[TrailParticle] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)
    hits: Dict[Side, int] = field(default_factory=lambda: {Side.LEFT: 0, Side.RIGHT: 0})


@dataclass
class World:
    width: float
    height: float
    rules: Rules
    players: Dict[Side, Player]
    bindings: Dict[Side, KeyBindings]
    projectiles: List[Projectile] = field(default_factory=list)
    trails: List[TrailParticle] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)
    input: InputState = field(default_factory=InputState)
    tick: int = 0

    @property
    def left(self) -> Player:
        return self.players[Side.LEFT]

    @property
    def right(self) -> Player:
        return self.players[Side.RIGHT]


def new_world(
    width: float = WINDOW_CONFIG["width"],
    height: float = WINDOW_CONFIG["height"],
    rules: Optional[Rules] = None,
) -> World:
    """Build a fresh world with both players at their spawn boxes"""
    if rules is None:
        rules = Rules(**RULES_CONFIG)

    players = {}
    for side in Side:
        x, y, w, h = PLAYER_CONFIG[side.value]
        players[side] = Player(side=side, x=x, y=y, width=w, height=h, health=rules.start_health)

    return World(
        width=width,
        height=height,
        rules=rules,
        players=players,
        bindings={side: KeyBindings.for_side(side) for side in Side},
    )


# ----------------------------
# Simulation step
# ----------------------------

def step(world: World, now: float) -> StepResult:
    """
    Advance the world by one tick.

    ``now`` is a millisecond timestamp, used only for fire-rate cooldowns.
    New trails and explosions are appended to the world's collections and
    also returned.
    """
    result = StepResult()

    _move_players(world)
    _fire(world, now)
    _advance_projectiles(world, result)
    _cull_out_of_bounds(world)
    _player_hits(world, result)
    _clashes(world, result)

    world.tick += 1
    return result


def _move_players(world: World):
    step_px = world.rules.move_step
    for side, p in world.players.items():
        keys = world.bindings[side]
        if world.input.is_held(keys.up) and p.y > 0:
            p.y -= step_px
        if world.input.is_held(keys.down) and p.y + p.height < world.height:
            p.y += step_px


def _fire(world: World, now: float):
    for side, p in world.players.items():
        if world.input.is_held(world.bindings[side].fire) and p.can_shoot:
            world.projectiles.append(spawn_projectile(world, p))
            p.can_shoot = False
            p.last_shot = now

        # Cooldown recovery runs whether or not fire is held
        if not p.can_shoot and now - p.last_shot >= world.rules.shoot_cooldown_ms:
            p.can_shoot = True


def spawn_projectile(world: World, p: Player) -> Projectile:
    """Create a projectile just outside the player's facing edge"""
    w, h = world.rules.projectile_size
    direction = p.side.direction
    x = p.x + p.width if direction > 0 else p.x - w
    return Projectile(
        owner=p.side,
        x=x,
        y=p.y + p.height / 2 - 10,
        speed=world.rules.projectile_speed * direction,
        width=w,
        height=h,
    )


def _advance_projectiles(world: World, result: StepResult):
    rules = world.rules
    for b in world.projectiles:
        b.x += b.speed
        trail = TrailParticle(
            x=b.x,
            y=b.y + b.height / 2,
            alpha=rules.trail_alpha,
            radius=rules.trail_radius,
        )
        world.trails.append(trail)
        result.trails.append(trail)


def _cull_out_of_bounds(world: World):
    for b in world.projectiles:
        if b.x < 0 or b.x > world.width:
            b.alive = False
    world.projectiles = [b for b in world.projectiles if b.alive]


def _player_hits(world: World, result: StepResult):
    for b in world.projectiles:
        target = world.players[b.owner.opponent]
        if boxes_overlap(b, target):
            target.health = int(clamp(target.health - world.rules.damage, 0, world.rules.start_health))
            b.alive = False
            result.hits[target.side] += 1
    world.projectiles = [b for b in world.projectiles if b.alive]


def _clashes(world: World, result: StepResult):
    # Creation order; each projectile clashes with at most one opponent per tick
    live = world.projectiles
    for i, b in enumerate(live):
        if not b.alive:
            continue
        for other in live[i + 1:]:
            if not other.alive or other.owner == b.owner:
                continue
            if boxes_overlap(b, other):
                x, y = midpoint(b, other)
                explosion = Explosion(
                    x=x,
                    y=y,
                    radius=world.rules.explosion_radius,
                    duration=world.rules.explosion_duration,
                    max_duration=world.rules.explosion_duration,
                )
                world.explosions.append(explosion)
                result.explosions.append(explosion)
                b.alive = False
                other.alive = False
                break
    world.projectiles = [b for b in live if b.alive]


# ----------------------------
# Effect decay / termination
# ----------------------------

def decay_effects(world: World):
    """Fade trails and count down explosions, dropping the expired ones"""
    for t in world.trails:
        t.alpha -= world.rules.trail_decay
    world.trails = [t for t in world.trails if t.alpha > 0]

    for e in world.explosions:
        e.duration -= 1
    world.explosions = [e for e in world.explosions if e.duration > 0]


def check_outcome(world: World) -> Optional[Outcome]:
    """
    Return the outcome once either player is out of health.

    The left player's defeat is checked first, so if both drop to zero on
    the same tick the right side is declared winner.
    """
    if world.left.health <= 0:
        winner = Side.RIGHT
    elif world.right.health <= 0:
        winner = Side.LEFT
    else:
        return None
    return Outcome(winner=winner, banner=BANNERS["winner"][winner.value])
