"""
Simulation step tests

Movement, firing cooldowns, projectile advance, out-of-bounds culling,
player hits, projectile clashes, effect decay and the termination check.
No window or arcade dependency.
"""
import pytest

from game.duel.entities import Explosion, Side, TrailParticle
from game.duel.world import check_outcome, decay_effects, spawn_projectile, step


def hold(world, *keys):
    for key in keys:
        world.input.key_down(key)


def release(world, *keys):
    for key in keys:
        world.input.key_up(key)


class TestMovement:
    """Players move vertically while their keys are held."""

    def test_up_and_down_move_by_step(self, world):
        hold(world, "w")
        step(world, 0)
        assert world.left.y == 176

        release(world, "w")
        hold(world, "s")
        step(world, 16)
        step(world, 32)
        assert world.left.y == 184

    def test_bindings_do_not_cross_sides(self, world):
        hold(world, "ArrowUp")
        step(world, 0)
        assert world.right.y == 176
        assert world.left.y == 180

    def test_no_move_up_at_top_edge(self, world):
        world.left.y = 0
        hold(world, "w")
        step(world, 0)
        assert world.left.y == 0

    def test_no_move_down_at_bottom_edge(self, world):
        world.right.y = world.height - world.right.height
        hold(world, "ArrowDown")
        step(world, 0)
        assert world.right.y == world.height - world.right.height


class TestFiring:
    """Fire key spawns projectiles, gated by the cooldown."""

    def test_spawn_just_outside_facing_edge(self, world):
        left = spawn_projectile(world, world.left)
        right = spawn_projectile(world, world.right)

        assert left.x == world.left.x + world.left.width
        assert left.speed == 5
        assert left.owner is Side.LEFT

        assert right.x + right.width == world.right.x
        assert right.speed == -5
        assert right.owner is Side.RIGHT

        assert left.y == world.left.y + world.left.height / 2 - 10
        assert (left.width, left.height) == (40, 40)

    def test_fire_spawns_one_and_clears_ready(self, world):
        hold(world, "d")
        step(world, 1000)

        assert len(world.projectiles) == 1
        assert world.left.can_shoot is False
        assert world.left.last_shot == 1000
        # Spawned and advanced in the same tick
        assert world.projectiles[0].x == world.left.x + world.left.width + 5

    def test_held_fire_respects_cooldown(self, world):
        hold(world, "d")
        for now in (1000, 1100, 1200, 1299):
            step(world, now)
        assert len(world.projectiles) == 1

        step(world, 1300)
        assert len(world.projectiles) == 1
        assert world.left.can_shoot is True

        step(world, 1316)
        assert len(world.projectiles) == 2

    def test_cooldown_recovers_without_fire_held(self, world):
        hold(world, "ArrowLeft")
        step(world, 1000)
        release(world, "ArrowLeft")

        step(world, 1200)
        assert world.right.can_shoot is False
        step(world, 1300)
        assert world.right.can_shoot is True


class TestProjectiles:
    """Projectiles advance, leave trails and leave the field."""

    def test_advance_emits_trail_at_new_position(self, world, place):
        b = place(world, Side.LEFT, 300, 50, speed=5)
        result = step(world, 0)

        assert b.x == 305
        assert len(result.trails) == 1
        trail = result.trails[0]
        assert (trail.x, trail.y) == (305, 50 + b.height / 2)
        assert trail.alpha == 0.5
        assert trail.radius == 6
        assert world.trails == [trail]

    def test_one_trail_per_projectile_per_tick(self, world, place):
        place(world, Side.LEFT, 300, 50, speed=5)
        place(world, Side.LEFT, 300, 400, speed=5)
        step(world, 0)
        step(world, 16)
        assert len(world.trails) == 4

    def test_out_of_bounds_removed(self, world, place):
        place(world, Side.RIGHT, 2, 50, speed=-5)
        place(world, Side.LEFT, world.width - 2, 50, speed=5)
        result = step(world, 0)

        assert world.projectiles == []
        # Trail is emitted before culling
        assert len(result.trails) == 2

    def test_out_of_bounds_cannot_score(self, world, place):
        # Overlaps the left player but has already left the field
        world.left.x = -30
        place(world, Side.RIGHT, 1, world.left.y + 10, speed=-5)
        step(world, 0)
        assert world.left.health == 30


class TestPlayerHits:
    """Projectiles damage only the opposing player."""

    def test_left_projectile_hits_right_player(self, world, place):
        place(world, Side.LEFT, 650, 190)
        result = step(world, 0)

        assert world.right.health == 20
        assert world.projectiles == []
        assert result.hits[Side.RIGHT] == 1

    def test_own_projectile_does_no_damage(self, world, place):
        place(world, Side.LEFT, 100, 200)
        step(world, 0)

        assert world.left.health == 30
        assert len(world.projectiles) == 1

    def test_touching_edges_is_not_a_hit(self, world, place):
        place(world, Side.LEFT, world.right.x - 40, 190)
        step(world, 0)
        assert world.right.health == 30

    def test_health_floors_at_zero(self, world, place):
        world.right.health = 5
        place(world, Side.LEFT, 650, 190)
        step(world, 0)
        assert world.right.health == 0

    def test_three_hits_end_the_duel(self, world, place):
        for now in (0, 16, 32):
            place(world, Side.RIGHT, 100, 200)
            step(world, now)

        assert world.left.health == 0
        outcome = check_outcome(world)
        assert outcome.winner is Side.RIGHT
        assert outcome.loser is Side.LEFT
        assert outcome.banner == "World Peace Achieved"


class TestClashes:
    """Opposing projectiles that overlap cancel out in an explosion."""

    def test_head_on_clash_mid_field(self, world):
        # Line the projectiles up vertically
        world.right.y = world.left.y + world.left.height / 2 - world.right.height / 2

        hold(world, "d", "ArrowLeft")
        step(world, 1000)
        release(world, "d", "ArrowLeft")

        now = 1000
        while world.projectiles:
            now += 16
            step(world, now)

        assert len(world.explosions) == 1
        explosion = world.explosions[0]
        assert (explosion.x, explosion.y) == (380, 245)
        assert explosion.duration == 12
        assert world.left.health == 30
        assert world.right.health == 30

    def test_same_side_never_clashes(self, world, place):
        place(world, Side.LEFT, 400, 50)
        place(world, Side.LEFT, 410, 60)
        step(world, 0)

        assert len(world.projectiles) == 2
        assert world.explosions == []

    def test_one_clash_per_projectile(self, world, place):
        place(world, Side.LEFT, 400, 50)
        place(world, Side.RIGHT, 400, 50)
        survivor = place(world, Side.RIGHT, 400, 50)
        result = step(world, 0)

        assert len(result.explosions) == 1
        assert world.projectiles == [survivor]

    def test_pairs_resolved_in_creation_order(self, world, place):
        for owner in (Side.LEFT, Side.RIGHT, Side.LEFT, Side.RIGHT):
            place(world, owner, 400, 50)
        step(world, 0)

        assert world.projectiles == []
        assert len(world.explosions) == 2

    def test_explosion_at_midpoint(self, world, place):
        place(world, Side.LEFT, 400, 50)
        place(world, Side.RIGHT, 420, 70)
        step(world, 0)

        assert (world.explosions[0].x, world.explosions[0].y) == (410, 60)


class TestInvariants:
    """Properties that must hold over a long scripted fight."""

    def test_health_owner_and_bounds_over_many_ticks(self, world):
        hold(world, "d", "ArrowLeft", "s")
        owners = {}
        prev = {side: p.health for side, p in world.players.items()}

        now = 0
        for i in range(600):
            if i % 50 == 0:
                world.input.key_down("ArrowDown" if i % 100 else "ArrowUp")
                world.input.key_up("ArrowUp" if i % 100 else "ArrowDown")
            now += 16
            step(world, now)

            for b in world.projectiles:
                owners.setdefault(id(b), b.owner)
                assert owners[id(b)] is b.owner
                assert 0 <= b.x <= world.width

            for side, p in world.players.items():
                assert 0 <= p.health <= prev[side]
                prev[side] = p.health


class TestDecay:
    """Trails fade and explosions count down until they expire."""

    def test_trail_fades_then_expires(self, world):
        world.trails.append(TrailParticle(x=0, y=0))
        for _ in range(16):
            decay_effects(world)
        assert len(world.trails) == 1
        assert world.trails[0].alpha == pytest.approx(0.02)

        decay_effects(world)
        assert world.trails == []

    def test_explosion_removed_at_zero(self, world):
        explosion = Explosion(x=0, y=0)
        world.explosions.append(explosion)
        for _ in range(11):
            decay_effects(world)
        assert world.explosions == [explosion]
        assert explosion.alpha == pytest.approx(1 / 12)

        decay_effects(world)
        assert world.explosions == []
        assert explosion.duration == 0

        decay_effects(world)
        assert world.explosions == []
        assert explosion.duration == 0


class TestOutcome:
    """Termination check after each step."""

    def test_no_outcome_while_both_alive(self, world):
        assert check_outcome(world) is None

    def test_right_defeat_left_wins(self, world):
        world.right.health = 0
        outcome = check_outcome(world)
        assert outcome.winner is Side.LEFT
        assert outcome.banner == "Fruity RULEZ!"

    def test_simultaneous_defeat_checks_left_first(self, world):
        world.left.health = 0
        world.right.health = 0
        assert check_outcome(world).winner is Side.RIGHT
