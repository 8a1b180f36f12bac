"""
Session lifecycle and loop driving
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from game.configs.duel_config import RULES_CONFIG, WINDOW_CONFIG
from .styles import ProjectileStyle, style_for_identity
from .world import Outcome, Rules, World, check_outcome, decay_effects, new_world, step


@dataclass
class FixedStepClock:
    """Turns variable frame time into a whole number of fixed ticks"""
    tick_rate: int = 60
    accum: float = 0.0

    def __post_init__(self):
        if int(self.tick_rate) <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        self.tick_rate = int(self.tick_rate)

    @property
    def dt_tick(self) -> float:
        return 1.0 / self.tick_rate

    def reset(self):
        self.accum = 0.0

    def advance(self, dt: float, max_dt: float = 0.1) -> int:
        if dt <= 0.0:
            return 0
        self.accum += min(dt, max_dt)

        ticks = int((self.accum + 1e-9) / self.dt_tick)
        self.accum = max(0.0, self.accum - ticks * self.dt_tick)
        return ticks


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class DuelSession:
    """
    Owns the world for one duel and drives it tick by tick.

    With ``fixed_step`` the simulation runs at ``rules.tick_rate`` no matter
    how often ``advance`` is called; otherwise every call is one tick and game
    speed follows the display refresh rate.
    """

    def __init__(
        self,
        width: float = WINDOW_CONFIG["width"],
        height: float = WINDOW_CONFIG["height"],
        rules: Optional[Rules] = None,
        fixed_step: bool = True,
        clock: Callable[[], float] = monotonic_ms,
        on_session_end: Optional[Callable[[Outcome], None]] = None,
    ):
        self.width = width
        self.height = height
        self.rules = rules if rules is not None else Rules(**RULES_CONFIG)
        self.fixed_step = fixed_step
        self.clock = clock
        self.on_session_end = on_session_end

        self._stepper = FixedStepClock(tick_rate=self.rules.tick_rate)

        self.phase = Phase.IDLE
        self.world: Optional[World] = None
        self.opponent: Optional[str] = None
        self.opponent_style: Optional[ProjectileStyle] = None
        self.outcome: Optional[Outcome] = None

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    # ----------------------------
    # External triggers
    # ----------------------------

    def start(self, opponent: Optional[str] = None):
        """Begin a fresh duel against the chosen opponent identity"""
        if self.phase is Phase.RUNNING:
            raise RuntimeError("session already running; reset it first")

        self.world = new_world(self.width, self.height, self.rules)
        self.opponent = opponent
        self.opponent_style = style_for_identity(opponent)
        self.outcome = None
        self._stepper.reset()
        self.phase = Phase.RUNNING

    def reset(self):
        """Discard all in-flight state and go back to idle"""
        self.world = None
        self.opponent = None
        self.opponent_style = None
        self.outcome = None
        self._stepper.reset()
        self.phase = Phase.IDLE

    def key_down(self, key: str):
        if self.world is not None:
            self.world.input.key_down(key)

    def key_up(self, key: str):
        if self.world is not None:
            self.world.input.key_up(key)

    # ----------------------------
    # Loop
    # ----------------------------

    def advance(self, dt: float, now: Optional[float] = None) -> int:
        """Run as many ticks as ``dt`` seconds of frame time allow; returns ticks run"""
        if not self.running:
            return 0

        ticks = self._stepper.advance(dt) if self.fixed_step else 1
        ran = 0
        for _ in range(ticks):
            if not self.running:
                break
            self.tick(now)
            ran += 1
        return ran

    def tick(self, now: Optional[float] = None) -> Optional[Outcome]:
        """One logical tick: decay old effects, step, then check for the end"""
        if not self.running:
            return None
        if now is None:
            now = self.clock()

        decay_effects(self.world)
        step(self.world, now)

        outcome = check_outcome(self.world)
        if outcome is not None:
            self._finish(outcome)
        return outcome

    def _finish(self, outcome: Outcome):
        self.outcome = outcome
        self.phase = Phase.OVER
        if self.on_session_end is not None:
            self.on_session_end(outcome)
