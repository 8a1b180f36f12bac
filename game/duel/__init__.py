"""Duel module - two-player local arcade duel"""

from .session import DuelSession, FixedStepClock, Phase
from .world import Outcome, Rules, World, check_outcome, decay_effects, new_world, step

__all__ = [
    'DuelSession', 'FixedStepClock', 'Phase',
    'Outcome', 'Rules', 'World', 'check_outcome', 'decay_effects', 'new_world', 'step',
]
