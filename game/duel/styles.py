"""
Cosmetic projectile styles chosen from the opponent's identity
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from game.configs.duel_config import (
    DEFAULT_PROJECTILE_STYLE,
    LEFT_PROJECTILE_STYLE,
    PROJECTILE_STYLES,
    STYLE_COLORS,
)


@dataclass(frozen=True)
class ProjectileStyle:
    name: str
    color: Tuple[int, int, int]


def _style(name: str) -> ProjectileStyle:
    return ProjectileStyle(name=name, color=STYLE_COLORS[name])


def style_for_identity(identity: Optional[str]) -> ProjectileStyle:
    """
    Map an opponent identity to its projectile style.

    Matching is by substring, so an asset path such as ``assets/zen.png``
    resolves the same as ``zen``. Anything unrecognised gets the default.
    """
    if identity:
        lowered = identity.lower()
        for key, name in PROJECTILE_STYLES.items():
            if key in lowered:
                return _style(name)
    return _style(DEFAULT_PROJECTILE_STYLE)


def left_style() -> ProjectileStyle:
    return _style(LEFT_PROJECTILE_STYLE)
