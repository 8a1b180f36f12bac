"""
Utility functions for duel mechanics
"""

from __future__ import annotations
from typing import Tuple


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def boxes_overlap(a, b) -> bool:
    """Check if two axis-aligned boxes overlap (touching edges do not count)"""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def midpoint(a, b) -> Tuple[float, float]:
    """Midpoint between the origins of two entities"""
    return (a.x + b.x) / 2, (a.y + b.y) / 2
