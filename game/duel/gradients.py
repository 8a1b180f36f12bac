"""
Linear colour gradients as RGBA pixel arrays
"""

from __future__ import annotations
from typing import Sequence

import numpy as np


def linear_gradient(
    width: int,
    height: int,
    start: Sequence[int],
    end: Sequence[int],
    horizontal: bool = False,
) -> np.ndarray:
    """
    Build a (height, width, 4) uint8 array blending ``start`` into ``end``.

    Colours are RGB or RGBA. The blend runs left to right when ``horizontal``
    is set, otherwise top to bottom (row 0 is the top of the image).
    """
    assert width > 0 and height > 0, "gradient must have a positive size"

    c0 = np.array(_rgba(start), dtype=np.float32)
    c1 = np.array(_rgba(end), dtype=np.float32)

    steps = width if horizontal else height
    t = np.linspace(0.0, 1.0, steps, dtype=np.float32)[:, None]
    ramp = c0 + (c1 - c0) * t  # (steps, 4)

    if horizontal:
        pixels = np.broadcast_to(ramp[None, :, :], (height, width, 4))
    else:
        pixels = np.broadcast_to(ramp[:, None, :], (height, width, 4))
    return np.rint(pixels).astype(np.uint8)


def _rgba(color: Sequence[int]):
    if len(color) == 3:
        return (*color, 255)
    return tuple(color)
