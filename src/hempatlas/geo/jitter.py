# SPDX-License-Identifier: Apache-2.0
"""Deterministic positional jitter for co-located markers."""

from __future__ import annotations

from .models import Coordinate
from .resolver import char_code_sum

MAX_JITTER_DEG = 0.1

# 21 steps of 0.01 degrees cover [-0.1, 0.1] inclusive.
_STEPS = 21
_STEP_DEG = MAX_JITTER_DEG / (_STEPS // 2)


def jitter_offsets(seed: str) -> tuple[float, float]:
    """Return ``(dlat, dlng)`` for ``seed``, each within ``+-MAX_JITTER_DEG``."""

    h = char_code_sum(seed)
    dlat = ((h % _STEPS) - _STEPS // 2) * _STEP_DEG
    dlng = (((h // _STEPS) % _STEPS) - _STEPS // 2) * _STEP_DEG
    return dlat, dlng


def jitter(coord: Coordinate, seed: str) -> Coordinate:
    """Offset ``coord`` by a small amount derived only from ``seed``."""

    dlat, dlng = jitter_offsets(seed)
    return Coordinate.clamped(coord.lat + dlat, coord.lng + dlng)
