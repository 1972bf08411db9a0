# SPDX-License-Identifier: Apache-2.0
"""Location resolution and jitter."""

from __future__ import annotations

from .jitter import MAX_JITTER_DEG, jitter, jitter_offsets
from .models import Coordinate
from .resolver import (
    LocationResolver,
    city_for,
    city_names,
    country_for,
    country_names,
    resolve,
)

__all__ = [
    "MAX_JITTER_DEG",
    "Coordinate",
    "LocationResolver",
    "city_for",
    "city_names",
    "country_for",
    "country_names",
    "jitter",
    "jitter_offsets",
    "resolve",
]
