# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from dataclasses import dataclass

LAT_BOUNDS = (-90.0, 90.0)
LNG_BOUNDS = (-180.0, 180.0)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A WGS84 point in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not LAT_BOUNDS[0] <= self.lat <= LAT_BOUNDS[1]:
            raise ValueError(f"latitude out of range: {self.lat}")
        if not LNG_BOUNDS[0] <= self.lng <= LNG_BOUNDS[1]:
            raise ValueError(f"longitude out of range: {self.lng}")

    @classmethod
    def clamped(cls, lat: float, lng: float) -> Coordinate:
        """Build a coordinate, pinning out-of-range values to the bounds."""

        return cls(
            lat=min(max(lat, LAT_BOUNDS[0]), LAT_BOUNDS[1]),
            lng=min(max(lng, LNG_BOUNDS[0]), LNG_BOUNDS[1]),
        )

    def as_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}
