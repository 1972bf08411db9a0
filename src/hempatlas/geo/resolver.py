# SPDX-License-Identifier: Apache-2.0
"""Free-text location resolution against static city and country tables.

Resolution is tiered. For ``"City, Country"`` style strings the first segment
is looked up in the city table; the last segment is then tried as an exact
country key and finally as a case-insensitive substring of a country key (in
either direction). Anything left over is hashed onto a small, reproducible
offset around a fixed reference point, so every non-empty string lands
somewhere on the globe and always at the same place.
"""

from __future__ import annotations

import logging
from typing import Mapping

from .models import Coordinate
from .tables import CITY_COORDS, COUNTRY_CODES, COUNTRY_COORDS, FALLBACK_COUNTRY

LOGGER = logging.getLogger(__name__)

# Fallback offsets span [-0.5, 0.49] degrees.
_FALLBACK_BUCKETS = 100


def char_code_sum(text: str) -> int:
    """Return the sum of the code points in ``text``.

    Stable across interpreter runs, unlike ``hash()`` on ``str``.
    """

    return sum(ord(ch) for ch in text)


def split_location(location: str) -> list[str]:
    return [part.strip() for part in location.split(",")]


class LocationResolver:
    """Resolve location strings to coordinates.

    Parameters
    - cities / countries: name -> ``(lat, lng)`` tables. Country order is
      significant for the substring tier.
    - fallback: reference point for unmatched strings; defaults to the
      ``United States`` country entry.
    """

    def __init__(
        self,
        cities: Mapping[str, tuple[float, float]] | None = None,
        countries: Mapping[str, tuple[float, float]] | None = None,
        *,
        fallback: Coordinate | None = None,
    ) -> None:
        if cities is None:
            cities = CITY_COORDS
        if countries is None:
            countries = COUNTRY_COORDS
        self._cities = {name: Coordinate(*pair) for name, pair in cities.items()}
        self._countries = {name: Coordinate(*pair) for name, pair in countries.items()}
        if fallback is None:
            fallback = self._countries.get(FALLBACK_COUNTRY) or Coordinate(
                *COUNTRY_COORDS[FALLBACK_COUNTRY]
            )
        self._fallback = fallback

    @property
    def fallback(self) -> Coordinate:
        return self._fallback

    def resolve(self, location: str | None) -> Coordinate | None:
        """Return the coordinate for ``location`` or ``None`` when it is blank."""

        if location is None or not location.strip():
            return None

        parts = split_location(location)
        if len(parts) > 1:
            hit = self._cities.get(parts[0])
            if hit is not None:
                return hit

        country_part = parts[-1]
        hit = self._countries.get(country_part)
        if hit is not None:
            return hit

        # A bare city name ("Austin") would otherwise fall into the substring
        # tier and match a short alias such as "US".
        if len(parts) == 1:
            hit = self._cities.get(country_part)
            if hit is not None:
                return hit

        hit = self._match_country_substring(country_part)
        if hit is not None:
            return hit

        return self.synthesize(location)

    def _match_country_substring(self, part: str) -> Coordinate | None:
        needle = part.lower()
        if not needle:
            return None
        for name, coord in self._countries.items():
            key = name.lower()
            if needle in key or key in needle:
                return coord
        return None

    def synthesize(self, location: str) -> Coordinate:
        """Map ``location`` onto a deterministic point near the fallback."""

        bucket = char_code_sum(location) % _FALLBACK_BUCKETS
        offset = (bucket - _FALLBACK_BUCKETS // 2) / _FALLBACK_BUCKETS
        LOGGER.debug("No table match for %r; using fallback offset %.2f", location, offset)
        return Coordinate.clamped(self._fallback.lat + offset, self._fallback.lng + offset)

    def country_names(self) -> list[str]:
        return sorted(self._countries)

    def city_names(self) -> list[str]:
        return sorted(self._cities)


_DEFAULT = LocationResolver()


def resolve(location: str | None) -> Coordinate | None:
    """Resolve ``location`` with the built-in tables."""

    return _DEFAULT.resolve(location)


def country_names() -> list[str]:
    return _DEFAULT.country_names()


def city_names() -> list[str]:
    return _DEFAULT.city_names()


def country_for(location: str | None) -> str | None:
    """Return the polygon-style country name for ``location``.

    Uses the last comma segment, expanding short codes (``"FR"``) to the
    ADMIN names carried by country polygons.
    """

    if location is None or not location.strip():
        return None
    country = split_location(location)[-1]
    if not country:
        return None
    return COUNTRY_CODES.get(country.upper(), country)


def city_for(location: str | None) -> str:
    """Return the city segment of ``location``, or ``"Other"`` when absent."""

    if not location:
        return "Other"
    parts = split_location(location)
    if len(parts) > 1 and parts[0]:
        return parts[0]
    return "Other"
