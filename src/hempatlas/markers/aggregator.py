# SPDX-License-Identifier: Apache-2.0
"""Join fetched entities with layer state into renderable markers.

``aggregate`` is a pure transform: the same entities, layers, auth state and
zoom always yield the same list, in the same order. It is rebuilt from
scratch on every change rather than patched.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Literal, Mapping, Sequence

from hempatlas.geo import LocationResolver, city_for, country_for, jitter
from hempatlas.layers.registry import EntityType, Layer, LayerRegistry, is_visible

from .entities import Entity, Organization, Product

LOGGER = logging.getLogger(__name__)

JitterKey = Literal["location", "entity"]
JITTER_KEYS: tuple[str, ...] = ("location", "entity")

_DEFAULT_RESOLVER = LocationResolver()


@dataclass(frozen=True)
class Marker:
    lat: float
    lng: float
    size: float
    color: str
    label: str
    type: EntityType
    data: Entity
    layer_id: str
    location: str


class OrganizationIndex:
    """Lookup of organizations by id and by name (first occurrence wins)."""

    def __init__(self, organizations: Iterable[Organization] = ()) -> None:
        self._by_id: dict[str, Organization] = {}
        self._by_name: dict[str, Organization] = {}
        for org in organizations:
            if org.id is not None:
                self._by_id.setdefault(org.id, org)
            self._by_name.setdefault(org.name, org)

    @classmethod
    def from_collections(
        cls, entities_by_layer: Mapping[str, Sequence[Entity]]
    ) -> OrganizationIndex:
        return cls(
            entity
            for entities in entities_by_layer.values()
            for entity in entities
            if isinstance(entity, Organization)
        )

    def by_id(self, org_id: str | None) -> Organization | None:
        return self._by_id.get(org_id) if org_id else None

    def by_name(self, name: str | None) -> Organization | None:
        return self._by_name.get(name) if name else None


def location_for(entity: Entity, organizations: OrganizationIndex) -> str | None:
    """Return the location string an entity should be plotted at.

    Products carry no location of their own; they sit at their owning
    organization, found by ``company_id``, then the embedded company
    location, then the organization matching the embedded company name.
    """

    if isinstance(entity, Organization):
        return entity.location
    if isinstance(entity, Product):
        owner = organizations.by_id(entity.company_id)
        if owner is not None and owner.location:
            return owner.location
        if entity.company_location:
            return entity.company_location
        owner = organizations.by_name(entity.company_name)
        if owner is not None:
            return owner.location
    return None


def _jitter_seed(location: str, entity: Entity, jitter_key: str) -> str:
    if jitter_key == "entity":
        return f"{location}#{entity.id or entity.name}"
    return location


def aggregate(
    entities_by_layer: Mapping[str, Sequence[Entity]],
    layers: Sequence[Layer],
    is_authenticated: bool,
    zoom: float,
    *,
    resolver: LocationResolver | None = None,
    jitter_key: JitterKey = "location",
) -> list[Marker]:
    """Build the marker list for the visible layers."""

    if jitter_key not in JITTER_KEYS:
        raise ValueError(f"jitter_key must be one of {JITTER_KEYS}, got {jitter_key!r}")
    resolver = resolver or _DEFAULT_RESOLVER
    organizations = OrganizationIndex.from_collections(entities_by_layer)

    markers: list[Marker] = []
    for layer in layers:
        if not is_visible(layer, is_authenticated, zoom):
            continue
        for entity in entities_by_layer.get(layer.id, ()):
            location = location_for(entity, organizations)
            if not location or not location.strip():
                continue
            base = resolver.resolve(location)
            if base is None:
                continue
            position = jitter(base, _jitter_seed(location, entity, jitter_key))
            markers.append(
                Marker(
                    lat=position.lat,
                    lng=position.lng,
                    size=layer.marker_size,
                    color=layer.color,
                    label=entity.name,
                    type=layer.entity_type,
                    data=entity,
                    layer_id=layer.id,
                    location=location,
                )
            )
    return markers


class MarkerAggregator:
    """Marker computation bound to a layer registry.

    Besides the pure ``aggregate`` call this pushes counts back into the
    registry: ``count`` is the number of fetched entities and
    ``plotted_count`` the number that produced a marker.
    """

    def __init__(
        self,
        registry: LayerRegistry,
        *,
        resolver: LocationResolver | None = None,
        jitter_key: JitterKey = "location",
    ) -> None:
        if jitter_key not in JITTER_KEYS:
            raise ValueError(
                f"jitter_key must be one of {JITTER_KEYS}, got {jitter_key!r}"
            )
        self.registry = registry
        self.resolver = resolver or _DEFAULT_RESOLVER
        self.jitter_key = jitter_key

    def record_fetched(self, layer_id: str, entities: Sequence[Entity]) -> None:
        self.registry.set_count(layer_id, len(entities))

    def compute(
        self,
        entities_by_layer: Mapping[str, Sequence[Entity]],
        is_authenticated: bool,
        zoom: float,
    ) -> list[Marker]:
        markers = aggregate(
            entities_by_layer,
            self.registry.layers,
            is_authenticated,
            zoom,
            resolver=self.resolver,
            jitter_key=self.jitter_key,
        )
        plotted = Counter(m.layer_id for m in markers)
        for layer in self.registry.layers:
            self.registry.set_plotted_count(layer.id, plotted.get(layer.id, 0))
        LOGGER.debug(
            "Markers updated: %s",
            ", ".join(f"{lid}={n}" for lid, n in sorted(plotted.items())) or "none",
        )
        return markers


@dataclass
class CountrySummary:
    """Per-country marker counts.

    ``cities`` maps city to marker count; ``city_labels`` maps city to the
    labels of the markers placed there, in marker order.
    """

    name: str
    entities: int = 0
    cities: dict[str, int] = field(default_factory=dict)
    city_labels: dict[str, list[str]] = field(default_factory=dict)

    @property
    def city_count(self) -> int:
        return len(self.cities)

    @property
    def labels(self) -> list[str]:
        return [label for names in self.city_labels.values() for label in names]


def country_summaries(markers: Iterable[Marker]) -> dict[str, CountrySummary]:
    """Group markers by country and city, in first-seen order."""

    summaries: dict[str, CountrySummary] = {}
    for marker in markers:
        country = country_for(marker.location)
        if country is None:
            continue
        summary = summaries.setdefault(country, CountrySummary(name=country))
        summary.entities += 1
        city = city_for(marker.location)
        summary.cities[city] = summary.cities.get(city, 0) + 1
        summary.city_labels.setdefault(city, []).append(marker.label)
    return summaries
