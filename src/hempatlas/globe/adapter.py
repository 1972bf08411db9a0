# SPDX-License-Identifier: Apache-2.0
"""Translate markers, country polygons and style into globe render props.

The adapter owns only view state (hovered country, selected marker, camera).
Everything it hands to a renderer is declarative and JSON-serializable; the
surface is remounted whenever ``surface_key`` changes instead of mutating a
live scene.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

from hempatlas.layers.registry import EntityType
from hempatlas.markers.aggregator import Marker
from hempatlas.markers.entities import Organization, Product
from hempatlas.utils.serialize import to_obj

from .style import StyleConfig, StyleConfigStore

LOGGER = logging.getLogger(__name__)

HOVER_CAP_COLOR = "#ffffff"
GRID_STROKE_COLOR = "#ffffff"
FAINT_STROKE_COLOR = "rgba(255,255,255,0.4)"
HOVER_ALTITUDE = 0.05
BASE_ALTITUDE = 0.01
POINT_ALTITUDE = 0.03
ATMOSPHERE_SCALE = 0.35
NO_DESCRIPTION = "No description available"

ZOOM_STEP = 0.5
MIN_ALTITUDE = 1.5
MAX_ALTITUDE = 4.0


def feature_name(feature: Mapping[str, Any] | None) -> str | None:
    """Return the country name of a GeoJSON feature.

    Natural Earth features carry ``ADMIN``/``NAME``; other world files only a
    lowercase ``name``.
    """

    if not feature:
        return None
    props = feature.get("properties")
    if not isinstance(props, Mapping):
        return None
    name = props.get("ADMIN") or props.get("NAME") or props.get("name")
    return str(name) if name else None


class SelectionState(str, Enum):
    NO_SELECTION = "no_selection"
    SELECTED = "selected"


@dataclass(frozen=True)
class PolygonStyle:
    cap_color: str
    side_color: str
    stroke_color: str
    altitude: float


@dataclass(frozen=True)
class CameraView:
    lat: float
    lng: float
    altitude: float


DEFAULT_VIEW = CameraView(lat=20.0, lng=0.0, altitude=2.5)


@dataclass(frozen=True)
class DetailCard:
    """Content of the marker detail card.

    Organizations show ``location``; products show ``price``.
    """

    title: str
    type: EntityType
    color: str
    description: str
    location: str | None = None
    price: str | None = None


def _price_label(price: Any) -> str | None:
    if price is None or price == "":
        return None
    return f"${price}"


class GlobeRenderAdapter:
    def __init__(self, style_store: StyleConfigStore | None = None) -> None:
        self.style_store = style_store if style_store is not None else StyleConfigStore()
        self.hovered_country: str | None = None
        self.selected_marker: Marker | None = None
        self.camera: CameraView = DEFAULT_VIEW

    @property
    def style(self) -> StyleConfig:
        return self.style_store.current

    # Hover and selection

    def hover(self, feature: Mapping[str, Any] | None) -> str | None:
        self.hovered_country = feature_name(feature)
        return self.hovered_country

    def select(self, marker: Marker) -> None:
        self.selected_marker = marker

    def close(self) -> None:
        self.selected_marker = None

    @property
    def selection_state(self) -> SelectionState:
        if self.selected_marker is None:
            return SelectionState.NO_SELECTION
        return SelectionState.SELECTED

    # Polygon styling

    def _is_hovered(self, feature: Mapping[str, Any] | None) -> bool:
        name = feature_name(feature)
        return bool(self.hovered_country and name and name == self.hovered_country)

    def cap_color(self, feature: Mapping[str, Any] | None) -> str:
        return HOVER_CAP_COLOR if self._is_hovered(feature) else self.style.land_color

    def side_color(self, feature: Mapping[str, Any] | None) -> str:
        return self.style.land_color

    def stroke_color(self, feature: Mapping[str, Any] | None) -> str:
        if self._is_hovered(feature):
            return self.style.atmosphere_color
        return GRID_STROKE_COLOR if self.style.show_grid else FAINT_STROKE_COLOR

    def polygon_altitude(self, feature: Mapping[str, Any] | None) -> float:
        return HOVER_ALTITUDE if self._is_hovered(feature) else BASE_ALTITUDE

    def polygon_style(self, feature: Mapping[str, Any] | None) -> PolygonStyle:
        return PolygonStyle(
            cap_color=self.cap_color(feature),
            side_color=self.side_color(feature),
            stroke_color=self.stroke_color(feature),
            altitude=self.polygon_altitude(feature),
        )

    # Points

    @staticmethod
    def point_props(marker: Marker) -> dict[str, Any]:
        return {
            "lat": marker.lat,
            "lng": marker.lng,
            "radius": marker.size,
            "color": marker.color,
            "label": marker.label,
            "altitude": POINT_ALTITUDE,
            "type": marker.type.value,
            "layer_id": marker.layer_id,
        }

    def detail_card(self, marker: Marker | None = None) -> DetailCard | None:
        """Build the detail card for ``marker`` (default: the selection)."""

        marker = marker if marker is not None else self.selected_marker
        if marker is None:
            return None
        entity = marker.data
        description = entity.description or NO_DESCRIPTION
        if isinstance(entity, Organization):
            return DetailCard(
                title=marker.label,
                type=EntityType.ORGANIZATION,
                color=marker.color,
                description=description,
                location=entity.location or marker.location,
            )
        if isinstance(entity, Product):
            return DetailCard(
                title=marker.label,
                type=EntityType.PRODUCT,
                color=marker.color,
                description=description,
                price=_price_label(entity.price),
            )
        raise TypeError(f"unsupported marker data: {type(entity).__name__}")

    # Surface

    @property
    def surface_key(self) -> str:
        style = self.style
        return f"{style.ocean_color}-{style.land_color}-{style.atmosphere_color}"

    def globe_material(self) -> dict[str, Any]:
        return {"color": self.style.ocean_color, "shininess": 0.2, "opacity": 1}

    def atmosphere(self) -> dict[str, Any]:
        return {
            "color": self.style.atmosphere_color,
            "altitude": round(ATMOSPHERE_SCALE * self.style.atmosphere_intensity, 6),
            "show": True,
        }

    # Camera

    def zoom_in(self) -> CameraView:
        altitude = max(self.camera.altitude - ZOOM_STEP, MIN_ALTITUDE)
        self.camera = CameraView(self.camera.lat, self.camera.lng, altitude)
        return self.camera

    def zoom_out(self) -> CameraView:
        altitude = min(self.camera.altitude + ZOOM_STEP, MAX_ALTITUDE)
        self.camera = CameraView(self.camera.lat, self.camera.lng, altitude)
        return self.camera

    def reset_view(self) -> CameraView:
        self.camera = DEFAULT_VIEW
        return self.camera

    def scene(
        self,
        markers: Sequence[Marker],
        countries: Sequence[Mapping[str, Any]] = (),
    ) -> dict[str, Any]:
        """Return the full declarative payload for one frame."""

        polygons = []
        for feature in countries:
            polygons.append(
                {
                    "name": feature_name(feature),
                    "style": to_obj(self.polygon_style(feature)),
                }
            )
        card = self.detail_card()
        return {
            "surface_key": self.surface_key,
            "globe_material": self.globe_material(),
            "atmosphere": self.atmosphere(),
            "style": self.style.to_blob(),
            "camera": to_obj(self.camera),
            "hovered_country": self.hovered_country,
            "selection": {
                "state": self.selection_state.value,
                "card": to_obj(card) if card is not None else None,
            },
            "polygon_defaults": {
                "hover_cap_color": HOVER_CAP_COLOR,
                "hover_altitude": HOVER_ALTITUDE,
                "base_altitude": BASE_ALTITUDE,
                "stroke_color": (
                    GRID_STROKE_COLOR if self.style.show_grid else FAINT_STROKE_COLOR
                ),
            },
            "polygons": polygons,
            "points": [
                {**self.point_props(m), "card": to_obj(self.detail_card(m))}
                for m in markers
            ],
        }
