# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class ErrorInfo(BaseModel):
    type: str
    message: str
    details: Any | None = None


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error: ErrorInfo


class LayerOut(BaseModel):
    id: str
    name: str
    icon: str
    color: str
    entity_type: Literal["organization", "product"]
    marker_size: float
    enabled: bool
    requires_auth: bool
    min_zoom_level: float
    count: int = Field(description="Entities fetched for the layer")
    plotted_count: int = Field(description="Entities that produced a marker")
    status: Literal["visible", "disabled", "locked", "zoom_gated"]
    count_label: str
    can_toggle: bool
    message: str | None = None


class LayersResponse(BaseModel):
    authenticated: bool
    zoom: float
    layers: list[LayerOut]


class DetailCardOut(BaseModel):
    title: str
    type: Literal["organization", "product"]
    color: str
    description: str
    location: str | None = None
    price: str | None = None


class MarkerOut(BaseModel):
    lat: float
    lng: float
    size: float
    color: str
    label: str
    type: Literal["organization", "product"]
    layer_id: str
    location: str
    card: DetailCardOut | None = None


class MarkersResponse(BaseModel):
    count: int
    markers: list[MarkerOut]


class CountrySummaryOut(BaseModel):
    name: str
    entities: int
    city_count: int
    cities: dict[str, int]
    city_labels: dict[str, list[str]] = Field(
        default_factory=dict, description="Marker labels per city"
    )


class CountriesSummaryResponse(BaseModel):
    countries: list[CountrySummaryOut]


class StyleOut(BaseModel):
    oceanColor: str
    landColor: str
    atmosphereColor: str
    atmosphereIntensity: float
    showGrid: bool
    surface_key: str
    presets: list[str]


class ResolveResponse(BaseModel):
    location: str | None
    resolved: bool
    lat: float | None = None
    lng: float | None = None
    country: str | None = None
    city: str | None = None


class RefreshResponse(BaseModel):
    status: Literal["ok"] = "ok"
    organizations: int
    products: int
    countries: int
    markers: int
