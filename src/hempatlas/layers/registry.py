# SPDX-License-Identifier: Apache-2.0
"""Togglable data layers and their visibility gates.

Layer metadata (name, icon, color, marker size) lives in one table keyed by
layer id, read by both the marker aggregator and the layer panel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator

from hempatlas.errors import UnknownLayerError

LOGGER = logging.getLogger(__name__)


class EntityType(str, Enum):
    ORGANIZATION = "organization"
    PRODUCT = "product"


class LayerVisibility(str, Enum):
    VISIBLE = "visible"
    DISABLED = "disabled"
    # Auth gated: the user has to sign in.
    LOCKED = "locked"
    # Zoom gated: the user has to zoom in.
    ZOOM_GATED = "zoom_gated"


@dataclass(frozen=True)
class Layer:
    id: str
    name: str
    icon: str
    color: str
    entity_type: EntityType
    marker_size: float
    enabled: bool = True
    requires_auth: bool = False
    min_zoom_level: float = 0
    count: int = 0
    plotted_count: int = 0


LAYER_DEFINITIONS: tuple[Layer, ...] = (
    Layer(
        id="companies",
        name="Organizations",
        icon="\U0001f3e2",
        color="#10b981",
        entity_type=EntityType.ORGANIZATION,
        marker_size=0.5,
        requires_auth=True,
    ),
    Layer(
        id="shops",
        name="Shops",
        icon="\U0001f6cd\ufe0f",
        color="#f59e0b",
        entity_type=EntityType.PRODUCT,
        marker_size=0.4,
        requires_auth=True,
    ),
)


def visibility(layer: Layer, is_authenticated: bool, zoom: float) -> LayerVisibility:
    """Classify why ``layer`` is or is not contributing markers."""

    if layer.requires_auth and not is_authenticated:
        return LayerVisibility.LOCKED
    if zoom < layer.min_zoom_level:
        return LayerVisibility.ZOOM_GATED
    if not layer.enabled:
        return LayerVisibility.DISABLED
    return LayerVisibility.VISIBLE


def is_visible(layer: Layer, is_authenticated: bool, zoom: float) -> bool:
    return visibility(layer, is_authenticated, zoom) is LayerVisibility.VISIBLE


@dataclass(frozen=True)
class PanelEntry:
    """What the layer panel shows for one layer."""

    layer: Layer
    status: LayerVisibility
    count_label: str
    can_toggle: bool
    message: str | None


def _count_label(count: int) -> str:
    return f"{count} {'item' if count == 1 else 'items'}"


class LayerRegistry:
    """Ordered, append-only set of layers.

    Records are immutable; toggling or counting swaps in an updated copy under
    the same id.
    """

    def __init__(self, definitions: Iterable[Layer] = LAYER_DEFINITIONS) -> None:
        self._layers: dict[str, Layer] = {}
        for layer in definitions:
            if layer.id in self._layers:
                raise ValueError(f"duplicate layer id: {layer.id}")
            self._layers[layer.id] = layer

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers.values())

    def __len__(self) -> int:
        return len(self._layers)

    def __contains__(self, layer_id: object) -> bool:
        return layer_id in self._layers

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers.values())

    def get(self, layer_id: str) -> Layer:
        try:
            return self._layers[layer_id]
        except KeyError:
            raise UnknownLayerError(layer_id) from None

    def _swap(self, layer_id: str, **changes: object) -> Layer:
        updated = replace(self.get(layer_id), **changes)
        self._layers[layer_id] = updated
        return updated

    def toggle(self, layer_id: str) -> Layer:
        layer = self._swap(layer_id, enabled=not self.get(layer_id).enabled)
        LOGGER.debug("Layer %s enabled=%s", layer_id, layer.enabled)
        return layer

    def set_count(self, layer_id: str, count: int) -> Layer:
        return self._swap(layer_id, count=max(int(count), 0))

    def set_plotted_count(self, layer_id: str, count: int) -> Layer:
        return self._swap(layer_id, plotted_count=max(int(count), 0))

    def visible(self, is_authenticated: bool, zoom: float) -> list[Layer]:
        return [lyr for lyr in self if is_visible(lyr, is_authenticated, zoom)]

    def panel_entries(self, is_authenticated: bool, zoom: float) -> list[PanelEntry]:
        entries = []
        for layer in self:
            status = visibility(layer, is_authenticated, zoom)
            message = None
            if status is LayerVisibility.LOCKED:
                message = "Sign in to view this layer"
            elif status is LayerVisibility.ZOOM_GATED:
                message = f"Zoom in to level {layer.min_zoom_level:g} to activate"
            entries.append(
                PanelEntry(
                    layer=layer,
                    status=status,
                    count_label=_count_label(layer.count),
                    can_toggle=status
                    not in (LayerVisibility.LOCKED, LayerVisibility.ZOOM_GATED),
                    message=message,
                )
            )
        return entries
