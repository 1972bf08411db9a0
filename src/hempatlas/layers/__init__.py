# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from .registry import (
    LAYER_DEFINITIONS,
    EntityType,
    Layer,
    LayerRegistry,
    LayerVisibility,
    PanelEntry,
    is_visible,
    visibility,
)

__all__ = [
    "LAYER_DEFINITIONS",
    "EntityType",
    "Layer",
    "LayerRegistry",
    "LayerVisibility",
    "PanelEntry",
    "is_visible",
    "visibility",
]
