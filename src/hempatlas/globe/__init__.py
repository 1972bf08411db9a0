# SPDX-License-Identifier: Apache-2.0
"""Globe view state, styling and persisted style."""

from __future__ import annotations

from .adapter import (
    DEFAULT_VIEW,
    CameraView,
    DetailCard,
    GlobeRenderAdapter,
    PolygonStyle,
    SelectionState,
    feature_name,
)
from .storage import JsonFileStore, KeyValueStore, MemoryStore
from .style import DEFAULT_PRESET, PRESETS, STORAGE_KEY, StyleConfig, StyleConfigStore

__all__ = [
    "DEFAULT_PRESET",
    "DEFAULT_VIEW",
    "PRESETS",
    "STORAGE_KEY",
    "CameraView",
    "DetailCard",
    "GlobeRenderAdapter",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "PolygonStyle",
    "SelectionState",
    "StyleConfig",
    "StyleConfigStore",
    "feature_name",
]
