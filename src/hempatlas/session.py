# SPDX-License-Identifier: Apache-2.0
"""One globe view: fetched data, layer state, style and render adapter.

Markers are recomputed synchronously after every change to entities, layers,
auth state or zoom, so ``markers`` is always current when read.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Sequence

from hempatlas.connectors.backend import BackendClient, BackendConfig
from hempatlas.geo import LocationResolver
from hempatlas.globe.adapter import GlobeRenderAdapter
from hempatlas.globe.storage import JsonFileStore
from hempatlas.globe.style import StyleConfigStore
from hempatlas.layers.registry import EntityType, Layer, LayerRegistry, PanelEntry
from hempatlas.markers.aggregator import (
    CountrySummary,
    Marker,
    MarkerAggregator,
    country_summaries,
)
from hempatlas.markers.entities import Entity, Organization, Product
from hempatlas.utils.env import env, env_path
from hempatlas.visualization.renderers import GlobeGLRenderer, InteractiveBundle

LOGGER = logging.getLogger(__name__)

DEFAULT_STYLE_PATH = "~/.hempatlas/style.json"


class GlobeSession:
    """Globe view state.

    Not thread safe on its own; concurrent callers (the API) hold ``lock``
    around each change-then-read sequence.
    """

    def __init__(
        self,
        client: BackendClient | None = None,
        *,
        registry: LayerRegistry | None = None,
        style_store: StyleConfigStore | None = None,
        resolver: LocationResolver | None = None,
        jitter_key: str = "location",
        zoom: float = 0.0,
    ) -> None:
        self.client = client if client is not None else BackendClient(BackendConfig())
        self.registry = registry if registry is not None else LayerRegistry()
        self.aggregator = MarkerAggregator(
            self.registry, resolver=resolver, jitter_key=jitter_key  # type: ignore[arg-type]
        )
        self.style_store = style_store if style_store is not None else StyleConfigStore()
        self.adapter = GlobeRenderAdapter(self.style_store)

        self.access_token: str | None = None
        self.zoom = float(zoom)
        self.organizations: list[Organization] = []
        self.products: list[Product] = []
        self.countries: list[dict[str, Any]] = []
        self.entities_loaded = False
        self.entities_loading = False
        self.countries_loading = False
        self.markers: list[Marker] = []
        self.lock = threading.Lock()

    @classmethod
    def from_env(cls) -> GlobeSession:
        """Build a session wired to the environment configuration."""

        store = StyleConfigStore(
            JsonFileStore(env_path("STYLE_PATH", DEFAULT_STYLE_PATH))
        )
        session = cls(
            BackendClient(BackendConfig.from_env()),
            style_store=store,
            jitter_key=env("JITTER_KEY", "location") or "location",
        )
        session.load_style()
        return session

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    @property
    def loading(self) -> bool:
        return self.entities_loading or self.countries_loading

    # State changes

    def sign_in(self, access_token: str) -> None:
        if not access_token:
            raise ValueError("access token must be non-empty")
        self.access_token = access_token
        if not self.entities_loaded:
            self.load_entities()
        else:
            self.recompute()

    def sign_out(self) -> None:
        self.access_token = None
        self.recompute()

    def set_zoom(self, zoom: float) -> None:
        self.zoom = float(zoom)
        self.recompute()

    def toggle_layer(self, layer_id: str) -> Layer:
        layer = self.registry.toggle(layer_id)
        self.recompute()
        return layer

    # Data loading

    def load_entities(self) -> None:
        """Fetch organizations and products; skipped while signed out."""

        if not self.is_authenticated:
            LOGGER.debug("Not signed in; skipping entity fetch")
            self.entities_loading = False
            return
        self.entities_loading = True
        try:
            self.organizations = self.client.fetch_organizations()
            self.products = self.client.fetch_products()
        finally:
            self.entities_loading = False
        self.entities_loaded = True
        for layer in self.registry:
            self.aggregator.record_fetched(layer.id, self._entities_for(layer))
        self.recompute()

    def load_countries(self) -> None:
        self.countries_loading = True
        try:
            self.countries = self.client.fetch_country_polygons()
        finally:
            self.countries_loading = False

    def refresh(self) -> None:
        self.load_entities()
        self.load_countries()

    def load_style(self) -> None:
        self.style_store.load_persisted()

    # Derived views

    def _entities_for(self, layer: Layer) -> Sequence[Entity]:
        if layer.entity_type is EntityType.ORGANIZATION:
            return self.organizations
        return self.products

    def entities_by_layer(self) -> dict[str, Sequence[Entity]]:
        return {layer.id: self._entities_for(layer) for layer in self.registry}

    def recompute(self) -> list[Marker]:
        self.markers = self.aggregator.compute(
            self.entities_by_layer(), self.is_authenticated, self.zoom
        )
        selected = self.adapter.selected_marker
        if selected is not None and selected not in self.markers:
            self.adapter.close()
        return self.markers

    def panel_entries(self) -> list[PanelEntry]:
        return self.registry.panel_entries(self.is_authenticated, self.zoom)

    def country_summaries(self) -> dict[str, CountrySummary]:
        return country_summaries(self.markers)

    def scene(self) -> dict[str, Any]:
        return self.adapter.scene(self.markers, self.countries)

    def build_bundle(self, output_dir: str | Path, **options: Any) -> InteractiveBundle:
        """Render the current view as a standalone globe.gl bundle."""

        renderer = GlobeGLRenderer(
            scene=self.scene(),
            layers=self.panel_entries(),
            countries_url=self.client.config.countries_url,
            **options,
        )
        bundle = renderer.build(output_dir=Path(output_dir))
        LOGGER.info("Generated globe bundle at %s", bundle.index_html)
        return bundle
