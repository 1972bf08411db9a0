# SPDX-License-Identifier: Apache-2.0
"""Client for the organization/product backend and the country polygon source.

Fetch failures never propagate: they are logged and produce an empty list so
the globe keeps rendering with whatever else is available.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from hempatlas.errors import BackendError
from hempatlas.markers.entities import Organization, Product
from hempatlas.utils.env import env, env_float, env_int

from .backends import api as api_backend

LOGGER = logging.getLogger(__name__)

DEFAULT_COUNTRIES_URL = (
    "https://raw.githubusercontent.com/vasturiano/react-globe.gl/master/"
    "example/datasets/ne_110m_admin_0_countries.geojson"
)
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRIES = 2


@dataclass(frozen=True)
class BackendConfig:
    server_url: str | None = None
    anon_key: str | None = field(default=None, repr=False)
    countries_url: str = DEFAULT_COUNTRIES_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_RETRIES
    retry_backoff: float = 0.5

    @classmethod
    def from_env(cls) -> BackendConfig:
        return cls(
            server_url=env("SERVER_URL"),
            anon_key=env("ANON_KEY"),
            countries_url=env("COUNTRIES_URL", DEFAULT_COUNTRIES_URL)
            or DEFAULT_COUNTRIES_URL,
            timeout=env_float("HTTP_TIMEOUT", DEFAULT_TIMEOUT),
            max_retries=env_int("HTTP_RETRIES", DEFAULT_RETRIES),
        )


class BackendClient:
    def __init__(self, config: BackendConfig | None = None) -> None:
        self.config = config or BackendConfig.from_env()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.anon_key:
            headers["Authorization"] = f"Bearer {self.config.anon_key}"
        return headers

    def _get(self, url: str, *, auth: bool = True) -> object:
        return api_backend.get_json(
            url,
            headers=self._headers() if auth else {"Accept": "application/json"},
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
            retry_backoff=self.config.retry_backoff,
        )

    def _endpoint(self, path: str) -> str | None:
        if not self.config.server_url:
            return None
        return f"{self.config.server_url.rstrip('/')}/{path.lstrip('/')}"

    def fetch_organizations(self) -> list[Organization]:
        """GET ``/companies``; expects a JSON array of organization records."""

        url = self._endpoint("companies")
        if url is None:
            LOGGER.warning("No server URL configured; skipping organizations fetch")
            return []
        try:
            data = self._get(url)
        except BackendError as exc:
            LOGGER.warning("Organizations fetch failed: %s", exc)
            return []
        if not isinstance(data, list):
            LOGGER.warning("Organizations response is not a list; ignoring")
            return []
        return [Organization.from_record(r) for r in data if isinstance(r, Mapping)]

    def fetch_products(self) -> list[Product]:
        """GET ``/swag-products``; expects ``{"products": [...]}``."""

        url = self._endpoint("swag-products")
        if url is None:
            LOGGER.warning("No server URL configured; skipping products fetch")
            return []
        try:
            data = self._get(url)
        except BackendError as exc:
            LOGGER.warning("Products fetch failed: %s", exc)
            return []
        products = data.get("products") if isinstance(data, Mapping) else None
        if not isinstance(products, list):
            LOGGER.warning("Products response has no product list; ignoring")
            return []
        return [Product.from_record(r) for r in products if isinstance(r, Mapping)]

    def fetch_country_polygons(self) -> list[dict[str, Any]]:
        """GET the countries GeoJSON FeatureCollection and return its features."""

        try:
            data = self._get(self.config.countries_url, auth=False)
        except BackendError as exc:
            LOGGER.warning("Country polygons fetch failed: %s", exc)
            return []
        features = data.get("features") if isinstance(data, Mapping) else None
        if not isinstance(features, list):
            LOGGER.warning("Countries response has no features; ignoring")
            return []
        polygons = [f for f in features if isinstance(f, dict)]
        LOGGER.info("Loaded %d country polygons", len(polygons))
        return polygons
