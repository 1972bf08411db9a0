# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import Any

import pytest

from hempatlas.connectors.backend import BackendConfig
from hempatlas.markers.entities import Organization, Product

ORGANIZATION_RECORDS: list[dict[str, Any]] = [
    {
        "id": "o1",
        "name": "Hemp Co",
        "description": "Fibre processing",
        "location": "Paris, France",
    },
    {"id": "o2", "name": "Green Fields", "location": "Austin, USA"},
    {"id": "o3", "name": "Nowhere Ltd", "location": None},
    {"id": "o4", "name": "Atlantis Fibers", "location": "Atlantis"},
]

PRODUCT_RECORDS: list[dict[str, Any]] = [
    {"id": "p1", "name": "Hemp Tee", "price": 25, "company_id": "o1"},
    {
        "id": "p2",
        "name": "Seed Oil",
        "description": "Cold pressed",
        "price": "12.50",
        "company": {"name": "Green Fields"},
    },
    {"id": "p3", "name": "Cap", "company": {"location": "Berlin, Germany"}},
    {"id": "p4", "name": "Orphan"},
]

POLYGONS: list[dict[str, Any]] = [
    {"type": "Feature", "properties": {"ADMIN": "France"}, "geometry": None},
    {"type": "Feature", "properties": {"NAME": "Germany"}, "geometry": None},
]


class FakeBackendClient:
    """Stands in for BackendClient; counts fetches and serves fixed data."""

    def __init__(
        self,
        organizations: list[Organization] | None = None,
        products: list[Product] | None = None,
        polygons: list[dict[str, Any]] | None = None,
    ) -> None:
        self.config = BackendConfig(countries_url="https://example.test/world.geojson")
        self.organizations = organizations if organizations is not None else []
        self.products = products if products is not None else []
        self.polygons = polygons if polygons is not None else []
        self.calls: dict[str, int] = {"organizations": 0, "products": 0, "countries": 0}

    def fetch_organizations(self) -> list[Organization]:
        self.calls["organizations"] += 1
        return list(self.organizations)

    def fetch_products(self) -> list[Product]:
        self.calls["products"] += 1
        return list(self.products)

    def fetch_country_polygons(self) -> list[dict[str, Any]]:
        self.calls["countries"] += 1
        return list(self.polygons)


@pytest.fixture
def organizations() -> list[Organization]:
    return [Organization.from_record(r) for r in ORGANIZATION_RECORDS]


@pytest.fixture
def products() -> list[Product]:
    return [Product.from_record(r) for r in PRODUCT_RECORDS]


@pytest.fixture
def fake_client(organizations, products) -> FakeBackendClient:
    return FakeBackendClient(organizations, products, POLYGONS)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep tests away from the user's env config and style file."""

    for name in (
        "HEMPATLAS_SERVER_URL",
        "HEMPATLAS_ANON_KEY",
        "HEMPATLAS_COUNTRIES_URL",
        "HEMPATLAS_API_KEY",
        "HEMPATLAS_JITTER_KEY",
        "HEMPATLAS_ACCESS_TOKEN",
        "HEMPATLAS_VERBOSITY",
        "HEMPATLAS_HTTP_RETRIES",
        "HEMPATLAS_HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HEMPATLAS_STYLE_PATH", str(tmp_path / "style.json"))


@pytest.fixture
def empty_client() -> FakeBackendClient:
    """A client whose fetches all failed (empty results)."""

    return FakeBackendClient()
