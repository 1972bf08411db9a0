# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json

import pytest

from hempatlas.globe import PRESETS, JsonFileStore, StyleConfigStore
from hempatlas.session import GlobeSession


def test_signed_out_session_fetches_nothing(fake_client) -> None:
    session = GlobeSession(fake_client)
    session.load_entities()
    assert fake_client.calls["organizations"] == 0
    assert session.markers == []
    assert not session.loading


def test_sign_in_fetches_and_plots(fake_client) -> None:
    session = GlobeSession(fake_client)
    session.sign_in("token")
    assert fake_client.calls == {"organizations": 1, "products": 1, "countries": 0}
    assert len(session.markers) == 6
    companies = session.registry.get("companies")
    assert (companies.count, companies.plotted_count) == (4, 3)

    session.sign_out()
    assert session.markers == []
    session.sign_in("token")
    assert fake_client.calls["organizations"] == 1
    assert len(session.markers) == 6


def test_refresh_refetches(fake_client) -> None:
    session = GlobeSession(fake_client)
    session.sign_in("token")
    session.refresh()
    assert fake_client.calls == {"organizations": 2, "products": 2, "countries": 1}
    assert len(session.countries) == 2


def test_failed_fetch_means_zero_counts(empty_client) -> None:
    session = GlobeSession(empty_client)
    session.sign_in("token")
    assert session.markers == []
    assert [e.count_label for e in session.panel_entries()] == ["0 items", "0 items"]


def test_toggle_recomputes_and_drops_stale_selection(fake_client) -> None:
    session = GlobeSession(fake_client)
    session.sign_in("token")
    session.adapter.select(session.markers[0])
    session.toggle_layer("companies")
    assert [m.layer_id for m in session.markers] == ["shops"] * 3
    assert session.adapter.selected_marker is None


def test_zoom_is_recorded(fake_client) -> None:
    session = GlobeSession(fake_client)
    session.sign_in("token")
    session.set_zoom(3.5)
    assert session.zoom == 3.5
    assert len(session.markers) == 6


def test_sign_in_requires_token(fake_client) -> None:
    with pytest.raises(ValueError):
        GlobeSession(fake_client).sign_in("")


def test_country_summaries(fake_client) -> None:
    session = GlobeSession(fake_client)
    session.sign_in("token")
    summaries = session.country_summaries()
    assert summaries["France"].entities == 2


def test_from_env_loads_saved_style(tmp_path, monkeypatch) -> None:
    path = tmp_path / "saved.json"
    saved = StyleConfigStore(JsonFileStore(path))
    saved.apply_preset("golden")
    saved.persist()
    monkeypatch.setenv("HEMPATLAS_STYLE_PATH", str(path))
    monkeypatch.setenv("HEMPATLAS_JITTER_KEY", "entity")

    session = GlobeSession.from_env()
    assert session.style_store.current == PRESETS["golden"]
    assert session.aggregator.jitter_key == "entity"


def test_build_bundle(fake_client, tmp_path) -> None:
    session = GlobeSession(fake_client)
    session.sign_in("token")
    bundle = session.build_bundle(tmp_path / "out", title="Atlas")
    config = json.loads((tmp_path / "out" / "assets" / "config.json").read_text())
    assert bundle.index_html.exists()
    assert config["title"] == "Atlas"
    assert config["countries_url"] == "https://example.test/world.geojson"
    assert len(config["scene"]["points"]) == 6
    assert [entry["layer"]["id"] for entry in config["layers"]] == [
        "companies",
        "shops",
    ]
