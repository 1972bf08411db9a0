# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json

import pytest

from hempatlas.errors import StyleValidationError, UnknownPresetError
from hempatlas.globe import (
    DEFAULT_PRESET,
    PRESETS,
    STORAGE_KEY,
    JsonFileStore,
    MemoryStore,
    StyleConfigStore,
)


def test_starts_on_solarpunk() -> None:
    store = StyleConfigStore()
    assert DEFAULT_PRESET == "solarpunk"
    assert store.current == PRESETS["solarpunk"]
    assert store.current.ocean_color == "#059669"
    assert store.current.atmosphere_intensity == 0.7


def test_apply_preset_replaces_everything() -> None:
    store = StyleConfigStore()
    store.update({"showGrid": True})
    retro = store.apply_preset("retro")
    assert retro == PRESETS["retro"]
    midnight = store.apply_preset("midnight")
    assert midnight.show_grid is False
    assert midnight.land_color == "#6366f1"


def test_unknown_preset() -> None:
    store = StyleConfigStore()
    with pytest.raises(UnknownPresetError) as excinfo:
        store.apply_preset("vaporwave")
    assert "solarpunk" in excinfo.value.available
    assert store.current == PRESETS["solarpunk"]


def test_update_accepts_both_key_styles() -> None:
    store = StyleConfigStore()
    store.update({"oceanColor": "#000000"})
    store.update({"land_color": "#FFFFFF", "atmosphere_intensity": 0.2})
    assert store.current.ocean_color == "#000000"
    assert store.current.land_color == "#ffffff"
    assert store.current.atmosphere_intensity == 0.2
    assert store.current.atmosphere_color == PRESETS["solarpunk"].atmosphere_color


@pytest.mark.parametrize(
    "patch",
    [
        {"oceanColor": "blue"},
        {"atmosphereIntensity": 1.5},
        {"atmosphereIntensity": -0.1},
        {"landColor": "#12345"},
    ],
)
def test_invalid_update_leaves_style_unchanged(patch) -> None:
    store = StyleConfigStore()
    store.apply_preset("golden")
    with pytest.raises(StyleValidationError) as excinfo:
        store.update(patch)
    assert excinfo.value.errors
    assert store.current == PRESETS["golden"]


def test_reset() -> None:
    store = StyleConfigStore()
    store.apply_preset("retro")
    assert store.reset() == PRESETS["solarpunk"]


def test_persist_and_load_round_trip() -> None:
    backing = MemoryStore()
    store = StyleConfigStore(backing)
    store.apply_preset("midnight")
    store.update({"showGrid": True})
    store.persist()

    blob = json.loads(backing.get(STORAGE_KEY))
    assert blob["oceanColor"] == "#1e1b4b"
    assert blob["showGrid"] is True

    fresh = StyleConfigStore(backing)
    assert fresh.current == PRESETS["solarpunk"]
    loaded = fresh.load_persisted()
    assert loaded.land_color == "#6366f1"
    assert loaded.show_grid is True


def test_changes_are_not_saved_until_persist() -> None:
    backing = MemoryStore()
    store = StyleConfigStore(backing)
    store.apply_preset("retro")
    assert backing.get(STORAGE_KEY) is None


@pytest.mark.parametrize(
    "raw",
    ["not json", "[]", json.dumps({"oceanColor": "#000000"}), json.dumps(
        {
            "oceanColor": "red",
            "landColor": "#000000",
            "atmosphereColor": "#000000",
            "atmosphereIntensity": 0.5,
            "showGrid": False,
        }
    )],
)
def test_malformed_stored_style_falls_back(raw, caplog) -> None:
    store = StyleConfigStore(MemoryStore({STORAGE_KEY: raw}))
    store.apply_preset("retro")
    with caplog.at_level("WARNING"):
        assert store.load_persisted() == PRESETS["solarpunk"]
    assert "malformed" in caplog.text


def test_missing_stored_style_uses_default() -> None:
    store = StyleConfigStore(MemoryStore())
    assert store.load_persisted() == PRESETS["solarpunk"]


def test_json_file_store(tmp_path) -> None:
    path = tmp_path / "nested" / "style.json"
    backing = JsonFileStore(path)
    assert backing.get("k") is None
    backing.set("k", "v")
    backing.set("other", "w")
    assert JsonFileStore(path).get("k") == "v"
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v", "other": "w"}


def test_json_file_store_ignores_corrupt_file(tmp_path) -> None:
    path = tmp_path / "style.json"
    path.write_text("{oops", encoding="utf-8")
    backing = JsonFileStore(path)
    assert backing.get("k") is None
    backing.set("k", "v")
    assert backing.get("k") == "v"
