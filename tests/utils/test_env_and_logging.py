# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from hempatlas.globe import PRESETS
from hempatlas.utils.cli_helpers import (
    configure_logging_from_env,
    sanitize_args,
    sanitize_for_log,
    sanitize_headers,
)
from hempatlas.utils.env import env, env_float, env_int, env_path
from hempatlas.utils.serialize import to_obj


def test_env_reads_prefixed_values(monkeypatch) -> None:
    monkeypatch.setenv("HEMPATLAS_SERVER_URL", "  https://x.test  ")
    monkeypatch.setenv("HEMPATLAS_ANON_KEY", "")
    assert env("SERVER_URL") == "https://x.test"
    assert env("ANON_KEY", "fallback") == "fallback"
    assert env("MISSING") is None


def test_env_typed_helpers(monkeypatch, caplog) -> None:
    monkeypatch.setenv("HEMPATLAS_HTTP_RETRIES", "5")
    monkeypatch.setenv("HEMPATLAS_HTTP_TIMEOUT", "soon")
    assert env_int("HTTP_RETRIES", 2) == 5
    with caplog.at_level(logging.WARNING):
        assert env_float("HTTP_TIMEOUT", 30.0) == 30.0
    assert "HEMPATLAS_HTTP_TIMEOUT" in caplog.text


def test_env_path_expands_user(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("HEMPATLAS_STYLE_PATH", raising=False)
    assert env_path("STYLE_PATH", "~/style.json") == tmp_path / "style.json"
    monkeypatch.setenv("HEMPATLAS_STYLE_PATH", "/srv/style.json")
    assert env_path("STYLE_PATH", "~/style.json") == Path("/srv/style.json")


def test_sanitize_for_log_masks_credentials() -> None:
    url = "https://api.test/companies?apikey=abc&limit=5"
    masked = sanitize_for_log(url)
    assert "abc" not in masked
    assert "limit=5" in masked
    assert sanitize_for_log("Authorization: Bearer abc.def") == "Authorization: Bearer ***"


def test_sanitize_headers_and_args() -> None:
    headers = sanitize_headers({"Authorization": "Bearer abc", "Accept": "x"})
    assert headers == {"Authorization": "***", "Accept": "x"}
    args = sanitize_args(["globe", "--token", "abc", "--api-key=zzz", "--zoom", "2"])
    assert args == ["globe", "--token", "***", "--api-key=***", "--zoom", "2"]


def test_configure_logging_from_env(monkeypatch) -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        monkeypatch.setenv("HEMPATLAS_VERBOSITY", "debug")
        configure_logging_from_env()
        assert root.level == logging.DEBUG
        monkeypatch.setenv("HEMPATLAS_VERBOSITY", "quiet")
        configure_logging_from_env()
        assert root.level == logging.ERROR
        monkeypatch.setenv("HEMPATLAS_VERBOSITY", "chatty")
        configure_logging_from_env(default="info")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


class Color(Enum):
    GREEN = "green"


@dataclass
class Sample:
    name: str
    color: Color
    tags: tuple[str, ...] = ()
    secret: str = field(default="s", repr=False)


def test_to_obj_handles_dataclasses_enums_and_models() -> None:
    obj = to_obj(Sample("a", Color.GREEN, ("x", "y")))
    assert obj == {"name": "a", "color": "green", "tags": ["x", "y"]}
    style = to_obj(PRESETS["retro"])
    assert style["showGrid"] is True
    assert to_obj([Color.GREEN, {"k": Color.GREEN}]) == ["green", {"k": "green"}]
