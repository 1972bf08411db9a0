# SPDX-License-Identifier: Apache-2.0
import time as _time

import pytest
import requests

from hempatlas.connectors.backends import api as api_backend
from hempatlas.errors import BackendError


def _sequence(monkeypatch, seq):
    calls = {"i": 0, "n": 0}

    def fake_request_once(method, url, **kwargs):  # noqa: ARG001
        i = calls["i"]
        calls["i"] = min(i + 1, len(seq) - 1)
        calls["n"] += 1
        item = seq[i]
        if isinstance(item, Exception):
            raise item
        return item

    monkeypatch.setattr(api_backend, "request_once", fake_request_once)
    return calls


def _no_sleep(monkeypatch):
    sleeps: list[float] = []
    monkeypatch.setattr(_time, "sleep", lambda d: sleeps.append(float(d)))
    return sleeps


def test_request_with_retries_respects_retry_after(monkeypatch):
    _sequence(monkeypatch, [(429, {"Retry-After": "3"}, b""), (200, {}, b"ok")])
    sleeps = _no_sleep(monkeypatch)
    status, _headers, content = api_backend.request_with_retries(
        "GET", "https://api.example", max_retries=3, retry_backoff=0.5
    )
    assert status == 200 and content == b"ok"
    assert sleeps == [3.0]


def test_request_with_retries_exponential_backoff(monkeypatch):
    _sequence(
        monkeypatch, [(500, {}, b""), (502, {}, b""), (503, {}, b""), (200, {}, b"")]
    )
    sleeps = _no_sleep(monkeypatch)
    status, _headers, _content = api_backend.request_with_retries(
        "GET", "https://api.example", max_retries=5, retry_backoff=0.5
    )
    assert status == 200
    assert sleeps == [0.5, 1.0, 2.0]


def test_request_with_retries_gives_up(monkeypatch):
    calls = _sequence(monkeypatch, [(503, {}, b"")])
    _no_sleep(monkeypatch)
    status, _headers, _content = api_backend.request_with_retries(
        "GET", "https://api.example", max_retries=2, retry_backoff=0.1
    )
    assert status == 503
    assert calls["n"] == 3


def test_non_retryable_status_returns_immediately(monkeypatch):
    calls = _sequence(monkeypatch, [(404, {}, b"")])
    sleeps = _no_sleep(monkeypatch)
    status, _h, _c = api_backend.request_with_retries("GET", "https://api.example")
    assert status == 404
    assert calls["n"] == 1 and sleeps == []


def test_get_json_decodes(monkeypatch):
    _sequence(monkeypatch, [(200, {}, b'{"products": []}')])
    assert api_backend.get_json("https://api.example") == {"products": []}


@pytest.mark.parametrize(
    "response",
    [
        (500, {}, b""),
        (401, {}, b"{}"),
        (200, {}, b"<html>"),
        requests.ConnectionError("refused"),
    ],
)
def test_get_json_failures_raise_backend_error(monkeypatch, response):
    _sequence(monkeypatch, [response])
    _no_sleep(monkeypatch)
    with pytest.raises(BackendError):
        api_backend.get_json("https://api.example?apikey=secret", max_retries=0)


def test_backend_error_hides_query_secrets(monkeypatch):
    _sequence(monkeypatch, [(500, {}, b"")])
    _no_sleep(monkeypatch)
    with pytest.raises(BackendError) as excinfo:
        api_backend.get_json("https://api.example/x?apikey=secret", max_retries=0)
    assert "secret" not in str(excinfo.value)
    assert excinfo.value.status == 500


def test_get_json_debug_log_masks_credentials(monkeypatch, caplog):
    _sequence(monkeypatch, [(200, {}, b"[]")])
    with caplog.at_level("DEBUG", logger="hempatlas.connectors.backends.api"):
        api_backend.get_json(
            "https://api.example/companies?token=abc",
            headers={"Authorization": "Bearer anon-key", "Accept": "application/json"},
        )
    assert "GET https://api.example/companies?token=***" in caplog.text
    assert "anon-key" not in caplog.text
    assert "abc" not in caplog.text
