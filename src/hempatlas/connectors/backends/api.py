# SPDX-License-Identifier: Apache-2.0
"""HTTP backend utilities for the hempatlas data sources.

Provides single-request helpers with retries and a JSON ``GET`` wrapper that
turns every failure mode into :class:`~hempatlas.errors.BackendError`.
"""

from __future__ import annotations

import contextlib
import json
import logging
import time

import requests

from hempatlas.errors import BackendError
from hempatlas.utils.cli_helpers import sanitize_for_log, sanitize_headers

LOGGER = logging.getLogger(__name__)

RETRY_STATUS = {429, 500, 502, 503, 504}


def _parse_retry_after(value: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def request_once(
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, str] | None = None,
    timeout: float = 30,
) -> tuple[int, dict[str, str], bytes]:
    resp = requests.request(
        method.upper(),
        url,
        headers=headers or {},
        params=params or {},
        timeout=timeout,
    )
    status = resp.status_code
    # Flatten headers to str->str
    headers_out: dict[str, str] = {k: v for k, v in resp.headers.items()}
    content = resp.content or b""
    return status, headers_out, content


def request_with_retries(
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, str] | None = None,
    timeout: float = 30,
    max_retries: int = 2,
    retry_backoff: float = 0.5,
) -> tuple[int, dict[str, str], bytes]:
    attempt = 0
    while True:
        status, resp_headers, content = request_once(
            method, url, headers=headers, params=params, timeout=timeout
        )
        if status not in RETRY_STATUS or attempt >= max_retries:
            return status, resp_headers, content
        delay = retry_backoff * (2**attempt)
        if "Retry-After" in resp_headers:
            with contextlib.suppress(Exception):
                delay = max(delay, _parse_retry_after(resp_headers["Retry-After"]))
        LOGGER.debug(
            "Retrying %s after HTTP %s in %.2fs", sanitize_for_log(url), status, delay
        )
        time.sleep(delay)
        attempt += 1


def get_json(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, str] | None = None,
    timeout: float = 30,
    max_retries: int = 2,
    retry_backoff: float = 0.5,
) -> object:
    """GET ``url`` and decode the JSON body.

    Raises :class:`BackendError` on transport errors, non-2xx responses and
    undecodable bodies.
    """

    LOGGER.debug("GET %s headers=%s", sanitize_for_log(url), sanitize_headers(headers))
    try:
        status, _headers, content = request_with_retries(
            "GET",
            url,
            headers=headers,
            params=params,
            timeout=timeout,
            max_retries=max_retries,
            retry_backoff=retry_backoff,
        )
    except requests.RequestException as exc:
        raise BackendError(sanitize_for_log(url), str(exc)) from exc
    if not 200 <= status < 300:
        raise BackendError(sanitize_for_log(url), f"HTTP {status}", status=status)
    try:
        return json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise BackendError(
            sanitize_for_log(url), f"invalid JSON: {exc}", status=status
        ) from exc
