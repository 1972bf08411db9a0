# SPDX-License-Identifier: Apache-2.0
"""Logging setup and log-safe rendering of URLs and arguments."""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from hempatlas.utils.env import env

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "quiet": logging.ERROR,
}

_SENSITIVE_KEYS = ("key", "token", "secret", "password", "authorization", "apikey")
_BEARER = re.compile(r"(?i)\b(bearer)\s+[A-Za-z0-9._~+/=-]+")
_MASK = "***"


def configure_logging_from_env(default: str = "info") -> None:
    """Configure root logging from ``HEMPATLAS_VERBOSITY``.

    Accepts ``debug``, ``info`` or ``quiet``; anything else uses ``default``.
    Safe to call repeatedly: the level is updated, handlers are not duplicated.
    """

    verbosity = (env("VERBOSITY") or default).lower()
    level = _LEVELS.get(verbosity, _LEVELS.get(default, logging.INFO))
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    root.setLevel(level)


def _is_sensitive(name: str) -> bool:
    lowered = name.lower().replace("-", "").replace("_", "")
    return any(marker in lowered for marker in _SENSITIVE_KEYS)


def sanitize_for_log(value: Any) -> str:
    """Render ``value`` for logs with credentials masked.

    URL query parameters with sensitive names are replaced and bearer tokens
    embedded in free text are hidden.
    """

    text = str(value)
    if "://" in text:
        parts = urlsplit(text)
        if parts.query:
            query = [
                (k, _MASK if _is_sensitive(k) else v)
                for k, v in parse_qsl(parts.query, keep_blank_values=True)
            ]
            text = urlunsplit(parts._replace(query=urlencode(query, safe="*")))
    return _BEARER.sub(rf"\1 {_MASK}", text)


def sanitize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    return {
        k: (_MASK if _is_sensitive(k) else sanitize_for_log(v))
        for k, v in (headers or {}).items()
    }


def sanitize_args(args: Iterable[str]) -> list[str]:
    """Mask the values of sensitive ``--flag value`` / ``--flag=value`` args."""

    out: list[str] = []
    mask_next = False
    for arg in args:
        if mask_next:
            out.append(_MASK)
            mask_next = False
            continue
        if arg.startswith("--") and _is_sensitive(arg[2:].split("=", 1)[0]):
            if "=" in arg:
                out.append(arg.split("=", 1)[0] + "=" + _MASK)
            else:
                out.append(arg)
                mask_next = True
            continue
        out.append(sanitize_for_log(arg))
    return out
