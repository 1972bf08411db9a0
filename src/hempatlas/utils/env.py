# SPDX-License-Identifier: Apache-2.0
"""Environment variable helpers.

Names are given without the ``HEMPATLAS_`` prefix: ``env("SERVER_URL")``
reads ``HEMPATLAS_SERVER_URL``. Empty values count as unset.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOGGER = logging.getLogger(__name__)

PREFIX = "HEMPATLAS_"


def env(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(f"{PREFIX}{name}")
    if value is None or value.strip() == "":
        return default
    return value.strip()


def env_int(name: str, default: int) -> int:
    value = env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        LOGGER.warning("Ignoring non-integer %s%s=%r", PREFIX, name, value)
        return default


def env_float(name: str, default: float) -> float:
    value = env(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        LOGGER.warning("Ignoring non-numeric %s%s=%r", PREFIX, name, value)
        return default


def env_path(name: str, default: str | os.PathLike[str]) -> Path:
    return Path(env(name) or default).expanduser()
