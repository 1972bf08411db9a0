# SPDX-License-Identifier: Apache-2.0
"""Data source connectors."""

from __future__ import annotations

from .backend import DEFAULT_COUNTRIES_URL, BackendClient, BackendConfig

__all__ = ["DEFAULT_COUNTRIES_URL", "BackendClient", "BackendConfig"]
