# SPDX-License-Identifier: Apache-2.0
"""Exception types shared across hempatlas."""

from __future__ import annotations


class HempAtlasError(Exception):
    """Base class for hempatlas errors."""


class UnknownLayerError(HempAtlasError, KeyError):
    def __init__(self, layer_id: str) -> None:
        self.layer_id = layer_id
        super().__init__(f"unknown layer id: {layer_id}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownPresetError(HempAtlasError, KeyError):
    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = sorted(available or [])
        super().__init__(f"unknown style preset: {name}")

    def __str__(self) -> str:
        return self.args[0]


class StyleValidationError(HempAtlasError, ValueError):
    """Raised when a style update carries an invalid value."""

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)


class BackendError(HempAtlasError):
    """Raised by the backend connector when a fetch cannot produce data."""

    def __init__(self, url: str, detail: str, status: int | None = None) -> None:
        self.url = url
        self.status = status
        super().__init__(f"Backend request to {url} failed: {detail}")
