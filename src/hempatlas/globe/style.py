# SPDX-License-Identifier: Apache-2.0
"""Globe visual style: presets, validated edits and persistence.

The persisted blob uses the camelCase field names of the customization panel
(``oceanColor``, ``atmosphereIntensity``, ...), stored as one JSON string
under ``dewii-globe-style``.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from hempatlas.errors import StyleValidationError, UnknownPresetError

from .storage import KeyValueStore, MemoryStore

LOGGER = logging.getLogger(__name__)

STORAGE_KEY = "dewii-globe-style"
DEFAULT_PRESET = "solarpunk"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class StyleConfig(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    ocean_color: str
    land_color: str
    atmosphere_color: str
    atmosphere_intensity: float = Field(ge=0.0, le=1.0)
    show_grid: bool = False

    @field_validator("ocean_color", "land_color", "atmosphere_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not _HEX_COLOR.match(value):
            raise ValueError(f"expected a #rgb or #rrggbb color, got {value!r}")
        return value.lower()

    def to_blob(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


PRESETS: dict[str, StyleConfig] = {
    "solarpunk": StyleConfig(
        ocean_color="#059669",
        land_color="#84cc16",
        atmosphere_color="#fbbf24",
        atmosphere_intensity=0.7,
        show_grid=False,
    ),
    "midnight": StyleConfig(
        ocean_color="#1e1b4b",
        land_color="#6366f1",
        atmosphere_color="#c084fc",
        atmosphere_intensity=0.9,
        show_grid=False,
    ),
    "golden": StyleConfig(
        ocean_color="#ea580c",
        land_color="#fbbf24",
        atmosphere_color="#fef3c7",
        atmosphere_intensity=0.8,
        show_grid=False,
    ),
    "retro": StyleConfig(
        ocean_color="#0ea5e9",
        land_color="#10b981",
        atmosphere_color="#ec4899",
        atmosphere_intensity=0.6,
        show_grid=True,
    ),
}


def _validation_details(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


class StyleConfigStore:
    """Holds the current style and reads/writes it through a key/value store.

    Every change replaces the whole config; a failed update leaves the
    previous value in place.
    """

    def __init__(
        self, storage: KeyValueStore | None = None, *, key: str = STORAGE_KEY
    ) -> None:
        self.storage = storage if storage is not None else MemoryStore()
        self.key = key
        self._current = PRESETS[DEFAULT_PRESET]

    @property
    def current(self) -> StyleConfig:
        return self._current

    def presets(self) -> list[str]:
        return list(PRESETS)

    def apply_preset(self, name: str) -> StyleConfig:
        try:
            preset = PRESETS[name]
        except KeyError:
            raise UnknownPresetError(name, list(PRESETS)) from None
        self._current = preset
        LOGGER.debug("Applied style preset %s", name)
        return preset

    def update(self, partial: Mapping[str, Any]) -> StyleConfig:
        """Merge ``partial`` (snake_case or camelCase keys) into the style."""

        merged = self._current.model_dump()
        for key, value in partial.items():
            merged[_field_name(key)] = value
        try:
            updated = StyleConfig.model_validate(merged)
        except ValidationError as exc:
            raise StyleValidationError(
                "invalid style update", _validation_details(exc)
            ) from exc
        self._current = updated
        return updated

    def reset(self) -> StyleConfig:
        return self.apply_preset(DEFAULT_PRESET)

    def persist(self) -> None:
        self.storage.set(self.key, json.dumps(self._current.to_blob()))
        LOGGER.info("Saved globe style under %s", self.key)

    def load_persisted(self) -> StyleConfig:
        """Replace the current style with the stored one, if any.

        Missing data keeps the default preset; malformed data is logged and
        also falls back to the default preset.
        """

        raw = self.storage.get(self.key)
        if raw is None:
            self._current = PRESETS[DEFAULT_PRESET]
            return self._current
        try:
            self._current = StyleConfig.model_validate_json(raw)
        except ValidationError as exc:
            LOGGER.warning(
                "Ignoring malformed stored style %s: %s", self.key, exc.error_count()
            )
            self._current = PRESETS[DEFAULT_PRESET]
        return self._current


_FIELD_NAMES = {to_camel(name): name for name in StyleConfig.model_fields}


def _field_name(key: str) -> str:
    return _FIELD_NAMES.get(key, key)
