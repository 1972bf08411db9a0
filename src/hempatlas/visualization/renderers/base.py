# SPDX-License-Identifier: Apache-2.0
"""Base interfaces for globe bundle renderers."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from hempatlas.utils.serialize import to_obj

# Options that never reach the emitted config.
PRIVATE_OPTIONS = frozenset({"access_token", "anon_key", "api_key", "auth"})


@dataclass(slots=True)
class InteractiveBundle:
    """Files written by a renderer: the page plus its assets."""

    output_dir: Path
    index_html: Path
    assets: Sequence[Path] = field(default_factory=tuple)


class InteractiveRenderer(ABC):
    """A renderer turns a globe scene into a self-contained HTML bundle."""

    def __init__(self, **options: Any) -> None:
        self._options: dict[str, Any] = dict(options)

    def configure(self, **options: Any) -> None:
        self._options.update(options)

    def config(self) -> dict[str, Any]:
        """Return the JSON config embedded in the bundle (secrets removed)."""

        return {
            key: to_obj(value)
            for key, value in self._options.items()
            if key not in PRIVATE_OPTIONS and value is not None
        }

    @staticmethod
    def write_config(path: Path, config: dict[str, Any]) -> None:
        path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")

    @abstractmethod
    def build(self, *, output_dir: Path) -> InteractiveBundle:
        """Write the bundle into ``output_dir``."""
