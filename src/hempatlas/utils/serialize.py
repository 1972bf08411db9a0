# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Mapping

"""Lightweight serializers for hempatlas objects (dataclasses, enums, models).

Produces plain JSON-ready structures so API responses and renderer configs do
not need to know about the dataclasses they are built from.
"""


def to_obj(x: Any) -> Any:
    """Convert a value to a JSON-serializable object when possible.

    - Enums -> their value
    - Dataclasses -> dict of converted fields (``repr=False`` fields skipped)
    - Pydantic models -> ``model_dump(by_alias=True)``
    - Mappings and sequences are converted element-wise
    - Primitives are returned as-is
    """
    if isinstance(x, Enum):
        return x.value
    if is_dataclass(x) and not isinstance(x, type):
        return {f.name: to_obj(getattr(x, f.name)) for f in fields(x) if f.repr}
    dump = getattr(x, "model_dump", None)
    if callable(dump):
        return dump(by_alias=True)
    if isinstance(x, Mapping):
        return {str(k): to_obj(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return [to_obj(i) for i in x]
    return x
