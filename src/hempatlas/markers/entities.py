# SPDX-License-Identifier: Apache-2.0
"""Source entities fetched from the backend.

Records are normalized from loosely-shaped JSON: missing fields become
``None`` and the original payload is kept on ``raw`` for detail views.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Organization:
    id: str | None
    name: str
    description: str | None = None
    location: str | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Organization:
        return cls(
            id=_text(record.get("id")),
            name=_text(record.get("name")) or "Unnamed organization",
            description=_text(record.get("description")),
            location=_text(record.get("location")),
            raw=dict(record),
        )


@dataclass(frozen=True)
class Product:
    id: str | None
    name: str
    description: str | None = None
    price: Any = None
    company_id: str | None = None
    company_name: str | None = None
    company_location: str | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Product:
        company = record.get("company")
        if not isinstance(company, Mapping):
            company = {}
        return cls(
            id=_text(record.get("id")),
            name=_text(record.get("name")) or "Unnamed product",
            description=_text(record.get("description")),
            price=record.get("price"),
            company_id=_text(record.get("company_id")),
            company_name=_text(company.get("name")),
            company_location=_text(company.get("location")),
            raw=dict(record),
        )


Entity = Union[Organization, Product]
