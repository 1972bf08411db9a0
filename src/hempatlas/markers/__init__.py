# SPDX-License-Identifier: Apache-2.0
"""Marker aggregation over fetched entities."""

from __future__ import annotations

from .aggregator import (
    JITTER_KEYS,
    CountrySummary,
    Marker,
    MarkerAggregator,
    OrganizationIndex,
    aggregate,
    country_summaries,
    location_for,
)
from .entities import Entity, Organization, Product

__all__ = [
    "JITTER_KEYS",
    "CountrySummary",
    "Entity",
    "Marker",
    "MarkerAggregator",
    "Organization",
    "OrganizationIndex",
    "Product",
    "aggregate",
    "country_summaries",
    "location_for",
]
