# SPDX-License-Identifier: Apache-2.0
"""Globe endpoints: layers, markers, country summaries, style and lookup.

All endpoints operate on the single session held in ``app.state.session``.
Auth state and zoom come from each request; they are applied and the
response is read while holding ``session.lock``, so one request never sees
another request's sign-in state.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import APIRouter, Body, Depends, Query, Request

from hempatlas.api.models.globe import (
    CountriesSummaryResponse,
    CountrySummaryOut,
    LayerOut,
    LayersResponse,
    MarkerOut,
    MarkersResponse,
    RefreshResponse,
    ResolveResponse,
    StyleOut,
)
from hempatlas.api.security import bearer_token, is_authorized
from hempatlas.geo import city_for, country_for, resolve
from hempatlas.layers.registry import PanelEntry
from hempatlas.session import GlobeSession
from hempatlas.utils.serialize import to_obj

LOGGER = logging.getLogger(__name__)

router = APIRouter(tags=["globe"], prefix="/v1")


def get_session(request: Request) -> GlobeSession:
    return request.app.state.session


def _apply_auth(session: GlobeSession, token: str | None) -> None:
    if is_authorized(token):
        if session.access_token != token:
            session.sign_in(token)  # type: ignore[arg-type]
    elif session.is_authenticated:
        session.sign_out()


def _apply_zoom(session: GlobeSession, zoom: float | None) -> None:
    if zoom is not None and zoom != session.zoom:
        session.set_zoom(zoom)


@contextmanager
def synced_session(
    session: GlobeSession, token: str | None, zoom: float | None = None
) -> Iterator[GlobeSession]:
    """Hold the session lock with the caller's auth state and zoom applied."""

    with session.lock:
        _apply_auth(session, token)
        _apply_zoom(session, zoom)
        yield session


def _layer_out(entry: PanelEntry) -> LayerOut:
    layer = entry.layer
    return LayerOut(
        **to_obj(layer),
        status=entry.status.value,
        count_label=entry.count_label,
        can_toggle=entry.can_toggle,
        message=entry.message,
    )


def _style_out(session: GlobeSession) -> StyleOut:
    store = session.style_store
    return StyleOut(
        **store.current.to_blob(),
        surface_key=session.adapter.surface_key,
        presets=store.presets(),
    )


@router.get("/layers", response_model=LayersResponse)
def list_layers(
    zoom: float | None = Query(default=None, ge=0),
    token: str | None = Depends(bearer_token),
    session: GlobeSession = Depends(get_session),
) -> LayersResponse:
    with synced_session(session, token, zoom):
        return LayersResponse(
            authenticated=session.is_authenticated,
            zoom=session.zoom,
            layers=[_layer_out(e) for e in session.panel_entries()],
        )


@router.post("/layers/{layer_id}/toggle", response_model=LayerOut)
def toggle_layer(
    layer_id: str,
    token: str | None = Depends(bearer_token),
    session: GlobeSession = Depends(get_session),
) -> LayerOut:
    with synced_session(session, token):
        session.toggle_layer(layer_id)
        entry = next(e for e in session.panel_entries() if e.layer.id == layer_id)
        return _layer_out(entry)


@router.get("/markers", response_model=MarkersResponse)
def list_markers(
    zoom: float | None = Query(default=None, ge=0),
    token: str | None = Depends(bearer_token),
    session: GlobeSession = Depends(get_session),
) -> MarkersResponse:
    with synced_session(session, token, zoom):
        adapter = session.adapter
        markers = [
            MarkerOut(
                **{
                    k: v
                    for k, v in to_obj(m).items()
                    if k in MarkerOut.model_fields and k != "card"
                },
                card=to_obj(adapter.detail_card(m)),
            )
            for m in session.markers
        ]
    return MarkersResponse(count=len(markers), markers=markers)


@router.get("/countries/summary", response_model=CountriesSummaryResponse)
def countries_summary(
    zoom: float | None = Query(default=None, ge=0),
    token: str | None = Depends(bearer_token),
    session: GlobeSession = Depends(get_session),
) -> CountriesSummaryResponse:
    with synced_session(session, token, zoom):
        summaries = session.country_summaries()
    return CountriesSummaryResponse(
        countries=[
            CountrySummaryOut(
                name=s.name,
                entities=s.entities,
                city_count=s.city_count,
                cities=dict(s.cities),
                city_labels={city: list(v) for city, v in s.city_labels.items()},
            )
            for s in summaries.values()
        ]
    )


@router.get("/style", response_model=StyleOut)
def get_style(session: GlobeSession = Depends(get_session)) -> StyleOut:
    with session.lock:
        return _style_out(session)


@router.patch("/style", response_model=StyleOut)
def update_style(
    payload: dict[str, Any] = Body(...),
    session: GlobeSession = Depends(get_session),
) -> StyleOut:
    with session.lock:
        session.style_store.update(payload)
        return _style_out(session)


@router.post("/style/presets/{name}", response_model=StyleOut)
def apply_preset(name: str, session: GlobeSession = Depends(get_session)) -> StyleOut:
    with session.lock:
        session.style_store.apply_preset(name)
        return _style_out(session)


@router.post("/style/reset", response_model=StyleOut)
def reset_style(session: GlobeSession = Depends(get_session)) -> StyleOut:
    with session.lock:
        session.style_store.reset()
        return _style_out(session)


@router.post("/style/save", response_model=StyleOut)
def save_style(session: GlobeSession = Depends(get_session)) -> StyleOut:
    with session.lock:
        session.style_store.persist()
        return _style_out(session)


@router.get("/resolve", response_model=ResolveResponse)
def resolve_location(location: str | None = Query(default=None)) -> ResolveResponse:
    coord = resolve(location)
    if coord is None:
        return ResolveResponse(location=location, resolved=False)
    return ResolveResponse(
        location=location,
        resolved=True,
        lat=coord.lat,
        lng=coord.lng,
        country=country_for(location),
        city=city_for(location),
    )


@router.post("/refresh", response_model=RefreshResponse)
def refresh(
    token: str | None = Depends(bearer_token),
    session: GlobeSession = Depends(get_session),
) -> RefreshResponse:
    with synced_session(session, token):
        session.refresh()
        LOGGER.info(
            "Refreshed: %d organizations, %d products, %d countries",
            len(session.organizations),
            len(session.products),
            len(session.countries),
        )
        return RefreshResponse(
            organizations=len(session.organizations),
            products=len(session.products),
            countries=len(session.countries),
            markers=len(session.markers),
        )
