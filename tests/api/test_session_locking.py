# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import threading

from hempatlas.api.routers.globe import synced_session


def test_signed_out_request_waits_for_signed_in_read(session) -> None:
    entered = threading.Event()

    def signed_out_request() -> None:
        with synced_session(session, None):
            entered.set()

    with synced_session(session, "user-a") as signed_in:
        worker = threading.Thread(target=signed_out_request)
        worker.start()
        assert not entered.wait(0.2)
        assert signed_in.is_authenticated
        assert len(signed_in.markers) == 6

    worker.join(timeout=5)
    assert entered.is_set()
    assert not session.is_authenticated
    assert session.markers == []


def test_zoom_is_applied_under_the_lock(session) -> None:
    with synced_session(session, "user-a", 2.5):
        assert session.lock.locked()
        assert session.zoom == 2.5
    assert not session.lock.locked()


def test_lock_released_after_error(client, session) -> None:
    r = client.post(
        "/v1/layers/forums/toggle", headers={"Authorization": "Bearer user-a"}
    )
    assert r.status_code == 404
    assert not session.lock.locked()
    assert client.get("/v1/markers", headers={"Authorization": "Bearer user-a"}).json()[
        "count"
    ] == 6
