# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging

from fastapi import FastAPI

from hempatlas import __version__
from hempatlas.api.routers import globe as globe_router
from hempatlas.api.utils.errors import install_error_handlers
from hempatlas.session import GlobeSession
from hempatlas.utils.cli_helpers import configure_logging_from_env

LOGGER = logging.getLogger(__name__)


def create_app(session: GlobeSession | None = None) -> FastAPI:
    """Build the API app around ``session`` (default: one built from env).

    Country polygons are loaded at startup when the session has none yet;
    entities load on the first authenticated request.
    """

    configure_logging_from_env()
    app = FastAPI(title="Hemp Atlas Globe API", version=__version__)
    if session is None:
        session = GlobeSession.from_env()
        session.load_countries()
    app.state.session = session
    install_error_handlers(app)
    app.include_router(globe_router.router)

    @app.get("/health", tags=["meta"])
    def health() -> dict[str, object]:
        return {
            "status": "ok",
            "version": __version__,
            "loading": app.state.session.loading,
        }

    LOGGER.debug("API ready with %d layers", len(session.registry))
    return app
