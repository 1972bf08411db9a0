# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hempatlas.api.models.globe import ErrorInfo, ErrorResponse
from hempatlas.errors import (
    HempAtlasError,
    StyleValidationError,
    UnknownLayerError,
    UnknownPresetError,
)

LOGGER = logging.getLogger(__name__)


def error_response(
    *,
    status_code: int,
    err_type: str,
    message: str,
    details: Any | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorInfo(type=err_type, message=message, details=details)
    ).model_dump()
    return JSONResponse(content=body, status_code=status_code)


async def _unknown_layer(_request: Request, exc: UnknownLayerError) -> JSONResponse:
    return error_response(
        status_code=404,
        err_type="unknown_layer",
        message=str(exc),
        details={"layer_id": exc.layer_id},
    )


async def _unknown_preset(_request: Request, exc: UnknownPresetError) -> JSONResponse:
    return error_response(
        status_code=404,
        err_type="unknown_preset",
        message=str(exc),
        details={"name": exc.name, "available": exc.available},
    )


async def _invalid_style(_request: Request, exc: StyleValidationError) -> JSONResponse:
    return error_response(
        status_code=422,
        err_type="validation_error",
        message=str(exc),
        details={"errors": exc.errors},
    )


async def _atlas_error(_request: Request, exc: HempAtlasError) -> JSONResponse:
    LOGGER.warning("Unhandled atlas error: %s", exc)
    return error_response(status_code=500, err_type="atlas_error", message=str(exc))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UnknownLayerError, _unknown_layer)
    app.add_exception_handler(UnknownPresetError, _unknown_preset)
    app.add_exception_handler(StyleValidationError, _invalid_style)
    app.add_exception_handler(HempAtlasError, _atlas_error)
