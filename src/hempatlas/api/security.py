# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import secrets

from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hempatlas.utils.env import env

API_KEY_ENV = "HEMPATLAS_API_KEY"

bearer_scheme = HTTPBearer(auto_error=False)


def bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> str | None:
    """Return the bearer token of the request, or None when absent/blank."""

    if credentials is None:
        return None
    token = (credentials.credentials or "").strip()
    return token or None


def is_authorized(token: str | None) -> bool:
    """Decide whether ``token`` unlocks the auth-gated layers.

    Behavior
    - No token: signed out.
    - ``HEMPATLAS_API_KEY`` unset: any non-empty token counts as signed in.
    - ``HEMPATLAS_API_KEY`` set: the token must match it.
    """
    if not token:
        return False
    expected = env("API_KEY")
    if not expected:
        return True
    return secrets.compare_digest(token, expected)
