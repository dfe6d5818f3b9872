from __future__ import annotations

from typing import Any

from .deps import FastAPIAuthorization
from .security import bearer_scheme, extract_token_from_request
from ..common.auth_factory import (
    AuthDependencies,
    create_auth_dependencies,
    create_auth_dependencies_from_settings,
)
from ...adapters.hs256.verifier import DEFAULT_PAYLOAD_TYPE
from ...env import settings_from_env
from ...log import configure_logging
from ...settings import DEFAULT_COOKIE_NAME


def create_fastapi_auth(
    *,
    secret_key: bytes,
    payload_type: Any = DEFAULT_PAYLOAD_TYPE,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> FastAPIAuthorization:
    """
    High-level helper for FastAPI apps:

    - Creates AuthDependencies for an HS256 shared secret
    - Wraps them in FastAPIAuthorization, exposing dependencies like:

        fastapi_auth.get_current_payload
        fastapi_auth.get_optional_payload
    """
    auth: AuthDependencies = create_auth_dependencies(
        secret_key=secret_key,
        payload_type=payload_type,
    )
    return FastAPIAuthorization(auth=auth, cookie_name=cookie_name)


def create_fastapi_auth_from_env(payload_type: Any = DEFAULT_PAYLOAD_TYPE) -> FastAPIAuthorization:
    """
    Same as create_fastapi_auth, configured from PKG_JWT_* env vars.

    Also applies PKG_JWT_LOG_LEVEL through configure_logging.
    """
    settings = settings_from_env()
    configure_logging(settings.log_level)
    auth = create_auth_dependencies_from_settings(settings, payload_type)
    return FastAPIAuthorization(auth=auth, cookie_name=settings.cookie_name)


__all__ = [
    "FastAPIAuthorization",
    "bearer_scheme",
    "create_fastapi_auth",
    "create_fastapi_auth_from_env",
    "extract_token_from_request",
]
