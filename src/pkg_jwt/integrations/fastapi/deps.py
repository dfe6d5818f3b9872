from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from ..common.auth_factory import AuthDependencies
from ...domain.exceptions import (
    AuthenticationError,
    TokenDecodeError,
    TokenFormatError,
    TokenSignatureError,
)
from ...settings import DEFAULT_COOKIE_NAME
from .security import bearer_scheme, extract_token_from_request


def _detail(exc: AuthenticationError) -> str:
    """Client-facing 401 detail; no decoder internals, no signature bytes."""
    if isinstance(exc, TokenSignatureError):
        return "Invalid token signature"
    if isinstance(exc, TokenFormatError):
        return "Malformed token"
    if isinstance(exc, TokenDecodeError):
        return "Invalid token content"
    return "Not authenticated"


@dataclass(slots=True)
class FastAPIAuthorization:
    """
    FastAPI integration for pkg_jwt, built on top of the framework-agnostic
    AuthDependencies facade.

    Usage:

        fastapi_auth = create_fastapi_auth(secret_key=b"...", payload_type=Claims)

        @app.get("/me")
        async def me(claims: Claims = Depends(fastapi_auth.get_current_payload)):
            ...
    """

    auth: AuthDependencies
    cookie_name: str = DEFAULT_COOKIE_NAME

    async def get_current_payload(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Any:
        """Dependency: Require a valid token, return its payload."""
        token = extract_token_from_request(request, credentials, self.cookie_name)
        try:
            return self.auth.authenticate(token)
        except AuthenticationError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=_detail(exc),
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc

    async def get_optional_payload(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Any | None:
        """Dependency: Optional authentication."""
        try:
            token = extract_token_from_request(request, credentials, self.cookie_name)
        except HTTPException:
            # no token anywhere -> anonymous
            return None

        try:
            return self.auth.authenticate(token)
        except AuthenticationError:
            return None
