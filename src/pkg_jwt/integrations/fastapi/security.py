from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param

from ...settings import DEFAULT_COOKIE_NAME

# Plug into dependencies to get the bearer scheme in the OpenAPI docs
bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def _from_credentials(credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials is None:
        return None
    return (credentials.credentials or "").strip() or None


def _from_authorization_header(request: Request) -> Optional[str]:
    """`Authorization: Bearer <token>`, scheme matched case-insensitively."""
    scheme, param = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "bearer":
        return None
    return param.strip() or None


def _from_cookie(request: Request, cookie_name: str) -> Optional[str]:
    return (request.cookies.get(cookie_name) or "").strip() or None


def extract_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> str:
    """
    Find the compact token for this request.

    Lookup order: resolved HTTPBearer credentials, the raw Authorization
    header (for routes not using `bearer_scheme`), then the `cookie_name`
    cookie. Raises HTTPException(401) when none carries a token.
    """
    token = (
        _from_credentials(credentials)
        or _from_authorization_header(request)
        or _from_cookie(request, cookie_name)
    )
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=dict(_UNAUTHORIZED_HEADERS),
        )
    return token
