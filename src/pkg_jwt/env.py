from __future__ import annotations

import os

from .log import LOG_LEVELS
from .settings import DEFAULT_COOKIE_NAME, VerifierSettings


def settings_from_env() -> VerifierSettings:
    """
    Build VerifierSettings from environment variables:

      PKG_JWT_SECRET_KEY   (required)
      PKG_JWT_COOKIE_NAME  (default: access_token)
      PKG_JWT_LOG_LEVEL    (default: info; debug/info/warning/error/critical)

    Fails closed if the secret is missing or the log level is unknown.
    """
    secret = os.getenv("PKG_JWT_SECRET_KEY")
    if not secret:
        raise RuntimeError("Missing token settings: PKG_JWT_SECRET_KEY")

    log_level = (os.getenv("PKG_JWT_LOG_LEVEL") or "info").strip().lower()
    if log_level not in LOG_LEVELS:
        raise RuntimeError(
            f"Invalid PKG_JWT_LOG_LEVEL {log_level!r}; "
            f"expected one of: {', '.join(LOG_LEVELS)}"
        )

    return VerifierSettings(
        secret_key=secret.encode("utf-8"),
        cookie_name=(os.getenv("PKG_JWT_COOKIE_NAME") or DEFAULT_COOKIE_NAME).strip(),
        log_level=log_level,
    )
