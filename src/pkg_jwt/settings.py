from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_COOKIE_NAME = "access_token"


@dataclass(slots=True)
class VerifierSettings:
    """
    Token verification settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    secret_key: bytes = field(repr=False)
    cookie_name: str = DEFAULT_COOKIE_NAME
    log_level: str = "info"
