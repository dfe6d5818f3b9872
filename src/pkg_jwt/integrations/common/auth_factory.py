from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...adapters.hs256.verifier import DEFAULT_PAYLOAD_TYPE, HS256TokenDecoder
from ...application.use_cases.authenticate import AuthenticateTokenUseCase
from ...domain.ports import TokenDecoder
from ...settings import VerifierSettings


@dataclass(slots=True)
class AuthDependencies:
    """
    Framework-agnostic auth facade.

    Integrations (FastAPI, etc.) adapt this to their own dependency systems.
    """

    auth_use_case: AuthenticateTokenUseCase

    def authenticate(self, token: str) -> Any:
        """Token -> decoded payload (or raise auth exceptions)."""
        return self.auth_use_case.execute(token)


def create_auth_dependencies(
        *,
        secret_key: bytes,
        payload_type: Any = DEFAULT_PAYLOAD_TYPE,
) -> AuthDependencies:
    """
    High-level factory: shared secret + payload type -> AuthDependencies.

    - builds an HS256TokenDecoder
    - wires AuthenticateTokenUseCase
    - returns an AuthDependencies facade.
    """
    decoder: TokenDecoder[Any] = HS256TokenDecoder(
        secret_key=secret_key,
        payload_type=payload_type,
    )
    return AuthDependencies(auth_use_case=AuthenticateTokenUseCase(token_decoder=decoder))


def create_auth_dependencies_from_settings(
        settings: VerifierSettings,
        payload_type: Any = DEFAULT_PAYLOAD_TYPE,
) -> AuthDependencies:
    return create_auth_dependencies(
        secret_key=settings.secret_key,
        payload_type=payload_type,
    )
