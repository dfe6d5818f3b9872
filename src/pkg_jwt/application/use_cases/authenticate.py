from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...domain.exceptions import (
    AuthenticationError,
    InvalidTokenError,
    TokenDecodeError,
    TokenFormatError,
    TokenSignatureError,
)
from ...domain.ports import TokenDecoder
from ...log import get_logger

logger = get_logger(__name__)


def _error_kind(exc: InvalidTokenError) -> str:
    """Short label for log events."""
    if isinstance(exc, TokenSignatureError):
        return "signature"
    if isinstance(exc, TokenFormatError):
        return "format"
    if isinstance(exc, TokenDecodeError):
        return "decode"
    return "invalid"


@dataclass(slots=True)
class AuthenticateTokenUseCase:
    """
    Application use case:
    - Verify and decode a token via the TokenDecoder port
    - Log the failure class (never the token or the key)

    Framework-agnostic.
    """

    token_decoder: TokenDecoder[Any]

    def execute(self, token: str) -> Any:
        """
        Authenticate a token and return its decoded payload.

        Raises:
            TokenFormatError
            TokenSignatureError
            TokenDecodeError
            AuthenticationError
        """
        try:
            payload = self.token_decoder.decode(token)
        except InvalidTokenError as exc:
            # signature failures may be forgery attempts; keep them louder
            log = logger.warning if isinstance(exc, TokenSignatureError) else logger.info
            log("token_rejected", error_kind=_error_kind(exc), reason=str(exc))
            raise
        except Exception as exc:
            logger.error("token_validation_failed", error=type(exc).__name__)
            raise AuthenticationError(f"Token validation failed: {exc}") from exc

        logger.debug("token_accepted")
        return payload
