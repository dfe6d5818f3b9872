"""
pkg_jwt

Verification and typed decoding of HS256-signed compact tokens
(header.payload.signature), with an optional FastAPI integration.
"""

__version__ = "0.1.0"

from .domain.constants import Algorithm, TokenType, ErrorKind
from .domain.exceptions import (
    AuthenticationError,
    InvalidTokenError,
    TokenFormatError,
    TokenSignatureError,
    TokenDecodeError,
)
from .domain.result import ParseError, ParseResult
from .domain.validation import validate_header
from .domain.value_objects import Header
from .domain.ports import TokenDecoder

from .adapters.hs256.verifier import HS256TokenDecoder, decode_header, parse

from .application.use_cases.authenticate import AuthenticateTokenUseCase

from .settings import VerifierSettings
from .env import settings_from_env
from .log import configure_logging

__all__ = [
    "__version__",
    # domain core
    "Algorithm",
    "TokenType",
    "ErrorKind",
    "Header",
    "ParseError",
    "ParseResult",
    "TokenDecoder",
    "validate_header",
    # exceptions
    "AuthenticationError",
    "InvalidTokenError",
    "TokenFormatError",
    "TokenSignatureError",
    "TokenDecodeError",
    # adapters
    "HS256TokenDecoder",
    "decode_header",
    "parse",
    # use cases
    "AuthenticateTokenUseCase",
    # config / logging
    "VerifierSettings",
    "settings_from_env",
    "configure_logging",
]
