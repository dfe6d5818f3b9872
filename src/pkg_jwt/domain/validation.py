from __future__ import annotations

from typing import Optional

from .constants import Algorithm, ErrorKind, TokenType
from .result import ParseError
from .value_objects import Header


def validate_header(header: Header) -> Optional[ParseError]:
    """
    Check a decoded header against the pinned algorithm and token type.

    Exact, case-sensitive comparison; `alg` is checked first.
    Returns None when the header is acceptable.
    """
    if header.alg != Algorithm.HS256.value:
        return ParseError(ErrorKind.FORMAT, f"Unsupported algorithm: {header.alg!r}")
    if header.typ != TokenType.JWT.value:
        return ParseError(ErrorKind.FORMAT, f"Unsupported token type: {header.typ!r}")
    return None
