from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, TypeVar

from pydantic import ValidationError

from ...domain.constants import ErrorKind
from ...domain.ports import TokenDecoder
from ...domain.result import ParseResult
from ...domain.validation import validate_header
from ...domain.value_objects import Header
from .codec import b64url_decode, hmac_sha256_equals, json_decode

T = TypeVar("T")

DEFAULT_PAYLOAD_TYPE: Any = dict[str, Any]

_SEGMENT_COUNT = 3


def decode_header(raw: bytes) -> ParseResult[Header]:
    """Structurally decode header JSON bytes into a Header."""
    try:
        return ParseResult.success(json_decode(raw, Header))
    except ValidationError as exc:
        return ParseResult.failure(ErrorKind.DECODE, "Invalid token header", exc)


def parse(
    token: str,
    key: bytes,
    payload_type: Any = DEFAULT_PAYLOAD_TYPE,
) -> ParseResult[Any]:
    """
    Verify an HS256 compact token and decode its payload into `payload_type`.

    The signature is checked before the header or payload are deserialized.
    Never raises for bad input; every failure comes back as a ParseResult
    carrying FORMAT, SIGNATURE or DECODE.
    """
    # ---- Signature branch -------------------------------------------------
    split = _split_signature(token)
    if split is None:
        return ParseResult.failure(ErrorKind.FORMAT, "Token must have three segments")
    signing_text, signature_b64 = split

    try:
        signing_input = signing_text.encode("utf-8")
    except UnicodeEncodeError:
        return ParseResult.failure(ErrorKind.FORMAT, "Token is not valid UTF-8 text")

    try:
        signature = b64url_decode(signature_b64)
    except ValueError:
        return ParseResult.failure(ErrorKind.FORMAT, "Token signature is not valid base64url")

    if not hmac_sha256_equals(signing_input, key, signature):
        return ParseResult.failure(ErrorKind.SIGNATURE, "Token signature is invalid")

    # ---- Content branch ---------------------------------------------------
    header_b64, payload_b64 = _split_content(token)
    try:
        header_raw = b64url_decode(header_b64)
        payload_raw = b64url_decode(payload_b64)
    except ValueError:
        return ParseResult.failure(ErrorKind.FORMAT, "Token segment is not valid base64url")

    header_result = decode_header(header_raw)
    if header_result.error is not None:
        return ParseResult(error=header_result.error)

    header_error = validate_header(header_result.value)
    if header_error is not None:
        return ParseResult(error=header_error)

    try:
        payload = json_decode(payload_raw, payload_type)
    except ValidationError as exc:
        return ParseResult.failure(ErrorKind.DECODE, "Invalid token payload", exc)

    return ParseResult.success(payload)


# ---------------------------------------------------------------------- #
# Split passes
# ---------------------------------------------------------------------- #


def _split_signature(token: str) -> Optional[Tuple[str, str]]:
    """
    First pass, scanning from the right.

    Returns the signing input (header.payload exactly as it appears in the
    token, still encoded) and the signature segment, or None when the token
    does not have exactly three segments.
    """
    if token.count(".") != _SEGMENT_COUNT - 1:
        return None
    signing_input, _, signature_b64 = token.rpartition(".")
    return signing_input, signature_b64


def _split_content(token: str) -> Tuple[str, str]:
    """
    Second pass, scanning from the left.

    Only called after the first pass accepted the token, so three parts
    are guaranteed.
    """
    header_b64, payload_b64, _ = token.split(".", _SEGMENT_COUNT - 1)
    return header_b64, payload_b64


# ---------------------------------------------------------------------- #
# Port implementation
# ---------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class HS256TokenDecoder(TokenDecoder[T]):
    """
    Adapter implementing the TokenDecoder port with a fixed key and
    payload type.
    """

    secret_key: bytes = field(repr=False)
    payload_type: Any = DEFAULT_PAYLOAD_TYPE

    def parse(self, token: str) -> ParseResult[T]:
        return parse(token, self.secret_key, self.payload_type)

    def decode(self, token: str) -> T:
        """
        Raises:
            TokenFormatError
            TokenSignatureError
            TokenDecodeError
        """
        return self.parse(token).unwrap()
