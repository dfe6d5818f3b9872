"""
Thin wrappers over the collaborators the verifier orchestrates:

- base64url (stdlib `base64`, with a strict alphabet check in front)
- structured JSON decode (pydantic `TypeAdapter`)
- HMAC-SHA256 (stdlib `hmac` / `hashlib`)
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import re
from typing import Any

from pydantic import TypeAdapter

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def b64url_decode(segment: str) -> bytes:
    """
    Decode a base64url segment, padded or not.

    Raises:
        ValueError: characters outside the URL-safe alphabet, or bad length.
    """
    if not _B64URL_RE.fullmatch(segment):
        raise ValueError("Segment is not valid base64url")

    data = segment.rstrip("=")
    data += "=" * (-len(data) % 4)
    try:
        return base64.urlsafe_b64decode(data.encode("ascii"))
    except binascii.Error as exc:
        raise ValueError("Segment is not valid base64url") from exc


def json_decode(raw: bytes, target: Any) -> Any:
    """
    Parse JSON bytes into `target`.

    Raises:
        pydantic.ValidationError: invalid JSON or schema mismatch.
    """
    return TypeAdapter(target).validate_json(raw)


def hmac_sha256_equals(message: bytes, key: bytes, signature: bytes) -> bool:
    expected = hmac.new(key, message, hashlib.sha256).digest()
    return hmac.compare_digest(expected, signature)
