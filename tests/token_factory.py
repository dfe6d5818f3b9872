"""Hand-rolled HS256 encoder for crafting edge-case tokens in tests."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
from typing import Any

LITERAL_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdHJpbmciOiJCaWxibyBCYWdnaW5zIiwiaW50ZWdlciI6MTMzN30"
    ".hKRaWXYKNMRdxicE23jPHyH6W7mt4G491YXgf4LWHKs"
)
LITERAL_KEY = b"secret"


def b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _as_bytes(part: Any) -> bytes:
    if isinstance(part, bytes):
        return part
    return json.dumps(part, separators=(",", ":")).encode("utf-8")


def sign_raw(signing_input: str, key: bytes) -> str:
    """Append an HMAC-SHA256 signature to an already-encoded header.payload."""
    sig = hmac.new(key, signing_input.encode("ascii"), hashlib.sha256).digest()
    return f"{signing_input}.{b64url(sig)}"


def sign_token(header: Any, payload: Any, key: bytes) -> str:
    """Encode header/payload (dicts or raw JSON bytes) and sign them."""
    return sign_raw(f"{b64url(_as_bytes(header))}.{b64url(_as_bytes(payload))}", key)
