"""Shared fixtures for pkg_jwt tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from token_factory import sign_token


@pytest.fixture
def secret_key() -> bytes:
    return b"test-secret-do-not-use-in-production"


@pytest.fixture
def make_token(secret_key: bytes) -> Callable[..., str]:
    def _make(
        payload: Any = None,
        header: Any = None,
        key: bytes | None = None,
    ) -> str:
        return sign_token(
            header if header is not None else {"alg": "HS256", "typ": "JWT"},
            payload if payload is not None else {"sub": "frodo"},
            key if key is not None else secret_key,
        )

    return _make
