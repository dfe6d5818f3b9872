# src/pkg_jwt/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Header:
    """
    JOSE header of a compact token.

    Field names follow the wire format (`alg`, `typ`). Unknown JSON members
    are ignored on decode; both fields are required.
    """
    alg: str
    typ: str

    @property
    def algorithm(self) -> str:
        return self.alg

    @property
    def type(self) -> str:
        return self.typ
