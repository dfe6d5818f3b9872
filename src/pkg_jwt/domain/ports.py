from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class TokenDecoder(Protocol[T_co]):
    """
    Port for turning a compact token into a typed payload.

    Implementations live in the adapters layer (e.g. HS256 decoder).
    """

    def decode(self, token: str) -> T_co:
        """
        Verify the given token and decode its payload.

        Should:
          - verify signature before touching the payload
          - validate the header
        Raises:
          - TokenFormatError
          - TokenSignatureError
          - TokenDecodeError
        """
        ...
