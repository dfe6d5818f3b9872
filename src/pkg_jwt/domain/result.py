from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .constants import ErrorKind
from .exceptions import (
    InvalidTokenError,
    TokenDecodeError,
    TokenFormatError,
    TokenSignatureError,
)

T = TypeVar("T")

_EXCEPTIONS: dict[ErrorKind, type[InvalidTokenError]] = {
    ErrorKind.FORMAT: TokenFormatError,
    ErrorKind.SIGNATURE: TokenSignatureError,
    ErrorKind.DECODE: TokenDecodeError,
}


@dataclass(frozen=True, slots=True)
class ParseError:
    """
    One failure of the parse pipeline.

    `cause` carries the underlying decoder diagnostic for DECODE errors.
    """
    kind: ErrorKind
    message: str
    cause: Optional[Exception] = None

    def to_exception(self) -> InvalidTokenError:
        return _EXCEPTIONS[self.kind](self.message)


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """
    Outcome of verifying and decoding a token: either a value or an error,
    never both.
    """
    value: Optional[T] = None
    error: Optional[ParseError] = None

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        cause: Optional[Exception] = None,
    ) -> ParseResult[T]:
        return cls(error=ParseError(kind=kind, message=message, cause=cause))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the decoded value.

        Raises:
            TokenFormatError
            TokenSignatureError
            TokenDecodeError
        """
        if self.error is not None:
            raise self.error.to_exception() from self.error.cause
        return self.value  # type: ignore[return-value]
