class AuthenticationError(Exception):
    """Raised when authentication fails."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when token is malformed or invalid."""
    pass


class TokenFormatError(InvalidTokenError):
    """Raised when token structure, base64url or header shape is wrong."""
    pass


class TokenSignatureError(InvalidTokenError):
    """Raised when token signature does not match."""
    pass


class TokenDecodeError(InvalidTokenError):
    """Raised when header or payload JSON does not fit the expected schema."""
    pass
