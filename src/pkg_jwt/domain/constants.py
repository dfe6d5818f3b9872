from enum import Enum


class Algorithm(str, Enum):
    HS256 = "HS256"


class TokenType(str, Enum):
    JWT = "JWT"


class ErrorKind(Enum):
    FORMAT = "format"
    SIGNATURE = "signature"
    DECODE = "decode"
