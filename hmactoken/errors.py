from __future__ import annotations


class TokenError(RuntimeError):
    """Base class for every failure raised while building or reading a token."""


class DecodeError(TokenError):
    def __init__(self, message: str = "Invalid base64 segment.") -> None:
        super().__init__(message)


class EncodingError(TokenError):
    def __init__(self, message: str = "Token payload is not valid UTF-8.") -> None:
        super().__init__(message)


class FormatError(TokenError):
    def __init__(self, missing: str, message: str | None = None) -> None:
        super().__init__(message or f"Token is missing its {missing} segment.")
        self.missing = missing


class SerializationError(TokenError):
    def __init__(self, message: str = "Payload could not be serialized.") -> None:
        super().__init__(message)


class PayloadParseError(SerializationError):
    def __init__(self, message: str = "Payload could not be parsed.") -> None:
        super().__init__(message)
