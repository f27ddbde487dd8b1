from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from .codec import b64decode, b64encode
from .constants import DELIMITER, LOGGER, TEXT_ENCODING
from .errors import EncodingError, FormatError, TokenError
from .serializer import JsonSerializer, Serializer, TextPayload, serializer_for
from .signature import Secret, derive_signature, signatures_match

T = TypeVar("T")


def _default_serializer(payload: Any) -> Serializer:
    if isinstance(payload, (BaseModel, TextPayload)):
        return serializer_for(type(payload))
    return JsonSerializer()


@dataclass(frozen=True)
class Token(Generic[T]):
    """A payload paired with the signature of its serialized text.

    Tokens built with :meth:`create` carry a signature derived from the
    payload. Tokens read with :meth:`parse` carry whatever signature the wire
    text held and must pass :meth:`is_valid` before the payload is trusted.
    """

    payload: T
    signature: str
    serializer: Serializer = field(default_factory=JsonSerializer, compare=False, repr=False)

    @classmethod
    def create(
        cls,
        payload: T,
        secret: Secret,
        *,
        serializer: Serializer | None = None,
    ) -> Token[T]:
        serializer = serializer or _default_serializer(payload)
        signature = derive_signature(payload, secret, serializer)
        return cls(payload=payload, signature=signature, serializer=serializer)

    def encode(self) -> str:
        body = b64encode(self.serializer.to_text(self.payload).encode(TEXT_ENCODING))
        return f"{body}{DELIMITER}{self.signature}"

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        payload_type: type | None = None,
        serializer: Serializer | None = None,
    ) -> Token[Any]:
        """Rebuild a token from wire text without checking its signature."""
        if not isinstance(text, str):
            raise FormatError("payload", f"Token must be text, got {type(text).__name__}.")

        body, delimiter, signature = text.partition(DELIMITER)
        if not body:
            raise FormatError("payload")
        if not delimiter or not signature:
            raise FormatError("signature")

        raw = b64decode(body)
        try:
            payload_text = raw.decode(TEXT_ENCODING)
        except UnicodeDecodeError as error:
            raise EncodingError(f"Token payload is not valid UTF-8: {error}") from error

        serializer = serializer or serializer_for(payload_type)
        return cls(
            payload=serializer.from_text(payload_text),
            signature=signature,
            serializer=serializer,
        )

    def is_valid(self, secret: Secret) -> bool:
        try:
            expected = derive_signature(self.payload, secret, self.serializer)
        except TokenError as error:
            LOGGER.debug("Token signature could not be derived: %s", type(error).__name__)
            return False
        return signatures_match(expected, self.signature)


def create(payload: T, secret: Secret, *, serializer: Serializer | None = None) -> Token[T]:
    return Token.create(payload, secret, serializer=serializer)


def encode(token: Token[Any]) -> str:
    return token.encode()


def parse(
    text: str,
    *,
    payload_type: type | None = None,
    serializer: Serializer | None = None,
) -> Token[Any]:
    return Token.parse(text, payload_type=payload_type, serializer=serializer)


def is_valid(token: Token[Any], secret: Secret) -> bool:
    return token.is_valid(secret)
