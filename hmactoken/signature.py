from __future__ import annotations

import hashlib
import hmac
from typing import Any, Union

from .codec import b64encode
from .constants import TEXT_ENCODING
from .serializer import Serializer

Secret = Union[str, bytes, bytearray, memoryview]


def secret_bytes(secret: Secret) -> bytes:
    if isinstance(secret, str):
        return secret.encode(TEXT_ENCODING)
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return bytes(secret)
    raise TypeError(f"Secret must be str or bytes, got {type(secret).__name__}.")


def derive_signature(payload: Any, secret: Secret, serializer: Serializer) -> str:
    """Return the base64 HMAC-SHA256 of the payload's serialized text."""
    message = serializer.to_text(payload).encode(TEXT_ENCODING)
    digest = hmac.new(secret_bytes(secret), message, hashlib.sha256).digest()
    return b64encode(digest)


def signatures_match(expected: str, actual: str) -> bool:
    """Constant-time comparison of the UTF-8 bytes of two signature strings."""
    return hmac.compare_digest(
        expected.encode(TEXT_ENCODING, "surrogatepass"),
        actual.encode(TEXT_ENCODING, "surrogatepass"),
    )
