"""Base64 codec for token segments.

The alphabet is standard base64 and segments are always written without
``=`` padding. Decoding is strict: padding, foreign characters and unused
trailing bits are rejected so that a segment has exactly one valid spelling.
"""

from __future__ import annotations

import base64
import binascii

from .errors import DecodeError


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).rstrip(b"=").decode("ascii")


def b64decode(text: str) -> bytes:
    if "=" in text:
        raise DecodeError("Base64 segment must not contain padding.")
    if len(text) % 4 == 1:
        raise DecodeError(f"Base64 segment has invalid length {len(text)}.")

    padded = text + "=" * (-len(text) % 4)
    try:
        data = base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as error:
        raise DecodeError(f"Invalid base64 segment: {error}") from error

    if b64encode(data) != text:
        raise DecodeError("Base64 segment is not canonically encoded.")
    return data
