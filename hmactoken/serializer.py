"""Payload serializers.

A token signs the *text* a serializer produces, and verification re-derives
that text from the parsed payload. Any serializer used here must therefore be
deterministic: the same logical value has to produce the same characters on
every call. Nothing below detects a serializer that breaks this rule; it
simply shows up as tokens that never validate.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ValidationError

from .errors import PayloadParseError, SerializationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@runtime_checkable
class TextPayload(Protocol):
    """A payload type that renders itself to text and can be rebuilt from it."""

    def to_text(self) -> str: ...

    @classmethod
    def from_text(cls, text: str) -> "TextPayload": ...


class Serializer(ABC, Generic[T]):
    @abstractmethod
    def to_text(self, payload: T) -> str:
        raise NotImplementedError

    @abstractmethod
    def from_text(self, text: str) -> T:
        raise NotImplementedError


class JsonSerializer(Serializer[Any]):
    """Compact JSON for plain values.

    Object keys are written in insertion order, and ``json.loads`` keeps the
    wire order, so a parsed payload re-serializes to the text it came from.
    Dicts built with the same keys in a different order sign differently.
    ``expected_type`` restricts the top-level value accepted on parse; ``bool``
    is not accepted where ``int`` or ``float`` is expected.
    """

    def __init__(self, expected_type: type | None = None) -> None:
        self.expected_type = expected_type

    def to_text(self, payload: Any) -> str:
        try:
            return json.dumps(
                payload,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as error:
            raise SerializationError(f"Payload is not JSON serializable: {error}") from error

    def from_text(self, text: str) -> Any:
        try:
            value = json.loads(text)
        except (ValueError, RecursionError) as error:
            raise PayloadParseError(f"Payload is not valid JSON: {error}") from error
        if self.expected_type is not None and not _is_json_instance(value, self.expected_type):
            raise PayloadParseError(
                f"Expected {self.expected_type.__name__} payload, got {type(value).__name__}."
            )
        return value


def _is_json_instance(value: Any, expected_type: type) -> bool:
    if expected_type is bool or isinstance(value, bool):
        return expected_type is bool and isinstance(value, bool)
    if expected_type is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected_type)


class ModelSerializer(Serializer[M]):
    """Serializer for pydantic models.

    Fields are written in declaration order, so two instances of the same
    model with equal field values always produce identical text.
    """

    def __init__(self, model: type[M]) -> None:
        self.model = model

    def to_text(self, payload: M) -> str:
        if not isinstance(payload, self.model):
            raise SerializationError(
                f"Expected {self.model.__name__} payload, got {type(payload).__name__}."
            )
        try:
            return payload.model_dump_json()
        except ValueError as error:
            raise SerializationError(
                f"{self.model.__name__} payload could not be serialized: {error}"
            ) from error

    def from_text(self, text: str) -> M:
        try:
            return self.model.model_validate_json(text)
        except ValidationError as error:
            raise PayloadParseError(
                f"Payload does not match {self.model.__name__}: {error}"
            ) from error


class TextSerializer(Serializer[Any]):
    def __init__(self, payload_type: type) -> None:
        self.payload_type = payload_type

    def to_text(self, payload: Any) -> str:
        try:
            text = payload.to_text()
        except Exception as error:
            raise SerializationError(
                f"{type(payload).__name__} payload could not be rendered: {error}"
            ) from error
        if not isinstance(text, str):
            raise SerializationError(
                f"{type(payload).__name__}.to_text() returned {type(text).__name__}, expected str."
            )
        return text

    def from_text(self, text: str) -> Any:
        try:
            return self.payload_type.from_text(text)
        except Exception as error:
            raise PayloadParseError(
                f"Payload could not be parsed as {self.payload_type.__name__}: {error}"
            ) from error


def serializer_for(payload_type: type | None = None) -> Serializer:
    if payload_type is None:
        return JsonSerializer()
    if isinstance(payload_type, type) and issubclass(payload_type, BaseModel):
        return ModelSerializer(payload_type)
    if callable(getattr(payload_type, "from_text", None)) and callable(
        getattr(payload_type, "to_text", None)
    ):
        return TextSerializer(payload_type)
    if payload_type in (dict, list, str, int, float, bool, type(None)):
        return JsonSerializer(payload_type)
    raise TypeError(
        f"No serializer for payload type {getattr(payload_type, '__name__', payload_type)!r}; "
        "use a pydantic model, a TextPayload, or plain JSON values."
    )
