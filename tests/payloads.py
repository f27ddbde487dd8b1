from __future__ import annotations

from pydantic import BaseModel


class Claims(BaseModel):
    jti: str
    exp: int


class Grant:
    """Colon-separated `subject:scope` payload that parses itself."""

    def __init__(self, subject: str, scope: str) -> None:
        self.subject = subject
        self.scope = scope

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grant):
            return NotImplemented
        return (self.subject, self.scope) == (other.subject, other.scope)

    def to_text(self) -> str:
        return f"{self.subject}:{self.scope}"

    @classmethod
    def from_text(cls, text: str) -> "Grant":
        subject, sep, scope = text.partition(":")
        if not sep or not subject or not scope:
            raise ValueError(f"expected subject:scope, got {text!r}")
        return cls(subject, scope)
