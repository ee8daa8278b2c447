"""
Failure classification for customer API calls.

Maps whatever a submission raised onto one of three shapes so views and
scripts can turn it into user-facing messages without knowing which HTTP
library produced it:

- ValidationErrors: the API answered with a list of field messages
- SingleMessage: one human-readable line
- Fallback: nothing usable, show the generic text
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

FALLBACK_MESSAGE = "An unexpected error occurred"


class CustomersApiError(RuntimeError):
    """Transport failure: connection problem or non-success HTTP status."""

    def __init__(self, message: str = "", *, status_code: int | None = None, payload: Mapping[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


@dataclass(frozen=True)
class ValidationErrors:
    messages: tuple[str, ...]


@dataclass(frozen=True)
class SingleMessage:
    text: str


@dataclass(frozen=True)
class Fallback:
    text: str = FALLBACK_MESSAGE


FailureKind = Union[ValidationErrors, SingleMessage, Fallback]


def _payload_message(payload: Any) -> Any:
    if isinstance(payload, Mapping):
        return payload.get("message")
    return None


def _is_message_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes)) and len(value) > 0


def classify_failure(failure: Any) -> FailureKind:
    if isinstance(failure, CustomersApiError):
        message = _payload_message(failure.payload)
        if _is_message_list(message):
            return ValidationErrors(tuple(str(m) for m in message))
        if isinstance(message, str) and message.strip():
            return SingleMessage(message)
        if failure.message:
            return SingleMessage(failure.message)
        return Fallback()
    if isinstance(failure, Exception):
        text = str(failure).strip()
        if text:
            return SingleMessage(text)
    return Fallback()


def failure_messages(kind: FailureKind) -> list[str]:
    if isinstance(kind, ValidationErrors):
        return list(kind.messages)
    return [kind.text]
