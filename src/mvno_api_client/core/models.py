"""Validated response outcome models."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .errors import MvnoMalformedResponseError

logger = logging.getLogger("mvno_api_client")

EXCEPTION_SOURCE_SERVER = "Receiver"
EXCEPTION_SOURCE_CLIENT = "Sender"

EXCEPTIONAL_KEYS = ("exception", "fault")
STANDARD_KEYS = ("responseStatus", "responseCode", "timestamp")


@dataclass(slots=True, frozen=True)
class StandardOutcome:
    success: bool
    code: int
    timestamp: int
    message: str | None = None

    @property
    def is_successful(self) -> bool:
        return bool(self.success)


@dataclass(slots=True, frozen=True)
class ExceptionalOutcome:
    cause: str
    fault_source: str

    @property
    def is_server_fault(self) -> bool:
        return self.fault_source == EXCEPTION_SOURCE_SERVER

    @property
    def is_client_fault(self) -> bool:
        return self.fault_source == EXCEPTION_SOURCE_CLIENT


ResponseOutcome = StandardOutcome | ExceptionalOutcome


def _is_set(payload: Mapping[str, object], key: str) -> bool:
    return payload.get(key) is not None


def required_keys_for(payload: Mapping[str, object]) -> tuple[str, ...]:
    """Return required keys of the shape the payload claims to have.

    Any trace of ``exception`` or ``fault`` selects the exceptional shape.
    """

    if any(_is_set(payload, key) for key in EXCEPTIONAL_KEYS):
        return EXCEPTIONAL_KEYS
    return STANDARD_KEYS


def find_missing_keys(
    payload: Mapping[str, object],
    required: Sequence[str],
) -> list[str]:
    return [key for key in required if not _is_set(payload, key)]


def is_exceptional_payload(payload: Mapping[str, object]) -> bool:
    return _is_set(payload, "exception")


def validate_payload(payload: object) -> Mapping[str, object]:
    """Check required keys and return the payload unchanged.

    A non-mapping value is treated as an empty payload, so it fails with the
    standard shape's keys listed.
    """

    candidate: Mapping[str, object] = payload if isinstance(payload, Mapping) else {}
    missing = find_missing_keys(candidate, required_keys_for(candidate))
    if missing:
        logger.warning("malformed response payload missing_keys=%s", ",".join(missing))
        raise MvnoMalformedResponseError(missing)
    return candidate


def build_outcome(payload: Mapping[str, object]) -> ResponseOutcome:
    if is_exceptional_payload(payload):
        return ExceptionalOutcome(
            cause=payload["exception"],
            fault_source=payload.get("fault"),
        )
    return StandardOutcome(
        success=payload.get("responseStatus"),
        code=payload.get("responseCode"),
        timestamp=payload.get("timestamp"),
        message=payload.get("responseMessage"),
    )


def parse_outcome(payload: object) -> ResponseOutcome:
    """Validate a decoded payload and classify it."""

    return build_outcome(validate_payload(payload))


__all__ = [
    "EXCEPTION_SOURCE_SERVER",
    "EXCEPTION_SOURCE_CLIENT",
    "EXCEPTIONAL_KEYS",
    "STANDARD_KEYS",
    "StandardOutcome",
    "ExceptionalOutcome",
    "ResponseOutcome",
    "required_keys_for",
    "find_missing_keys",
    "is_exceptional_payload",
    "validate_payload",
    "build_outcome",
    "parse_outcome",
]
