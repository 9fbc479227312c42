"""Error types raised by API response handling."""

from __future__ import annotations

from collections.abc import Sequence


class MvnoApiError(Exception):
    """Base exception for this package."""

    def __init__(self, message: str, *, cause: str | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class MvnoMalformedResponseError(MvnoApiError):
    """Payload does not match either recognized response shape."""

    def __init__(self, missing_keys: Sequence[str]) -> None:
        self.missing_keys = tuple(missing_keys)
        listed = ", ".join(f"`{key}`" for key in self.missing_keys)
        super().__init__(
            f"Malformed API response, missing keys: {listed}",
            cause="malformed",
        )


class MvnoInvalidStateError(MvnoApiError):
    """Accessor called before payload is set or for the wrong response shape."""

    def __init__(
        self,
        message: str,
        *,
        response_code: object = None,
        response_message: object = None,
    ) -> None:
        super().__init__(message, cause="usage")
        self.response_code = response_code
        self.response_message = response_message


class MvnoTimestampError(MvnoApiError):
    """Timestamp cannot be represented as a datetime."""

    def __init__(self, message: str, *, timestamp: object = None) -> None:
        super().__init__(message, cause="malformed")
        self.timestamp = timestamp


class MvnoResponseDecodeError(MvnoApiError):
    """Raw response body could not be decoded into a JSON object."""

    def __init__(self, message: str, *, body_preview: str | None = None) -> None:
        super().__init__(message, cause="decode")
        self.body_preview = body_preview


__all__ = [
    "MvnoApiError",
    "MvnoMalformedResponseError",
    "MvnoInvalidStateError",
    "MvnoTimestampError",
    "MvnoResponseDecodeError",
]
