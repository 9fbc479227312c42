"""API response envelope with state-checked accessors."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType

import httpx

from ..config import ApiResponseConfig
from .errors import MvnoInvalidStateError, MvnoTimestampError
from .models import (
    EXCEPTION_SOURCE_CLIENT,
    EXCEPTION_SOURCE_SERVER,
    ResponseOutcome,
    build_outcome,
    is_exceptional_payload,
    validate_payload,
)
from .response_parsing import HttpBodyResponse, decode_json_payload, read_response_body

logger = logging.getLogger("mvno_api_client")


class ApiResponse:
    """Single decoded API response.

    A payload is either *exceptional* (``exception`` and ``fault`` keys) or
    *standard* (``responseStatus``, ``responseCode`` and ``timestamp`` keys).
    Accessors raise :class:`MvnoInvalidStateError` when the payload is unset or
    has the wrong shape; check :meth:`is_successful` or :meth:`is_exceptional`
    first.
    """

    EXCEPTION_SOURCE_SERVER = EXCEPTION_SOURCE_SERVER
    EXCEPTION_SOURCE_CLIENT = EXCEPTION_SOURCE_CLIENT

    def __init__(
        self,
        payload: Mapping[str, object] | None = None,
        *,
        config: ApiResponseConfig | None = None,
    ) -> None:
        self._config = config or ApiResponseConfig()
        self._config.validate()
        self._payload: Mapping[str, object] | None = None
        self._datetime: datetime | None = None
        if payload is not None:
            self.set_payload(payload)

    @classmethod
    def from_http_response(
        cls,
        response: HttpBodyResponse | httpx.Response,
        *,
        config: ApiResponseConfig | None = None,
    ) -> "ApiResponse":
        return cls.from_body(read_response_body(response), config=config)

    @classmethod
    def from_body(
        cls,
        body: str | bytes,
        *,
        config: ApiResponseConfig | None = None,
    ) -> "ApiResponse":
        response = cls(config=config)
        response.set_payload(decode_json_payload(body))
        return response

    def set_payload(self, data: Mapping[str, object]) -> None:
        if self._payload is not None and not self._config.allow_payload_reassignment:
            raise MvnoInvalidStateError("Payload has already been set")
        validated = validate_payload(data)
        self._payload = MappingProxyType(dict(validated))
        self._datetime = None
        logger.debug(
            "response payload stored shape=%s keys=%s",
            "exceptional" if is_exceptional_payload(validated) else "standard",
            len(validated),
        )

    @property
    def has_payload(self) -> bool:
        return self._payload is not None

    @property
    def payload(self) -> Mapping[str, object]:
        return self._require_payload()

    def get_payload(self) -> Mapping[str, object]:
        return self._require_payload()

    @property
    def outcome(self) -> ResponseOutcome:
        return build_outcome(self._require_payload())

    def get_item(self, key: str) -> object:
        if not self.has_item(key):
            raise MvnoInvalidStateError(f"Payload item `{key}` doesn't exist")
        return self._require_payload()[key]

    def has_item(self, key: str) -> bool:
        return key in self._require_payload()

    def is_exceptional(self) -> bool:
        return is_exceptional_payload(self._require_payload())

    def is_successful(self) -> bool:
        if self.is_exceptional():
            return False
        return bool(self._require_payload().get("responseStatus"))

    def get_response_message(self) -> object:
        """Return ``responseMessage``, or ``None`` when the server omitted it."""

        self._assert_not_exceptional()
        return self._require_payload().get("responseMessage")

    def get_response_code(self) -> object:
        self._assert_not_exceptional()
        return self._require_payload()["responseCode"]

    def get_timestamp(self) -> object:
        self._assert_successful()
        return self._require_payload()["timestamp"]

    def get_exception(self) -> object:
        self._assert_exceptional()
        return self._require_payload()["exception"]

    def get_exception_source(self) -> object:
        self._assert_exceptional()
        return self._require_payload()["fault"]

    def is_server_exception(self) -> bool:
        return self.get_exception_source() == EXCEPTION_SOURCE_SERVER

    def is_client_exception(self) -> bool:
        return self.get_exception_source() == EXCEPTION_SOURCE_CLIENT

    def get_datetime(self) -> datetime:
        """Return the timestamp as an aware datetime in the configured zone.

        Computed on first call and cached while the payload stays the same.
        """

        if self._datetime is None:
            timestamp = self.get_timestamp()
            try:
                self._datetime = datetime.fromtimestamp(
                    timestamp,  # type: ignore[arg-type]
                    tz=self._config.timezone,
                )
            except (OverflowError, OSError, ValueError, TypeError) as exc:
                raise MvnoTimestampError(
                    f"Timestamp `{timestamp}` is not a representable epoch time",
                    timestamp=timestamp,
                ) from exc
        return self._datetime

    def _require_payload(self) -> Mapping[str, object]:
        if self._payload is None:
            raise MvnoInvalidStateError("Payload hasn't been set")
        return self._payload

    def _assert_successful(self) -> None:
        if self.is_successful():
            return
        message = "Response isn't a successful response"
        if self.is_exceptional():
            raise MvnoInvalidStateError(message)
        payload = self._require_payload()
        code = payload.get("responseCode")
        text = payload.get("responseMessage")
        details = f"error code: `{code}`"
        if text is not None:
            details += f", message: `{text}`"
        raise MvnoInvalidStateError(
            f"{message} ({details})",
            response_code=code,
            response_message=text,
        )

    def _assert_exceptional(self) -> None:
        if not self.is_exceptional():
            raise MvnoInvalidStateError("Response isn't an exceptional response")

    def _assert_not_exceptional(self) -> None:
        if self.is_exceptional():
            raise MvnoInvalidStateError("Response is an exceptional response")

    def __repr__(self) -> str:
        if self._payload is None:
            state = "unset"
        elif self.is_exceptional():
            state = "exceptional"
        elif self.is_successful():
            state = "successful"
        else:
            state = "unsuccessful"
        return f"{type(self).__name__}(state={state})"


__all__ = [
    "ApiResponse",
]
