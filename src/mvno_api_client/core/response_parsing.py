"""Raw body extraction and JSON decoding for API responses."""

from __future__ import annotations

import json
import logging
from typing import Protocol

import httpx

from .errors import MvnoResponseDecodeError

logger = logging.getLogger("mvno_api_client")

_PREVIEW_LIMIT = 200


class HttpBodyResponse(Protocol):
    def get_body(self) -> str | bytes: ...


def read_response_body(response: HttpBodyResponse | httpx.Response) -> str | bytes:
    """Return the raw body held by an HTTP response collaborator."""

    if isinstance(response, httpx.Response):
        return response.content
    get_body = getattr(response, "get_body", None)
    if not callable(get_body):
        raise TypeError(
            f"{type(response).__name__} exposes neither httpx.Response content nor get_body()"
        )
    return get_body()


def decode_json_payload(body: str | bytes) -> dict[str, object]:
    """Decode a JSON object body, mapping failures to MvnoResponseDecodeError."""

    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise _decode_error("response body is not valid JSON", body) from exc

    if not isinstance(payload, dict):
        raise _decode_error("response JSON root must be an object", body)
    return payload


def _decode_error(reason: str, body: object) -> MvnoResponseDecodeError:
    preview = _preview(body)
    logger.warning("response decode failed reason=%s", reason)
    return MvnoResponseDecodeError(reason, body_preview=preview)


def _preview(body: object) -> str | None:
    if isinstance(body, bytes):
        text = body.decode("utf-8", errors="replace")
    elif isinstance(body, str):
        text = body
    else:
        return None
    return text[:_PREVIEW_LIMIT]


__all__ = [
    "HttpBodyResponse",
    "read_response_body",
    "decode_json_payload",
]
