from __future__ import annotations

from mvno_api_client.core.errors import (
    MvnoApiError,
    MvnoInvalidStateError,
    MvnoMalformedResponseError,
    MvnoResponseDecodeError,
    MvnoTimestampError,
)


def test_malformed_response_error_keeps_missing_keys_in_order():
    err = MvnoMalformedResponseError(["responseCode", "timestamp"])
    assert err.missing_keys == ("responseCode", "timestamp")
    assert str(err) == "Malformed API response, missing keys: `responseCode`, `timestamp`"
    assert err.cause == "malformed"


def test_invalid_state_error_defaults_diagnostics_to_none():
    err = MvnoInvalidStateError("Payload hasn't been set")
    assert err.response_code is None
    assert err.response_message is None
    assert err.cause == "usage"


def test_decode_error_holds_body_preview():
    err = MvnoResponseDecodeError("response body is not valid JSON", body_preview="<html>")
    assert err.body_preview == "<html>"
    assert err.cause == "decode"


def test_all_errors_share_package_base():
    for exc_type in (
        MvnoMalformedResponseError,
        MvnoInvalidStateError,
        MvnoResponseDecodeError,
        MvnoTimestampError,
    ):
        assert issubclass(exc_type, MvnoApiError)


def test_timestamp_error_keeps_offending_value():
    err = MvnoTimestampError("Timestamp `1` is not a representable epoch time", timestamp=1)
    assert err.timestamp == 1
    assert err.cause == "malformed"
