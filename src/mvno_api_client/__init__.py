"""Public package exports for MVNO API response handling."""

from .config import ApiResponseConfig
from .core.errors import (
    MvnoApiError,
    MvnoInvalidStateError,
    MvnoMalformedResponseError,
    MvnoResponseDecodeError,
    MvnoTimestampError,
)
from .core.models import (
    EXCEPTION_SOURCE_CLIENT,
    EXCEPTION_SOURCE_SERVER,
    ExceptionalOutcome,
    StandardOutcome,
)
from .core.response import ApiResponse

__all__ = [
    "ApiResponse",
    "ApiResponseConfig",
    "StandardOutcome",
    "ExceptionalOutcome",
    "EXCEPTION_SOURCE_SERVER",
    "EXCEPTION_SOURCE_CLIENT",
    "MvnoApiError",
    "MvnoMalformedResponseError",
    "MvnoInvalidStateError",
    "MvnoResponseDecodeError",
    "MvnoTimestampError",
]
