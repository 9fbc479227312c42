"""Response handling configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timezone, tzinfo


@dataclass(slots=True, frozen=True)
class ApiResponseConfig:
    """Runtime settings for :class:`~mvno_api_client.core.response.ApiResponse`."""

    timezone: tzinfo = field(default=timezone.utc)
    allow_payload_reassignment: bool = False

    def validate(self) -> None:
        if not isinstance(self.timezone, tzinfo):
            raise ValueError("timezone must be a datetime.tzinfo instance")
        if not isinstance(self.allow_payload_reassignment, bool):
            raise ValueError("allow_payload_reassignment must be bool")


__all__ = [
    "ApiResponseConfig",
]
