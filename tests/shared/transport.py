from __future__ import annotations


class BodyResponse:
    """HTTP response collaborator exposing only ``get_body()``."""

    def __init__(self, body: str | bytes):
        self._body = body
        self.calls = 0

    def get_body(self) -> str | bytes:
        self.calls += 1
        return self._body
