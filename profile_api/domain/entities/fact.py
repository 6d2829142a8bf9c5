from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

FAILURE_PREFIX = "Fact retrieval failed:"
DEFAULT_TIMEOUT_SECONDS = 20.0


class FactErrorKind(str, Enum):
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    CONNECTION = "connection"
    MISSING_FIELD = "missing_field"


@dataclass(frozen=True)
class FactResult:
    """Outcome of a single fact lookup.

    Exactly one of ``text`` or ``error`` is set. ``message`` is the plain string
    shown to API clients for both outcomes.
    """

    text: str | None = None
    error: FactErrorKind | None = None
    status_code: int | None = None  # only for HTTP_STATUS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS  # only for TIMEOUT

    @classmethod
    def success(cls, text: str) -> FactResult:
        return cls(text=text)

    @classmethod
    def failure(
        cls,
        error: FactErrorKind,
        *,
        status_code: int | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> FactResult:
        return cls(error=error, status_code=status_code, timeout_seconds=timeout_seconds)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is None:
            return self.text or ""
        if self.error is FactErrorKind.TIMEOUT:
            return f"{FAILURE_PREFIX} External API timeout after {self.timeout_seconds:g} seconds."
        if self.error is FactErrorKind.HTTP_STATUS:
            return f"{FAILURE_PREFIX} External API returned status {self.status_code}."
        if self.error is FactErrorKind.MISSING_FIELD:
            return f"{FAILURE_PREFIX} Data field missing from external API."
        return f"{FAILURE_PREFIX} External API connection error."
