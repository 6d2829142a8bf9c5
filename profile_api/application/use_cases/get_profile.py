from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable

from profile_api.domain.entities.profile import ProfileEntity
from profile_api.infrastructure.facts.cat_fact_client import CatFactClient


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO 8601 UTC timestamp with millisecond precision and a 'Z' suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class GetProfileUseCase:
    profile: ProfileEntity
    facts: CatFactClient
    clock: Callable[[], str] = utc_timestamp

    async def execute(self) -> dict[str, Any]:
        """
        Build the profile envelope.

        The fact lookup is awaited first; its result is flattened to a string
        whether it succeeded or not, so the caller always gets a complete
        envelope with status "success".
        """
        result = await self.facts.fetch_fact()
        return {
            "status": "success",
            "user": self.profile.to_dict(),
            "timestamp": self.clock(),
            "fact": result.message,
        }
