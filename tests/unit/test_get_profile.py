import asyncio
from datetime import datetime, timedelta, timezone

import httpx

from profile_api.application.use_cases.get_profile import GetProfileUseCase, utc_timestamp
from profile_api.domain.entities.profile import ProfileEntity

PROFILE = ProfileEntity(email="dev@example.com", name="Dev", stack="Python/FastAPI")


def test_utc_timestamp_format():
    moment = datetime(2025, 10, 17, 9, 30, 5, 123456, tzinfo=timezone.utc)
    assert utc_timestamp(moment) == "2025-10-17T09:30:05.123Z"


def test_utc_timestamp_converts_offsets():
    moment = datetime(2025, 10, 17, 11, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert utc_timestamp(moment) == "2025-10-17T09:00:00.000Z"


def test_execute_builds_envelope(fact_client_for):
    facts = fact_client_for(lambda request: httpx.Response(200, json={"fact": "Cats purr."}))
    uc = GetProfileUseCase(profile=PROFILE, facts=facts, clock=lambda: "2025-01-01T00:00:00.000Z")

    envelope = asyncio.run(uc.execute())

    assert envelope == {
        "status": "success",
        "user": {"email": "dev@example.com", "name": "Dev", "stack": "Python/FastAPI"},
        "timestamp": "2025-01-01T00:00:00.000Z",
        "fact": "Cats purr.",
    }


def test_execute_embeds_failure_message(fact_client_for):
    facts = fact_client_for(lambda request: httpx.Response(503))
    envelope = asyncio.run(GetProfileUseCase(profile=PROFILE, facts=facts).execute())

    assert envelope["status"] == "success"
    assert envelope["fact"] == "Fact retrieval failed: External API returned status 503."
