from __future__ import annotations

import asyncio
import logging

import httpx

from profile_api.domain.entities.fact import FactErrorKind, FactResult
from profile_api.infrastructure.config import DEFAULT_CAT_FACT_API_URL, DEFAULT_TIMEOUT_MS

logger = logging.getLogger(__name__)


class CatFactClient:
    """Fetches a random fact from the cat fact API.

    ``fetch_fact`` never raises: timeouts, error statuses, transport failures and
    malformed bodies all come back as a failed ``FactResult``. A transport can be
    passed in to stub the upstream in tests.
    """

    def __init__(
        self,
        url: str = DEFAULT_CAT_FACT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_MS / 1000,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch_fact(self) -> FactResult:
        logger.info(f"Fetching new cat fact from {self.url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                # httpx timeouts apply per phase; the deadline bounds the whole call
                response = await asyncio.wait_for(client.get(self.url), timeout=self.timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            result = FactResult.failure(FactErrorKind.TIMEOUT, timeout_seconds=self.timeout)
            logger.error(f"Error fetching cat fact: {result.message} ({exc!r})")
            return result
        except httpx.RequestError as exc:
            result = FactResult.failure(FactErrorKind.CONNECTION)
            logger.error(f"Error fetching cat fact: {result.message} ({exc!r})")
            return result

        if response.is_error:
            result = FactResult.failure(FactErrorKind.HTTP_STATUS, status_code=response.status_code)
            logger.error(f"Error fetching cat fact: {result.message}")
            return result

        fact = self._extract_fact(response)
        if not fact:
            logger.warning("Cat fact API returned a response, but the 'fact' field was empty")
            return FactResult.failure(FactErrorKind.MISSING_FIELD)

        logger.info("Cat fact successfully retrieved")
        return FactResult.success(fact)

    @staticmethod
    def _extract_fact(response: httpx.Response) -> str | None:
        try:
            data = response.json()
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        fact = data.get("fact")
        return fact if isinstance(fact, str) else None
