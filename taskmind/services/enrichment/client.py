"""HTTP client for the intent extraction ML service."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from taskmind.config.settings import Settings
from taskmind.services.enrichment.models import EnrichmentError, EnrichmentResult

logger = logging.getLogger(__name__)

EXTRACT_INTENT_PATH = "/extract-intent"


class IntentMLClient:
    """
    Calls ``POST {intent_ml_url}/extract-intent`` with ``{"text": ...}``.

    Usage:
        async with IntentMLClient(settings) as client:
            enrichment = await client.extract_intent("Pay the invoice today")
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not settings.intent_ml_url:
            raise EnrichmentError("intent_ml_url is not configured")
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.intent_ml_url,
            timeout=httpx.Timeout(settings.intent_ml_timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "IntentMLClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def extract_intent(self, text: str) -> EnrichmentResult:
        """
        Ask the ML service for intent, priority and entities.

        Raises:
            EnrichmentError: On network errors, timeouts, non-2xx status or
                a body that is not a JSON object
        """
        try:
            response = await self._client.post(
                EXTRACT_INTENT_PATH,
                json={"text": text},
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise EnrichmentError(f"ML service returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise EnrichmentError(f"ML service unreachable: {e!r}") from e
        except ValueError as e:
            raise EnrichmentError("ML service returned invalid JSON") from e

        if not isinstance(payload, dict):
            raise EnrichmentError(f"ML service returned {type(payload).__name__}, expected object")
        try:
            return EnrichmentResult.model_validate(payload)
        except ValidationError as e:
            raise EnrichmentError(f"ML service response has unexpected fields: {e}") from e
