"""Runs the classifier, optionally with ML enrichment, for evaluation."""

import logging
from typing import Any

from taskmind.config.settings import Settings, get_settings
from taskmind.services.classification import classify_task
from taskmind.services.enrichment import IntentMLClient, enrich_classification

logger = logging.getLogger(__name__)


class Executor:
    """Classifies descriptions, sharing one ML client across a run."""

    def __init__(self, use_enrichment: bool = False, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.use_enrichment = use_enrichment and bool(self.settings.intent_ml_url)
        self._client: IntentMLClient | None = None

    async def __aenter__(self) -> "Executor":
        if self.use_enrichment:
            self._client = IntentMLClient(self.settings)
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.close()

    async def classify(self, description: str) -> dict[str, Any]:
        result = classify_task(description)
        if self._client is not None:
            result = await enrich_classification(
                result, description, self.settings, client=self._client
            )
        return result.to_dict()
