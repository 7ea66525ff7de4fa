"""Overlay ML enrichment onto rule-based classification."""

import asyncio
import dataclasses
import logging

from taskmind.config.settings import Settings
from taskmind.services.classification.models import ClassificationResult
from taskmind.services.enrichment.client import IntentMLClient
from taskmind.services.enrichment.models import EnrichmentError, EnrichmentResult

logger = logging.getLogger(__name__)


def merge_enrichment(
    result: ClassificationResult,
    enrichment: EnrichmentResult,
    *,
    caller_priority: str | None = None,
) -> ClassificationResult:
    """
    Merge an ML response into a rule-based classification.

    Precedence for priority: caller-supplied value, then ML value, then the
    rule-based value. ``intent`` is attached when present. Remaining ML
    fields overwrite same-named entity fields.

    Returns:
        A new ClassificationResult; the input is not modified
    """
    if caller_priority is not None:
        priority = caller_priority
    elif enrichment.priority is not None:
        priority = enrichment.priority
    else:
        priority = result.priority

    return dataclasses.replace(
        result,
        priority=priority,
        intent=enrichment.intent if enrichment.intent is not None else result.intent,
        entity_overrides={**result.entity_overrides, **enrichment.entities},
    )


async def fetch_enrichment(
    description: str,
    settings: Settings,
    client: IntentMLClient | None = None,
) -> EnrichmentResult | None:
    """
    Call the ML service, collapsing every failure to None.

    The call is bounded by ``intent_ml_timeout``; a timeout counts as a
    failure like any other.
    """
    if not settings.enrichment_enabled or not settings.intent_ml_url:
        logger.debug("Enrichment skipped: ML service not configured")
        return None

    owns_client = client is None
    try:
        if client is None:
            client = IntentMLClient(settings)
        return await asyncio.wait_for(
            client.extract_intent(description), timeout=settings.intent_ml_timeout
        )
    except (EnrichmentError, asyncio.TimeoutError) as e:
        logger.warning("ML enrichment unavailable, keeping rule-based result: %s", e)
        return None
    except Exception as e:
        logger.warning(
            "Unexpected ML enrichment failure, keeping rule-based result: %s", e, exc_info=True
        )
        return None
    finally:
        if owns_client and client is not None:
            await client.close()


async def enrich_classification(
    result: ClassificationResult,
    description: str,
    settings: Settings,
    *,
    caller_priority: str | None = None,
    client: IntentMLClient | None = None,
) -> ClassificationResult:
    """
    Apply ML enrichment if available.

    On any enrichment failure the very same ``result`` object is returned.
    """
    enrichment = await fetch_enrichment(description, settings, client)
    if enrichment is None:
        return result
    logger.info(
        "ML enrichment applied (priority=%s, intent=%s, entity_fields=%s)",
        enrichment.priority,
        enrichment.intent,
        sorted(enrichment.entities),
    )
    return merge_enrichment(result, enrichment, caller_priority=caller_priority)
