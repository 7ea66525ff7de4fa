"""ML enrichment service module."""

from taskmind.services.enrichment.client import IntentMLClient
from taskmind.services.enrichment.merger import (
    enrich_classification,
    fetch_enrichment,
    merge_enrichment,
)
from taskmind.services.enrichment.models import EnrichmentError, EnrichmentResult

__all__ = [
    "EnrichmentError",
    "EnrichmentResult",
    "IntentMLClient",
    "enrich_classification",
    "fetch_enrichment",
    "merge_enrichment",
]
