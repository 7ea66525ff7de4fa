"""Enrichment service models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EnrichmentResult(BaseModel):
    """
    Response of the intent extraction service.

    ``priority`` and ``intent`` are recognized fields. Every other key is an
    entity field that is overlaid on the rule-based entities.
    """

    model_config = ConfigDict(extra="allow")

    priority: str | None = None
    intent: str | None = None

    @property
    def entities(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class EnrichmentError(Exception):
    """Raised when the intent extraction service cannot be used."""
