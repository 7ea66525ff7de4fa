"""Classification preview endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from taskmind.api.dependencies import require_device_id
from taskmind.api.models import ClassifyRequest
from taskmind.config.settings import Settings, get_settings
from taskmind.services.tasks import TaskService

router = APIRouter(dependencies=[Depends(require_device_id)])


@router.post("/classify")
async def classify(
    request: ClassifyRequest,
    explain: bool = True,
    enrich: bool = True,
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Classify a description without storing a task."""
    svc = TaskService(settings)
    result = await svc.classify(request.description, explain=explain, enrich=enrich)
    return result.to_dict()
