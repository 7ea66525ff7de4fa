"""FastAPI dependencies."""

import logging

from fastapi import Header, HTTPException

from taskmind.config.constants import DEVICE_ID_HEADER

logger = logging.getLogger(__name__)


async def require_device_id(
    device_id: str | None = Header(None, alias=DEVICE_ID_HEADER),
) -> str:
    """Device identifier every task request is scoped to."""
    if not device_id or not device_id.strip():
        logger.info("Rejected request without %s header", DEVICE_ID_HEADER)
        raise HTTPException(status_code=400, detail="Device ID is required")
    return device_id.strip()
