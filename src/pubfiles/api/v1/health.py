# Health router — liveness check.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import APIRouter

from pubfiles.api.v1.schemas.common import StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=StatusResponse)
async def get_health_status():
    """Report that the server is up. Does not contact the storage API."""
    return StatusResponse()
