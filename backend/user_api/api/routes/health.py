"""Health Probe — liveness endpoint, independent of the user store.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reports current UTC wall-clock time
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status

from user_api.schemas.user import HealthEnvelope

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthEnvelope, status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthEnvelope(
        message="Server is running", timestamp=datetime.now(timezone.utc),
    )
