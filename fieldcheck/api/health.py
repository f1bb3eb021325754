"""Health check endpoint."""

import time
from fastapi import APIRouter

from fieldcheck.models.responses import HealthResponse
from fieldcheck.validators import SchemaError
from fieldcheck.validators.schemas import get_all_models

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check: can the model schemas be loaded?"""
    try:
        models_loaded = len(get_all_models())
    except SchemaError as e:
        return HealthResponse(
            status="unhealthy",
            uptime_seconds=round(time.time() - _start_time, 2),
            models_loaded=0,
            message=str(e),
        )

    return HealthResponse(
        status="healthy" if models_loaded else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        models_loaded=models_loaded,
    )
