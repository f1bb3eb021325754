"""Main API router: combines all endpoint routers."""

from fastapi import APIRouter

from fieldcheck.api.health import router as health_router
from fieldcheck.api.records import router as records_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Model schemas and record submission
api_router.include_router(records_router, tags=["Records"])
