"""API response models."""

from typing import Any, Literal, Optional

from pydantic import BaseModel

from fieldcheck.validators import Violation


class ModelSummary(BaseModel):
    """A registered model schema, as listed by the API."""

    name: str
    fields: list[str]
    declared_fields: list[str]


class RecordAcceptedResponse(BaseModel):
    """Response after a record passed validation and was stored."""

    model: str
    record_id: str
    record: dict[str, Any]


class RecordRejectedResponse(BaseModel):
    """Response when a record failed validation: the input plus what is wrong."""

    error: Literal["validation_failed"] = "validation_failed"
    model: str
    record: dict[str, Any]
    violations: list[Violation]
    errors: dict[str, list[str]]


class StoredRecordsResponse(BaseModel):
    """Accepted records for a model."""

    model: str
    count: int
    records: dict[str, dict[str, Any]]


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "0.1.0"
    uptime_seconds: float
    models_loaded: int
    message: Optional[str] = None
