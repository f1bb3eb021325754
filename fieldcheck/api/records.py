"""Records API: list model schemas, validate records, submit records."""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

import structlog

from fieldcheck.models.requests import RecordSubmission
from fieldcheck.models.responses import (
    ModelSummary,
    RecordAcceptedResponse,
    RecordRejectedResponse,
    StoredRecordsResponse,
)
from fieldcheck.validators import ModelSchema, ValidationReport, constraint_evaluator
from fieldcheck.validators.schemas import get_all_models, load_model_schema

logger = structlog.get_logger()

router = APIRouter()


def _get_schema(name: str) -> ModelSchema:
    schema = load_model_schema(name)
    if schema is None:
        raise HTTPException(status_code=404, detail=f"Model {name} not found")
    return schema


# ─── Endpoints ───


@router.get("/models", response_model=list[ModelSummary])
async def list_models():
    """List registered model schemas."""
    summaries = []
    for name in get_all_models():
        schema = _get_schema(name)
        summaries.append(
            ModelSummary(
                name=schema.name,
                fields=list(schema.field_names),
                declared_fields=[d.name for d in schema.declarations],
            )
        )
    return summaries


@router.get("/models/{name}")
async def get_model(name: str):
    """Return a model's field declarations and constraints."""
    return _get_schema(name).model_dump(mode="json")


@router.post("/models/{name}/validate", response_model=ValidationReport)
async def validate_record(name: str, request_body: RecordSubmission):
    """Evaluate a record without storing it."""
    schema = _get_schema(name)
    return constraint_evaluator.validate(schema, request_body.record)


@router.post("/models/{name}/records", status_code=201, response_model=RecordAcceptedResponse)
async def submit_record(name: str, request_body: RecordSubmission, request: Request):
    """Store a record if it passes validation.

    A failing record is not stored. The response echoes the submitted input
    with every violation so the form can be re-presented.
    """
    schema = _get_schema(name)
    submission_service = request.app.state.submission_service
    outcome = submission_service.submit(schema, request_body.record)

    if not outcome.accepted:
        rejected = RecordRejectedResponse(
            model=outcome.model,
            record=outcome.record,
            violations=outcome.report.violations,
            errors=outcome.report.errors,
        )
        return JSONResponse(status_code=422, content=rejected.model_dump(mode="json"))

    logger.info("record_accepted", model=outcome.model, record_id=outcome.record_id)

    return RecordAcceptedResponse(
        model=outcome.model,
        record_id=outcome.record_id,
        record=outcome.record,
    )


@router.get("/models/{name}/records", response_model=StoredRecordsResponse)
async def list_records(name: str, request: Request):
    """List records accepted for a model."""
    schema = _get_schema(name)
    store = request.app.state.submission_service.store
    records = store.list_records(schema.name)
    return StoredRecordsResponse(model=schema.name, count=len(records), records=records)
