"""Submission service: the mandatory validation gate in front of every write.

A submitted record is evaluated first. Only a record with no violations
reaches the store; otherwise the caller gets the original input back with the
report so it can be re-presented to the submitter.
"""

from typing import Any, Optional

import structlog
from pydantic import BaseModel

from fieldcheck.services.record_store import RecordStore
from fieldcheck.validators import ConstraintEvaluator, ModelSchema, ValidationReport, constraint_evaluator

logger = structlog.get_logger()


class SubmissionOutcome(BaseModel):
    """Result of one submission attempt."""

    accepted: bool
    model: str
    record_id: Optional[str] = None
    record: dict[str, Any]
    report: ValidationReport


class SubmissionService:
    """Evaluates submissions and hands valid records to the store."""

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        evaluator: Optional[ConstraintEvaluator] = None,
    ):
        self.store = store if store is not None else RecordStore()
        self.evaluator = evaluator or constraint_evaluator

    def submit(self, schema: ModelSchema, record: dict[str, Any]) -> SubmissionOutcome:
        """Validate a record and store it only if it passes.

        Args:
            schema: Record type the submission claims to be
            record: Submitted field values, exactly as received

        Returns:
            SubmissionOutcome carrying the record id when accepted, or the
            untouched input and its violations when rejected

        Raises:
            SchemaError: The schema itself is broken; nothing is stored
        """
        report = self.evaluator.validate(schema, record)

        if not report.valid:
            logger.info(
                "record_rejected",
                model=schema.name,
                violations=len(report.violations),
                fields=list(report.errors),
            )
            return SubmissionOutcome(
                accepted=False,
                model=schema.name,
                record=record,
                report=report,
            )

        record_id = self.store.add(schema.name, record)
        return SubmissionOutcome(
            accepted=True,
            model=schema.name,
            record_id=record_id,
            record=record,
            report=report,
        )
