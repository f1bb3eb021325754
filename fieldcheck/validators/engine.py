"""Constraint Evaluator: runs every declared constraint and collects violations.

This is the main entry point for record validation. It walks the field
declarations in order, runs each constraint's check against the field value,
and returns the violations in field-then-constraint order.

Usage:
    evaluator = ConstraintEvaluator()
    violations = evaluator.evaluate({"title": [Required()]}, {"title": ""})
    report = evaluator.validate(movie_schema, submitted_record)
    if not report.valid:
        # Re-present the input with report.errors, do not save
"""

import time
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

import structlog

from fieldcheck.config import get_settings
from fieldcheck.validators.base import BaseCheck
from fieldcheck.validators.exceptions import ConfigurationError
from fieldcheck.validators.models import ConstraintKind, ValidationReport, Violation
from fieldcheck.validators.schema import ModelSchema, read_value

from fieldcheck.validators.required_check import RequiredCheck
from fieldcheck.validators.length_check import StringLengthCheck
from fieldcheck.validators.pattern_check import RegularExpressionCheck
from fieldcheck.validators.range_check import RangeCheck

logger = structlog.get_logger()

Declarations = Union[ModelSchema, Mapping[str, Sequence]]


class ConstraintEvaluator:
    """Evaluates field declarations against record instances.

    Design principles:
        - Pure: no retained state between calls, safe to share across threads
        - Deterministic: violations follow declaration order
        - Violations are data; only schema faults raise
    """

    def __init__(
        self,
        checks: Optional[list[BaseCheck]] = None,
        allow_whitespace: Optional[bool] = None,
    ):
        """Initialize with the default checks or a custom list.

        Args:
            checks: Optional list of checks. If None, uses all defaults.
            allow_whitespace: Default for Required constraints that don't say.
                If None, read from settings.
        """
        if allow_whitespace is None:
            allow_whitespace = get_settings().REQUIRED_ALLOWS_WHITESPACE
        self._checks: dict[ConstraintKind, BaseCheck] = {}
        for check in checks or self._default_checks(allow_whitespace):
            self.register_check(check)

    @staticmethod
    def _default_checks(allow_whitespace: bool) -> list[BaseCheck]:
        return [
            RequiredCheck(allow_whitespace=allow_whitespace),
            StringLengthCheck(),
            RegularExpressionCheck(),
            RangeCheck(),
        ]

    def register_check(self, check: BaseCheck) -> None:
        """Install (or replace) the check for a constraint kind."""
        self._checks[check.kind] = check

    def evaluate(self, declarations: Declarations, instance: Any) -> list[Violation]:
        """Evaluate every declared constraint against a record.

        Args:
            declarations: A ModelSchema, or a non-empty ``field -> constraints`` mapping
            instance: Mapping or object supplying the field values

        Returns:
            Violations in field-then-constraint order (empty = valid)

        Raises:
            UnknownFieldError: A declared field is missing from the record type
            ConfigurationError: The declarations are malformed
        """
        schema = self._as_schema(declarations)

        violations: list[Violation] = []
        for declaration in schema.declarations:
            value = read_value(instance, declaration.name, schema.name)
            for constraint in declaration.constraints:
                check = self._checks.get(constraint.constraint_kind)
                if check is None:
                    raise ConfigurationError(
                        f"No check registered for constraint kind '{constraint.kind}'"
                    )
                violation = check.check(declaration, constraint, value)
                if violation is not None:
                    violations.append(violation)

        return violations

    def validate(self, declarations: Declarations, instance: Any) -> ValidationReport:
        """Evaluate a record and produce a report, logging the outcome."""
        start_time = time.perf_counter()
        schema = self._as_schema(declarations)

        violations = self.evaluate(schema, instance)
        report = ValidationReport.build(violations)

        duration = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "validation_complete",
            model=schema.name,
            valid=report.valid,
            violations=len(violations),
            fields=sorted(report.errors),
            duration_ms=round(duration, 3),
        )

        return report

    @staticmethod
    def _as_schema(declarations: Declarations) -> ModelSchema:
        if isinstance(declarations, ModelSchema):
            return declarations
        if not isinstance(declarations, Mapping):
            raise ConfigurationError(
                f"Declarations must be a ModelSchema or a mapping, got {type(declarations).__name__}"
            )
        return ModelSchema.from_declarations(declarations)


# Module-level singleton
constraint_evaluator = ConstraintEvaluator()


def evaluate(declarations: Declarations, instance: Any) -> list[Violation]:
    """Evaluate with the default evaluator."""
    return constraint_evaluator.evaluate(declarations, instance)
