"""Declarative field validation: constraints, schemas, and the evaluator.

Usage:
    from fieldcheck.validators import constraint_evaluator, Required, StringLength

    violations = constraint_evaluator.evaluate(
        {"title": [Required(), StringLength(60, min_length=3)]},
        {"title": "Up"},
    )
"""

from fieldcheck.validators.constraints import (
    Constraint,
    Range,
    RegularExpression,
    Required,
    StringLength,
)
from fieldcheck.validators.engine import ConstraintEvaluator, constraint_evaluator, evaluate
from fieldcheck.validators.exceptions import ConfigurationError, SchemaError, UnknownFieldError
from fieldcheck.validators.models import ConstraintKind, ValidationReport, Violation
from fieldcheck.validators.schema import (
    DisplayName,
    FieldDeclaration,
    ModelSchema,
    schema_from_class,
)

__all__ = [
    "ConstraintEvaluator",
    "constraint_evaluator",
    "evaluate",
    "Constraint",
    "Required",
    "StringLength",
    "RegularExpression",
    "Range",
    "ConstraintKind",
    "Violation",
    "ValidationReport",
    "FieldDeclaration",
    "ModelSchema",
    "DisplayName",
    "schema_from_class",
    "SchemaError",
    "ConfigurationError",
    "UnknownFieldError",
]
