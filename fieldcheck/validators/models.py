"""Validation models: constraint kinds, violations, and the report structure.

All evaluation is deterministic: same declarations + same record → same output.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ConstraintKind(str, Enum):
    """Tag of every supported constraint specification."""

    REQUIRED = "required"
    STRING_LENGTH = "string_length"
    REGULAR_EXPRESSION = "regular_expression"
    RANGE = "range"


class Violation(BaseModel):
    """A single failure of one field value against one constraint."""

    model_config = ConfigDict(frozen=True)

    field: str
    kind: ConstraintKind
    message: str


class ValidationReport(BaseModel):
    """Verdict for one record: the violations plus a per-field view of them."""

    valid: bool = Field(description="True when no constraint was violated")
    violations: list[Violation] = Field(default_factory=list)
    errors: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Messages grouped by field, in declaration order",
    )
    summary: dict[str, int] = Field(
        default_factory=dict,
        description="Count of violations by constraint kind",
    )

    @classmethod
    def build(cls, violations: list[Violation]) -> "ValidationReport":
        """Build a report from an ordered list of violations."""
        errors: dict[str, list[str]] = {}
        summary = {kind.value: 0 for kind in ConstraintKind}
        for violation in violations:
            errors.setdefault(violation.field, []).append(violation.message)
            summary[ConstraintKind(violation.kind).value] += 1

        return cls(
            valid=not violations,
            violations=list(violations),
            errors=errors,
            summary=summary,
        )

    def messages_for(self, field: str) -> list[str]:
        """Messages recorded against a single field (empty if it passed)."""
        return list(self.errors.get(field, []))
