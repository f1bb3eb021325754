"""Base check: abstract class implementing the Strategy Pattern.

Each constraint kind is evaluated by one standalone, independently testable
check. New kinds are added by registering a check, without modifying the
evaluator.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from fieldcheck.validators.constraints import BaseConstraint
from fieldcheck.validators.models import ConstraintKind, Violation
from fieldcheck.validators.schema import FieldDeclaration


class BaseCheck(ABC):
    """Abstract base for all constraint checks.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns None when the value satisfies the constraint
        - a failing value is reported as a Violation, never raised
        - No I/O, no shared mutable state
    """

    @property
    @abstractmethod
    def kind(self) -> ConstraintKind:
        """Constraint kind this check evaluates."""
        ...

    @abstractmethod
    def check(
        self,
        declaration: FieldDeclaration,
        constraint: BaseConstraint,
        value: Any,
    ) -> Optional[Violation]:
        """Evaluate one constraint against one field value.

        Args:
            declaration: Field the constraint is declared on
            constraint: The constraint specification
            value: Field value from the record (None when absent)

        Returns:
            A Violation, or None if the value passes
        """
        ...

    # ── Helper Methods ──

    def _violation(self, declaration: FieldDeclaration, constraint: BaseConstraint) -> Violation:
        """Convenience method to create a Violation."""
        return Violation(
            field=declaration.name,
            kind=self.kind,
            message=constraint.format_message(declaration.label),
        )
