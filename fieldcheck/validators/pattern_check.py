"""Regular Expression Check: the whole value must match the pattern."""

from typing import Any, Optional

from fieldcheck.validators.base import BaseCheck
from fieldcheck.validators.constraints import RegularExpression
from fieldcheck.validators.models import ConstraintKind, Violation
from fieldcheck.validators.schema import FieldDeclaration


class RegularExpressionCheck(BaseCheck):
    """Matches the full text of the value against the declared pattern.

    Absent values and empty strings are left to Required. Non-string values
    are matched on their ``str()`` form.
    """

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.REGULAR_EXPRESSION

    def check(
        self,
        declaration: FieldDeclaration,
        constraint: RegularExpression,
        value: Any,
    ) -> Optional[Violation]:
        if value is None:
            return None

        text = value if isinstance(value, str) else str(value)
        if not text:
            return None

        if constraint.matches(text):
            return None
        return self._violation(declaration, constraint)
