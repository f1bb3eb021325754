"""String Length Check: bounds the length of string values."""

from typing import Any, Optional

from fieldcheck.validators.base import BaseCheck
from fieldcheck.validators.constraints import StringLength
from fieldcheck.validators.models import ConstraintKind, Violation
from fieldcheck.validators.schema import FieldDeclaration


class StringLengthCheck(BaseCheck):
    """Only applies to strings.

    Absent values and non-strings are skipped. An empty string has length 0
    and fails a positive min_length.
    """

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.STRING_LENGTH

    def check(
        self,
        declaration: FieldDeclaration,
        constraint: StringLength,
        value: Any,
    ) -> Optional[Violation]:
        if not isinstance(value, str):
            return None

        if constraint.min_length <= len(value) <= constraint.max_length:
            return None
        return self._violation(declaration, constraint)
