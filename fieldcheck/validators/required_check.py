"""Required Check: the field must carry a value."""

from typing import Any, Optional

from fieldcheck.validators.base import BaseCheck
from fieldcheck.validators.constraints import Required
from fieldcheck.validators.models import ConstraintKind, Violation
from fieldcheck.validators.schema import FieldDeclaration


class RequiredCheck(BaseCheck):
    """Rejects absent values and empty strings.

    Whitespace-only strings pass unless the constraint (or this check's
    default) disallows them. That gap is long-standing framework behaviour;
    pair Required with a RegularExpression to reject blank input.
    """

    def __init__(self, allow_whitespace: bool = True):
        self.allow_whitespace = allow_whitespace

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.REQUIRED

    def check(
        self,
        declaration: FieldDeclaration,
        constraint: Required,
        value: Any,
    ) -> Optional[Violation]:
        if value is None:
            return self._violation(declaration, constraint)

        if isinstance(value, str):
            allow_whitespace = constraint.allow_whitespace
            if allow_whitespace is None:
                allow_whitespace = self.allow_whitespace
            text = value if allow_whitespace else value.strip()
            if not text:
                return self._violation(declaration, constraint)

        return None
