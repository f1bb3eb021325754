"""Range Check: numeric and date values within an inclusive bound."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Union

from fieldcheck.validators.base import BaseCheck
from fieldcheck.validators.constraints import Range
from fieldcheck.validators.models import ConstraintKind, Violation
from fieldcheck.validators.schema import FieldDeclaration


class RangeCheck(BaseCheck):
    """Compares numbers directly and dates by ordinal.

    Form posts deliver text, so string values are parsed before comparison.
    Empty text is left to Required. A value that cannot be read as the
    bound's type fails the constraint.
    """

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.RANGE

    def check(
        self,
        declaration: FieldDeclaration,
        constraint: Range,
        value: Any,
    ) -> Optional[Violation]:
        if value is None or (isinstance(value, str) and not value):
            return None

        if constraint.is_date_range:
            ordinal = self._parse_date(value)
            in_range = ordinal is not None and (
                constraint.low.toordinal() <= ordinal <= constraint.high.toordinal()
            )
        else:
            number = self._parse_number(value)
            in_range = number is not None and constraint.low <= number <= constraint.high

        if in_range:
            return None
        return self._violation(declaration, constraint)

    def _parse_number(self, value) -> Optional[Union[int, float, Decimal]]:
        """Read a numeric value: ints, floats, Decimals, or numeric text."""
        if isinstance(value, bool):
            return None
        if isinstance(value, Decimal):
            return None if value.is_nan() else value
        if isinstance(value, (int, float)):
            return value
        if not isinstance(value, str):
            return None

        try:
            return float(value.strip())
        except ValueError:
            return None

    def _parse_date(self, value) -> Optional[int]:
        """Read a date ordinal from dates, datetimes, or ISO-8601 text."""
        if isinstance(value, date):
            return value.toordinal()
        if not isinstance(value, str):
            return None

        text = value.strip()
        try:
            return date.fromisoformat(text).toordinal()
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).toordinal()
        except ValueError:
            return None
