"""Constraint specifications: the declarative rules attached to a field.

Each specification is an immutable pydantic model tagged by ``kind`` so that
declarations can be written in Python or loaded from JSON:

    Required()
    StringLength(60, min_length=3)
    RegularExpression(r"^[A-Z]+[a-zA-Z\\s]*$")
    Range(1, 100)

Malformed parameters raise ConfigurationError when the specification is
created, long before any record is evaluated.
"""

import re
from abc import abstractmethod
from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from fieldcheck.validators.exceptions import ConfigurationError
from fieldcheck.validators.models import ConstraintKind


class DeclarationModel(BaseModel):
    """Immutable declaration whose construction errors are ConfigurationErrors."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid {type(self).__name__} declaration: {e}") from e


class BaseConstraint(DeclarationModel):
    """Shared behaviour of every constraint specification."""

    error_message: Optional[str] = Field(
        default=None,
        description="Message template overriding the default wording",
    )

    @property
    def constraint_kind(self) -> ConstraintKind:
        return ConstraintKind(self.kind)

    @abstractmethod
    def default_message(self) -> str:
        """Message template used when no error_message is declared."""

    def template_values(self, field: str) -> dict:
        """Placeholder values available to message templates."""
        return {"field": field}

    def format_message(self, field: str) -> str:
        """Render the violation message for a field (display name)."""
        template = self.error_message or self.default_message()
        return template.format(**self.template_values(field))

    @model_validator(mode="after")
    def check_error_message(self):
        if self.error_message is not None:
            try:
                self.error_message.format(**self.template_values("field"))
            except (KeyError, IndexError, ValueError) as e:
                raise ConfigurationError(
                    f"{type(self).__name__} message template {self.error_message!r} "
                    f"is invalid: {e!r}"
                ) from e
        return self


class Required(BaseConstraint):
    """The field must have a value.

    Empty strings are rejected; whitespace-only strings are accepted unless
    ``allow_whitespace`` is False. ``None`` defers to the evaluator default.
    """

    kind: Literal["required"] = "required"
    allow_whitespace: Optional[bool] = None

    def default_message(self) -> str:
        return "The {field} field is required."


class StringLength(BaseConstraint):
    """String values must have a length within [min_length, max_length]."""

    kind: Literal["string_length"] = "string_length"
    max_length: int
    min_length: int = 0

    def __init__(self, max_length: Optional[int] = None, **data):
        if max_length is not None:
            data["max_length"] = max_length
        super().__init__(**data)

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min_length < 0 or self.max_length < 0:
            raise ConfigurationError(
                f"StringLength bounds must be non-negative "
                f"(min_length={self.min_length}, max_length={self.max_length})"
            )
        if self.min_length > self.max_length:
            raise ConfigurationError(
                f"StringLength min_length {self.min_length} exceeds max_length {self.max_length}"
            )
        return self

    def default_message(self) -> str:
        if self.min_length:
            return (
                "The field {field} must be a string with a minimum length of {min} "
                "and a maximum length of {max}."
            )
        return "The field {field} must be a string with a maximum length of {max}."

    def template_values(self, field: str) -> dict:
        return {"field": field, "min": self.min_length, "max": self.max_length}


class RegularExpression(BaseConstraint):
    """The whole string value must match ``pattern``."""

    kind: Literal["regular_expression"] = "regular_expression"
    pattern: str

    def __init__(self, pattern: Optional[str] = None, **data):
        if pattern is not None:
            data["pattern"] = pattern
        super().__init__(**data)

    @model_validator(mode="after")
    def check_pattern(self):
        try:
            re.compile(self.pattern)
        except re.error as e:
            raise ConfigurationError(f"Invalid regex pattern {self.pattern!r}: {e}") from e
        return self

    def matches(self, text: str) -> bool:
        return re.fullmatch(self.pattern, text) is not None

    def default_message(self) -> str:
        return "The field {field} must match the regular expression '{pattern}'."

    def template_values(self, field: str) -> dict:
        return {"field": field, "pattern": self.pattern}


class Range(BaseConstraint):
    """Numeric or date values must lie within the inclusive [low, high] bound.

    Date bounds are compared by ordinal. Browsers cannot reliably check date
    ranges, so only the server-side verdict is authoritative.
    """

    kind: Literal["range"] = "range"
    low: Union[int, float, date]
    high: Union[int, float, date]

    def __init__(self, low=None, high=None, **data):
        if low is not None:
            data["low"] = low
        if high is not None:
            data["high"] = high
        super().__init__(**data)

    @model_validator(mode="after")
    def check_bounds(self):
        if isinstance(self.low, date) != isinstance(self.high, date):
            raise ConfigurationError(
                f"Range bounds must both be numbers or both be dates "
                f"(low={self.low!r}, high={self.high!r})"
            )
        if self.low > self.high:
            raise ConfigurationError(f"Range low {self.low} exceeds high {self.high}")
        return self

    @property
    def is_date_range(self) -> bool:
        return isinstance(self.low, date)

    def default_message(self) -> str:
        return "The field {field} must be between {low} and {high}."

    def template_values(self, field: str) -> dict:
        return {"field": field, "low": self.low, "high": self.high}


Constraint = Annotated[
    Union[Required, StringLength, RegularExpression, Range],
    Field(discriminator="kind"),
]

CONSTRAINT_TYPES = (Required, StringLength, RegularExpression, Range)
