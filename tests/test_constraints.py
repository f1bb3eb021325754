"""Malformed declarations must fail when they are written, not when records arrive."""

from datetime import date

import pytest
from pydantic import ValidationError

from fieldcheck.validators import (
    ConfigurationError,
    ConstraintKind,
    Range,
    RegularExpression,
    Required,
    StringLength,
)
from fieldcheck.validators.constraints import BaseConstraint


class TestDeclarationTimeErrors:
    def test_string_length_min_above_max(self):
        with pytest.raises(ConfigurationError, match="exceeds max_length"):
            StringLength(max_length=2, min_length=5)

    def test_string_length_negative_bound(self):
        with pytest.raises(ConfigurationError, match="non-negative"):
            StringLength(-1)

    def test_string_length_requires_max(self):
        with pytest.raises(ConfigurationError):
            StringLength(min_length=2)

    @pytest.mark.parametrize("pattern", ["[unclosed(", "(?P<invalid>", "*oops"])
    def test_invalid_regex_pattern(self, pattern):
        with pytest.raises(ConfigurationError, match="Invalid regex pattern"):
            RegularExpression(pattern)

    def test_range_low_above_high(self):
        with pytest.raises(ConfigurationError, match="exceeds high"):
            Range(5, 1)

    def test_range_mixed_bound_kinds(self):
        with pytest.raises(ConfigurationError, match="both be numbers or both be dates"):
            Range(date(2000, 1, 1), 5)

    def test_range_requires_both_bounds(self):
        with pytest.raises(ConfigurationError):
            Range(low=1)

    def test_unknown_parameter_is_rejected(self):
        with pytest.raises(ConfigurationError):
            StringLength(10, maximum=20)

    def test_message_template_with_unknown_placeholder(self):
        with pytest.raises(ConfigurationError, match="message template"):
            Required(error_message="{field} needs a {colour}")

    def test_message_template_with_positional_placeholder(self):
        with pytest.raises(ConfigurationError):
            Range(1, 5, error_message="between {0} and {1}")

    def test_base_constraint_is_abstract(self):
        with pytest.raises(TypeError):
            BaseConstraint()


class TestDeclarations:
    def test_constraints_are_immutable(self):
        constraint = StringLength(10)
        with pytest.raises(ValidationError):
            constraint.max_length = 20

    def test_constraints_are_hashable_and_comparable(self):
        assert Range(1, 5) == Range(low=1, high=5)
        assert len({Required(), Required()}) == 1

    def test_kind_tags(self):
        assert Required().constraint_kind == ConstraintKind.REQUIRED
        assert StringLength(3).constraint_kind == ConstraintKind.STRING_LENGTH
        assert RegularExpression("a+").constraint_kind == ConstraintKind.REGULAR_EXPRESSION
        assert Range(0, 1).constraint_kind == ConstraintKind.RANGE

    def test_zero_bounds_are_allowed(self):
        assert Range(0, 0).low == 0
        assert StringLength(0).max_length == 0

    def test_date_bounds_from_iso_text(self):
        constraint = Range.model_validate({"kind": "range", "low": "1966-01-01", "high": "2020-01-01"})

        assert constraint.is_date_range
        assert constraint.low == date(1966, 1, 1)

    def test_numeric_bounds_keep_their_type(self):
        assert Range(1, 100).low == 1
        assert Range(0.5, 1.5).is_date_range is False

    def test_default_messages(self):
        assert Required().format_message("Title") == "The Title field is required."
        assert (
            StringLength(30).format_message("Genre")
            == "The field Genre must be a string with a maximum length of 30."
        )
        assert (
            RegularExpression("[A-Z]+").format_message("Rating")
            == "The field Rating must match the regular expression '[A-Z]+'."
        )
