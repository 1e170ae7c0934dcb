"""
Unit tests for rule implementations.

Includes property-based testing with hypothesis for validators.
"""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fieldcheck.core.models import ViolationKind
from fieldcheck.core.validators import (
    ChoiceValidator,
    EmailValidator,
    FunctionValidator,
    InvalidRuleArgument,
    LengthValidator,
    MaxValidator,
    MinValidator,
    RegexValidator,
    RequiredValidator,
    RuleFailure,
    is_zero_value,
    parse_number,
)

pytestmark = pytest.mark.unit


class TestRequiredValidator:
    """Tests for RequiredValidator"""

    @pytest.mark.parametrize("value", ["John", 1, -3, 0.5, True, ["x"], {"a": 1}])
    def test_present_values_pass(self, value):
        RequiredValidator().validate(value, None)  # Should not raise

    @pytest.mark.parametrize("value", [None, "", 0, 0.0, False, [], {}, ()])
    def test_zero_values_fail(self, value):
        with pytest.raises(RuleFailure) as exc_info:
            RequiredValidator().validate(value, None)

        assert exc_info.value.kind == ViolationKind.MISSING_REQUIRED_VALUE

    def test_whitespace_string_is_present(self):
        RequiredValidator().validate("   ", None)  # Should not raise

    def test_argument_is_ignored(self):
        RequiredValidator().validate("x", "whatever")  # Should not raise

    def test_is_zero_value_for_decimal(self):
        assert is_zero_value(Decimal("0")) is True
        assert is_zero_value(Decimal("0.1")) is False
        assert is_zero_value(Decimal("sNaN")) is False

    def test_nested_record_is_not_zero(self):
        class Address:
            def __init__(self):
                self.city = ""

        assert is_zero_value(Address()) is False

    @given(st.text(min_size=1))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-empty string should pass"""
        RequiredValidator().validate(value, None)  # Should not raise


class TestParseNumber:
    """Tests for numeric argument parsing"""

    def test_integer_stays_int(self):
        assert parse_number("min", "3") == 3
        assert isinstance(parse_number("min", "3"), int)

    def test_float(self):
        assert parse_number("min", "0.5") == 0.5

    @pytest.mark.parametrize("argument", [None, "", "  ", "abc", "3x", "nan", "inf"])
    def test_malformed_arguments(self, argument):
        with pytest.raises(InvalidRuleArgument):
            parse_number("min", argument)


class TestMinMaxValidators:
    """Tests for MinValidator and MaxValidator"""

    @pytest.mark.parametrize("value,passes", [
        ("ab", False),
        ("abc", True),
        ("a" * 20, True),
    ])
    def test_string_length_lower_bound(self, value, passes):
        validator = MinValidator()
        if passes:
            validator.validate(value, "3")
        else:
            with pytest.raises(RuleFailure) as exc_info:
                validator.validate(value, "3")
            assert exc_info.value.kind == ViolationKind.OUT_OF_RANGE
            assert "less than minimum 3" in exc_info.value.message

    @pytest.mark.parametrize("value,passes", [
        ("a" * 20, True),
        ("a" * 21, False),
    ])
    def test_string_length_upper_bound(self, value, passes):
        validator = MaxValidator()
        if passes:
            validator.validate(value, "20")
        else:
            with pytest.raises(RuleFailure) as exc_info:
                validator.validate(value, "20")
            assert exc_info.value.kind == ViolationKind.OUT_OF_RANGE
            assert "exceeds maximum 20" in exc_info.value.message

    def test_numeric_value_is_compared_directly(self):
        MinValidator().validate(18, "18")
        MaxValidator().validate(17.5, "18")

        with pytest.raises(RuleFailure):
            MinValidator().validate(17, "18")
        with pytest.raises(RuleFailure):
            MaxValidator().validate(Decimal("18.01"), "18")

    def test_collections_use_length(self):
        MinValidator().validate([1, 2], "2")

        with pytest.raises(RuleFailure) as exc_info:
            MaxValidator().validate({"a": 1, "b": 2}, "1")
        assert "length 2" in exc_info.value.message

    def test_none_is_skipped(self):
        MinValidator().validate(None, "3")  # Should not raise

    def test_malformed_argument_raises_even_for_none(self):
        with pytest.raises(InvalidRuleArgument):
            MinValidator().validate(None, "abc")

    def test_bare_rule_without_argument_is_malformed(self):
        with pytest.raises(InvalidRuleArgument):
            MaxValidator().validate(5, None)

    def test_bool_is_a_format_mismatch(self):
        with pytest.raises(RuleFailure) as exc_info:
            MinValidator().validate(True, "0")
        assert exc_info.value.kind == ViolationKind.FORMAT_MISMATCH

    def test_unmeasurable_object_is_a_format_mismatch(self):
        with pytest.raises(RuleFailure) as exc_info:
            MaxValidator().validate(object(), "1")
        assert exc_info.value.kind == ViolationKind.FORMAT_MISMATCH

    @pytest.mark.parametrize("value", [float("nan"), Decimal("NaN"), Decimal("sNaN")])
    @pytest.mark.parametrize("validator_class", [MinValidator, MaxValidator, LengthValidator])
    def test_nan_is_a_format_mismatch(self, validator_class, value):
        """NaN has no order, so it must not slip through or raise InvalidOperation"""
        with pytest.raises(RuleFailure) as exc_info:
            validator_class().validate(value, "1")

        assert exc_info.value.kind == ViolationKind.FORMAT_MISMATCH
        assert "not a number" in exc_info.value.message

    @given(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=-1000, max_value=1000))
    def test_property_min_matches_comparison(self, value, bound):
        """Property test: min passes exactly when value >= bound"""
        try:
            MinValidator().validate(value, str(bound))
            passed = True
        except RuleFailure:
            passed = False
        assert passed == (value >= bound)


class TestLengthValidator:
    """Tests for LengthValidator"""

    def test_exact_length(self):
        LengthValidator().validate("abcde", "5")

        with pytest.raises(RuleFailure) as exc_info:
            LengthValidator().validate("abcd", "5")
        assert exc_info.value.kind == ViolationKind.OUT_OF_RANGE
        assert "must be exactly 5" in exc_info.value.message


class TestEmailValidator:
    """Tests for EmailValidator"""

    @pytest.mark.parametrize("value", [
        "a@b.co",
        "jane@example.com",
        "first.last+tag@mail.example.org",
    ])
    def test_valid_emails(self, value):
        EmailValidator().validate(value, None)

    @pytest.mark.parametrize("value", [
        "not-an-email",
        "missing-domain@",
        "@example.com",
        "jane@localhost",
        "jane@@example.com",
        "jane doe@example.com",
        "jane@example..com",
    ])
    def test_invalid_emails(self, value):
        with pytest.raises(RuleFailure) as exc_info:
            EmailValidator().validate(value, None)

        assert exc_info.value.kind == ViolationKind.FORMAT_MISMATCH
        assert "not a valid email" in exc_info.value.message

    def test_empty_and_absent_values_pass(self):
        EmailValidator().validate("", None)
        EmailValidator().validate(None, None)

    def test_non_string_is_a_format_mismatch(self):
        with pytest.raises(RuleFailure) as exc_info:
            EmailValidator().validate(42, None)
        assert exc_info.value.kind == ViolationKind.FORMAT_MISMATCH


class TestRegexValidator:
    """Tests for RegexValidator"""

    def test_full_match_required(self):
        validator = RegexValidator(r"\d{5}", name="zipcode")
        validator.validate("12345", None)

        with pytest.raises(RuleFailure):
            validator.validate("123456", None)

    def test_rule_type_is_registered_name(self):
        assert RegexValidator(r"\d+", name="digits").rule_type == "digits"

    def test_invalid_pattern_raises_error(self):
        with pytest.raises(ValueError) as exc_info:
            RegexValidator("[unclosed")
        assert "invalid regex" in str(exc_info.value).lower()


class TestChoiceValidator:
    """Tests for ChoiceValidator"""

    def test_value_in_choices(self):
        ChoiceValidator().validate("pro", "free pro team")
        ChoiceValidator().validate(2, "1 2 3")

    def test_value_not_in_choices(self):
        with pytest.raises(RuleFailure) as exc_info:
            ChoiceValidator().validate("gold", "free pro team")
        assert exc_info.value.kind == ViolationKind.FORMAT_MISMATCH
        assert "free, pro, team" in exc_info.value.message

    @pytest.mark.parametrize("argument", [None, "", "   "])
    def test_missing_choices_are_malformed(self, argument):
        with pytest.raises(InvalidRuleArgument):
            ChoiceValidator().validate("pro", argument)


class TestFunctionValidator:
    """Tests for FunctionValidator"""

    def test_true_and_none_pass(self):
        FunctionValidator("ok", lambda value, argument: True).validate("x", None)
        FunctionValidator("ok", lambda value, argument: None).validate("x", None)

    def test_false_fails_with_default_message(self):
        validator = FunctionValidator("even", lambda value, argument: value % 2 == 0)

        with pytest.raises(RuleFailure) as exc_info:
            validator.validate(3, None)

        assert exc_info.value.kind == ViolationKind.RULE_FAILED
        assert exc_info.value.message == "failed rule 'even'"

    def test_tuple_carries_reason(self):
        validator = FunctionValidator("prefix", lambda value, argument: (value.startswith(argument), "bad prefix"))

        validator.validate("TXN001", "TXN")
        with pytest.raises(RuleFailure) as exc_info:
            validator.validate("ABC001", "TXN")
        assert exc_info.value.message == "bad prefix"

    def test_unexpected_exception_becomes_failure(self):
        def broken(value, argument):
            raise KeyError("boom")

        with pytest.raises(RuleFailure) as exc_info:
            FunctionValidator("broken", broken, error_message="lookup failed").validate("x", None)

        assert exc_info.value.kind == ViolationKind.RULE_FAILED
        assert "lookup failed" in exc_info.value.message

    def test_invalid_argument_propagates(self):
        def needs_int(value, argument):
            int(argument or "")
            return True

        def strict(value, argument):
            try:
                int(argument)
            except (TypeError, ValueError):
                raise InvalidRuleArgument("strict", argument)

        with pytest.raises(InvalidRuleArgument):
            FunctionValidator("strict", strict).validate("x", "abc")
        with pytest.raises(RuleFailure):
            FunctionValidator("needs_int", needs_int).validate("x", "abc")

    def test_non_callable_raises_error(self):
        with pytest.raises(ValueError):
            FunctionValidator("bad", "not callable")
