"""
Unit tests for the user validation rules.
"""
import pytest

from app.application.validation import (
    CREATE_USER_RULES,
    ErrorKind,
    Location,
    ValidationChain,
    email_rule,
    id_query_rule,
    name_rule,
    password_rule,
    phone_rule,
    run_rules,
)


def _kinds(errors):
    return [error.kind for error in errors]


class TestNameRule:
    """Tests for name_rule"""

    def test_valid_name(self):
        assert name_rule().validate({"name": "John Doe"}) == []

    def test_digits_rejected(self):
        errors = name_rule().validate({"name": "John123"})
        assert _kinds(errors) == [ErrorKind.PATTERN_MISMATCH]
        assert errors[0].message == "Name must contain only letters and spaces"

    def test_too_short(self):
        assert _kinds(name_rule().validate({"name": "J"})) == [ErrorKind.LENGTH_OUT_OF_RANGE]

    def test_too_long(self):
        assert _kinds(name_rule().validate({"name": "a" * 51})) == [ErrorKind.LENGTH_OUT_OF_RANGE]

    def test_missing_reports_every_failed_check(self):
        errors = name_rule().validate({})
        assert _kinds(errors) == [
            ErrorKind.REQUIRED_FIELD,
            ErrorKind.LENGTH_OUT_OF_RANGE,
            ErrorKind.PATTERN_MISMATCH,
        ]
        assert all(error.field == "name" for error in errors)

    def test_does_not_check_email(self):
        assert name_rule().validate({"name": "John", "email": "not-an-email"}) == []


class TestEmailRule:
    """Tests for email_rule"""

    def test_valid_email(self):
        assert email_rule().validate({"email": "john@example.com"}) == []

    def test_surrounding_whitespace_trimmed(self):
        assert email_rule().validate({"email": "  john@example.com  "}) == []

    @pytest.mark.parametrize("email", ["", "john", "john@", "@example.com", "john doe@example.com"])
    def test_invalid_email(self, email):
        errors = email_rule().validate({"email": email})
        assert _kinds(errors) == [ErrorKind.PATTERN_MISMATCH]
        assert errors[0].message == "Please enter valid email"


class TestPasswordRule:
    """Tests for password_rule"""

    def test_strong_password_accepted(self):
        assert password_rule().validate({"password": "Passw0rd!"}) == []

    def test_lowercase_only_rejected(self):
        assert _kinds(password_rule().validate({"password": "password"})) == [ErrorKind.PATTERN_MISMATCH]

    def test_short_password(self):
        assert _kinds(password_rule().validate({"password": "Pa0!"})) == [
            ErrorKind.LENGTH_OUT_OF_RANGE,
            ErrorKind.PATTERN_MISMATCH,
        ]

    def test_symbol_outside_allowed_set_rejected(self):
        assert _kinds(password_rule().validate({"password": "Passw0rd#"})) == [ErrorKind.PATTERN_MISMATCH]

    def test_trailing_newline_rejected(self):
        assert _kinds(password_rule().validate({"password": "Passw0rd!\n"})) == [ErrorKind.PATTERN_MISMATCH]

    def test_missing_password(self):
        errors = password_rule().validate({})
        assert _kinds(errors)[0] == ErrorKind.REQUIRED_FIELD
        assert errors[0].message == "Password is required"


class TestPhoneRule:
    """Tests for phone_rule"""

    def test_valid_phone(self):
        assert phone_rule().validate({"phone": "9876543210"}) == []

    def test_too_short(self):
        errors = phone_rule().validate({"phone": "12345"})
        assert _kinds(errors) == [ErrorKind.LENGTH_OUT_OF_RANGE]
        assert errors[0].message == "Phone number must be 10 digits"

    def test_non_numeric(self):
        errors = phone_rule().validate({"phone": "123456789a"})
        assert _kinds(errors) == [ErrorKind.PATTERN_MISMATCH]
        assert errors[0].message == "Phone number must contain only numeric characters"

    def test_numbers_read_as_text(self):
        assert phone_rule().validate({"phone": 9876543210}) == []


class TestIdQueryRule:
    """Tests for id_query_rule"""

    def test_present(self):
        assert id_query_rule().validate({"id": "abc"}) == []

    @pytest.mark.parametrize("source", [{}, {"id": ""}, {"id": None}, None])
    def test_missing_or_empty(self, source):
        errors = id_query_rule().validate(source)
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.REQUIRED_FIELD
        assert errors[0].location == Location.QUERY
        assert errors[0].message == "Id is Required..."


class TestRunRules:
    """Tests for run_rules and ValidationChain"""

    def test_valid_payload_has_no_errors(self, valid_user_payload):
        assert run_rules(CREATE_USER_RULES, valid_user_payload) == []

    def test_errors_collected_across_rules_in_order(self):
        errors = run_rules(
            CREATE_USER_RULES,
            {"name": "John123", "email": "bad", "password": "password", "phone": "12345"},
        )
        assert [error.field for error in errors] == ["name", "email", "password", "phone"]

    def test_empty_body_fails_every_rule(self):
        errors = run_rules(CREATE_USER_RULES, {})
        assert {error.field for error in errors} == {"name", "email", "password", "phone"}
        assert len(errors) == 3 + 1 + 3 + 3

    def test_with_message_requires_a_check(self):
        with pytest.raises(ValueError):
            ValidationChain("name").with_message("oops")
