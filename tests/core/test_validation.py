"""
Unit tests for server-side contact validation.
"""
import pytest

from app.core.validation import (
    INVALID_EMAIL_ERROR,
    REQUIRED_FIELDS_ERROR,
    ContactValidationError,
    is_valid_email,
    validate_submission,
)


class TestEmailFormat:
    """Loose user@domain.tld check."""

    def test_valid_addresses(self):
        for email in [
            "jane@example.com",
            "first.last+tag@sub.domain.org",
            "علي@example.com",
        ]:
            assert is_valid_email(email), email

    def test_invalid_addresses(self):
        for email in [
            "",
            "plainaddress",
            "no-at.example.com",
            "user@nodot",
            "user @example.com",
            "user@@example.com",
            "@example.com",
            "user@.",
            None,
            42,
        ]:
            assert not is_valid_email(email), email


class TestValidateSubmission:
    """Required fields and trimming."""

    def test_happy_path_trims_fields(self):
        submission = validate_submission(
            {
                "name": "  Jane Doe ",
                "email": " jane@example.com ",
                "phone": " +971 50 123 4567 ",
                "message": "\nHello there\n",
            }
        )

        assert submission.name == "Jane Doe"
        assert submission.email == "jane@example.com"
        assert submission.phone == "+971 50 123 4567"
        assert submission.message == "Hello there"

    def test_phone_is_optional(self):
        submission = validate_submission(
            {"name": "Jane", "email": "jane@example.com", "message": "Hi"}
        )
        assert submission.phone is None

    def test_blank_phone_becomes_none(self):
        submission = validate_submission(
            {"name": "Jane", "email": "jane@example.com", "phone": "  ", "message": "Hi"}
        )
        assert submission.phone is None

    @pytest.mark.parametrize(
        "body,field",
        [
            ({"email": "jane@example.com", "message": "Hi"}, "name"),
            ({"name": "Jane", "message": "Hi"}, "email"),
            ({"name": "Jane", "email": "jane@example.com"}, "message"),
            ({"name": "   ", "email": "jane@example.com", "message": "Hi"}, "name"),
            ({"name": "Jane", "email": "jane@example.com", "message": 0}, "message"),
            ({"name": "Jane", "email": "jane@example.com", "message": ["Hi"]}, "message"),
            ({"name": True, "email": "jane@example.com", "message": "Hi"}, "name"),
        ],
    )
    def test_missing_required_field(self, body, field):
        with pytest.raises(ContactValidationError) as exc_info:
            validate_submission(body)

        assert exc_info.value.error == REQUIRED_FIELDS_ERROR
        assert exc_info.value.field == field

    def test_required_check_runs_before_email_check(self):
        with pytest.raises(ContactValidationError) as exc_info:
            validate_submission({"name": "", "email": "not-an-email", "message": "Hi"})

        assert exc_info.value.error == REQUIRED_FIELDS_ERROR

    def test_invalid_email(self):
        with pytest.raises(ContactValidationError) as exc_info:
            validate_submission({"name": "Jane", "email": "jane@", "message": "Hi"})

        assert exc_info.value.error == INVALID_EMAIL_ERROR
        assert exc_info.value.field == "email"

    @pytest.mark.parametrize("body", [["name", "email"], "hello", 5])
    def test_non_object_body_has_no_fields(self, body):
        with pytest.raises(ContactValidationError) as exc_info:
            validate_submission(body)

        assert exc_info.value.error == REQUIRED_FIELDS_ERROR

    def test_null_body_is_a_type_error(self):
        with pytest.raises(TypeError):
            validate_submission(None)

    def test_numeric_values_are_stringified(self):
        submission = validate_submission(
            {"name": 42, "email": "jane@example.com", "phone": 971501234567, "message": 7}
        )

        assert submission.name == "42"
        assert submission.phone == "971501234567"
        assert submission.message == "7"

    def test_numeric_email_is_malformed_not_missing(self):
        with pytest.raises(ContactValidationError) as exc_info:
            validate_submission({"name": "Jane", "email": 123, "message": "Hi"})

        assert exc_info.value.error == INVALID_EMAIL_ERROR
