from __future__ import annotations

import pytest

from auth_core.domain.services.credential_policy import validate_email, validate_password


LENGTH_ERROR = "Password must be at least 8 characters long"
UPPERCASE_ERROR = "Password must contain at least one uppercase letter"
LOWERCASE_ERROR = "Password must contain at least one lowercase letter"
DIGIT_ERROR = "Password must contain at least one number"


@pytest.mark.parametrize("candidate", ["a@b.com", "first.last@sub.example.org", "x+tag@host.io"])
def test_validate_email_accepts_local_at_domain_with_dot(candidate):
    assert validate_email(candidate) is True


@pytest.mark.parametrize(
    "candidate",
    ["no-at-symbol", "a@b", "", "a b@example.com", "a@exa mple.com", "@example.com", "a@@b.com"],
)
def test_validate_email_rejects_malformed(candidate):
    assert validate_email(candidate) is False


def test_validate_email_does_not_trim():
    assert validate_email(" a@b.com") is False
    assert validate_email("a@b.com\n") is False


@pytest.mark.parametrize("candidate", ["", "Ab1", "aB3dE6g", "!!!!!!!"])
def test_short_passwords_always_report_length_error(candidate):
    result = validate_password(candidate)

    assert result.valid is False
    assert result.errors[0] == LENGTH_ERROR


def test_strong_password_is_valid_with_no_errors():
    result = validate_password("Str0ngPassw0rd")

    assert result.valid is True
    assert result.errors == []


def test_errors_accumulate_in_fixed_order():
    result = validate_password("")

    assert result.errors == [LENGTH_ERROR, UPPERCASE_ERROR, LOWERCASE_ERROR, DIGIT_ERROR]


def test_single_rule_violations():
    assert validate_password("lowercase1").errors == [UPPERCASE_ERROR]
    assert validate_password("UPPERCASE1").errors == [LOWERCASE_ERROR]
    assert validate_password("NoDigitsHere").errors == [DIGIT_ERROR]


def test_non_ascii_letters_do_not_satisfy_case_rules():
    result = validate_password("ÀÉÎÕÜàéîõü1")

    assert UPPERCASE_ERROR in result.errors
    assert LOWERCASE_ERROR in result.errors
