"""
Input validation rules.

Pure functions that check the shape of emails, passwords and required
fields. Field-level failures are collected into a map of field name to
messages so the API can return them as error ``details``.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from .exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8

INVALID_EMAIL_MESSAGE = "Invalid email format"
SHORT_PASSWORD_MESSAGE = (
    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
)

FIELD_LABELS = {
    "name": "Name",
    "email": "Email",
    "password": "Password",
    "title": "Title",
    "description": "Description",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single-value check."""

    valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class FieldValidationResult:
    """Outcome of a multi-field check. ``errors`` only holds failed fields."""

    valid: bool
    errors: dict[str, list[str]] = field(default_factory=dict)

    def raise_for_errors(self, message: str = "Validation failed") -> None:
        """Raise ValidationError carrying the field errors, if any."""
        if not self.valid:
            raise ValidationError(message, details=self.errors)


def validate_email(value: Optional[str]) -> ValidationResult:
    if not value or not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        return ValidationResult(valid=False, error=INVALID_EMAIL_MESSAGE)
    return ValidationResult(valid=True)


def validate_password(value: Optional[str]) -> ValidationResult:
    # len() counts characters, not encoded bytes
    if not value or not isinstance(value, str) or len(value) < MIN_PASSWORD_LENGTH:
        return ValidationResult(valid=False, error=SHORT_PASSWORD_MESSAGE)
    return ValidationResult(valid=True)


def validate_credentials(
    email: Optional[str],
    password: Optional[str],
) -> FieldValidationResult:
    """Check email and password independently and merge the failures."""
    errors: dict[str, list[str]] = {}

    email_result = validate_email(email)
    if not email_result.valid:
        errors["email"] = [email_result.error]

    password_result = validate_password(password)
    if not password_result.valid:
        errors["password"] = [password_result.error]

    return FieldValidationResult(valid=not errors, errors=errors)


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty or whitespace-only."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def validate_required_fields(
    body: Mapping[str, Any],
    field_names: Iterable[str],
) -> FieldValidationResult:
    """
    Check that each named field is present and not blank.

    Args:
        body: Request payload
        field_names: Fields that must be present

    Returns:
        FieldValidationResult with "<Label> is required" per missing field
    """
    errors: dict[str, list[str]] = {}

    for name in field_names:
        if is_blank(body.get(name)):
            label = FIELD_LABELS.get(name, name)
            errors[name] = [f"{label} is required"]

    return FieldValidationResult(valid=not errors, errors=errors)
