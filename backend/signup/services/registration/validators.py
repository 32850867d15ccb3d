"""
Field validators for registration submissions.

Each validator is a pure function taking already-sanitized value(s) and
returning a :class:`ValidationResult`. Expected bad input never raises.

:data:`FIELD_CHECKS` binds the validators to :class:`RegistrationIn`
attributes in the order their messages must appear in an aggregate result.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Final

from signup.services.registration.dto import (
    AggregateValidationResult,
    RegistrationIn,
    ValidationResult,
    is_present,
)

GENDERS: Final[tuple[str, ...]] = ("male", "female", "other")
EXPERIENCE_LEVELS: Final[tuple[str, ...]] = ("beginner", "intermediate", "advanced", "expert")
INTERESTS: Final[tuple[str, ...]] = ("technology", "sports", "music", "travel", "reading")

# Strings accepted as a ticked terms checkbox besides a JSON ``true``
TERMS_ACCEPTED_STRINGS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "y", "on"})

MIN_NAME_LENGTH: Final = 2
MIN_STREET_LENGTH: Final = 5
MIN_CITY_LENGTH: Final = 2
MIN_PHONE_LENGTH: Final = 10
MAX_PHONE_LENGTH: Final = 15
MIN_AGE: Final = 13
MAX_AGE: Final = 120
MAX_BIO_LENGTH: Final = 1000

_NAME_RE = re.compile(r"[A-Za-z\s]+")
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_RE = re.compile(r"\+?[1-9]\d{0,15}", re.ASCII)
_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)
# Indian postal index number
_PIN_CODE_RE = re.compile(r"[1-9][0-9]{5}")


def _blank(value: Any) -> bool:
    return not is_present(value) or value == ""


def validate_name(value: Any, label: str) -> ValidationResult:
    """Check a person name; ``label`` prefixes every message."""
    if _blank(value) or not isinstance(value, str):
        return ValidationResult.fail(f"{label} is required.")
    trimmed = value.strip()
    if len(trimmed) < MIN_NAME_LENGTH:
        return ValidationResult.fail(
            f"{label} must be at least {MIN_NAME_LENGTH} characters long."
        )
    if not _NAME_RE.fullmatch(trimmed):
        return ValidationResult.fail(f"{label} must contain only letters and spaces.")
    return ValidationResult.ok()


def validate_email(
    value: Any, *, is_taken: Callable[[str], bool] | None = None
) -> ValidationResult:
    """Check email syntax and, when ``is_taken`` is given, uniqueness.

    Uniqueness is exact, case-sensitive string equality against the records
    currently stored.
    """
    if _blank(value) or not isinstance(value, str):
        return ValidationResult.fail("Email is required.")
    if not _EMAIL_RE.fullmatch(value):
        return ValidationResult.fail("Please provide a valid email address.")
    if is_taken is not None and is_taken(value):
        return ValidationResult.fail("This email address is already registered.")
    return ValidationResult.ok()


def clean_phone(value: str) -> str:
    """Keep digits and a single leading ``+``."""
    digits = _NON_DIGIT_RE.sub("", value)
    return f"+{digits}" if value.startswith("+") else digits


def validate_phone(value: Any) -> ValidationResult:
    if _blank(value) or not isinstance(value, str):
        return ValidationResult.fail("Phone number is required.")
    cleaned = clean_phone(value)
    if not MIN_PHONE_LENGTH <= len(cleaned) <= MAX_PHONE_LENGTH:
        return ValidationResult.fail(
            f"Phone number must be between {MIN_PHONE_LENGTH} and {MAX_PHONE_LENGTH} digits."
        )
    if not _PHONE_RE.fullmatch(cleaned):
        return ValidationResult.fail("Please provide a valid phone number.")
    return ValidationResult.ok()


def parse_date(value: str) -> date | None:
    """Parse an ISO 8601 date or datetime string; ``None`` when unparsable."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def age_on(born: date, today: date) -> int:
    """Whole years between ``born`` and ``today`` using calendar arithmetic."""
    before_birthday = (today.month, today.day) < (born.month, born.day)
    return today.year - born.year - int(before_birthday)


def validate_date_of_birth(value: Any, *, today: date | None = None) -> ValidationResult:
    """Check the birth date is real, in the past, and within the age limits.

    ``today`` defaults to the local calendar date; callers that already hold
    an evaluation clock should pass it explicitly.
    """
    if _blank(value):
        return ValidationResult.fail("Date of birth is required.")
    born = parse_date(value) if isinstance(value, str) else None
    if born is None:
        return ValidationResult.fail("Please provide a valid date of birth.")
    today = today or date.today()
    if born > today:
        return ValidationResult.fail("Date of birth cannot be in the future.")
    age = age_on(born, today)
    if age < MIN_AGE:
        return ValidationResult.fail(f"You must be at least {MIN_AGE} years old to register.")
    if age > MAX_AGE:
        return ValidationResult.fail("Please provide a valid date of birth.")
    return ValidationResult.ok()


def _shorter_than(value: Any, minimum: int) -> bool:
    return not isinstance(value, str) or len(value.strip()) < minimum


def validate_address(street: Any, city: Any, state: Any, zip_code: Any) -> ValidationResult:
    """Check all address parts together; failures share one message."""
    errors: list[str] = []
    if _shorter_than(street, MIN_STREET_LENGTH):
        errors.append(f"Street address must be at least {MIN_STREET_LENGTH} characters long.")
    if _shorter_than(city, MIN_CITY_LENGTH):
        errors.append(f"City must be at least {MIN_CITY_LENGTH} characters long.")
    if _shorter_than(state, 1):
        errors.append("State/Province is required.")
    if _blank(zip_code) or not isinstance(zip_code, str):
        errors.append("PIN code is required.")
    elif not _PIN_CODE_RE.fullmatch(zip_code.strip()):
        errors.append("PIN code must be a valid 6-digit number.")
    if errors:
        return ValidationResult.fail(" ".join(errors))
    return ValidationResult.ok()


def _one_of(value: Any, options: Sequence[str]) -> bool:
    return isinstance(value, str) and value in options


def validate_gender(value: Any) -> ValidationResult:
    if not _one_of(value, GENDERS):
        return ValidationResult.fail("Please select a valid gender option.")
    return ValidationResult.ok()


def validate_experience(value: Any) -> ValidationResult:
    if not _one_of(value, EXPERIENCE_LEVELS):
        return ValidationResult.fail("Please select a valid experience level.")
    return ValidationResult.ok()


def validate_interests(value: Any) -> ValidationResult:
    """Optional field: absent passes, anything but a list of known tags fails."""
    if not is_present(value):
        return ValidationResult.ok()
    if not isinstance(value, (list, tuple)):
        return ValidationResult.fail("Interests must be a list.")
    unknown = [str(item) for item in value if not _one_of(item, INTERESTS)]
    if unknown:
        return ValidationResult.fail(f"Invalid interests: {', '.join(unknown)}")
    return ValidationResult.ok()


def terms_accepted(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TERMS_ACCEPTED_STRINGS
    if isinstance(value, (int, float)):
        return value != 0
    return False


def validate_terms(value: Any) -> ValidationResult:
    if not terms_accepted(value):
        return ValidationResult.fail("You must agree to the terms and conditions.")
    return ValidationResult.ok()


def validate_bio(value: Any) -> ValidationResult:
    if isinstance(value, str) and len(value) > MAX_BIO_LENGTH:
        return ValidationResult.fail(f"Bio must be less than {MAX_BIO_LENGTH} characters.")
    return ValidationResult.ok()


# --------------------------------------------------------------------------- #
# Ordered registry
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """
    Environment a submission is evaluated against.

    :param today: Evaluation date for age rules.
    :type today: datetime.date
    :param is_taken: Email lookup over the current store snapshot.
    :type is_taken: Callable[[str], bool] | None
    """

    today: date
    is_taken: Callable[[str], bool] | None = None


Check = Callable[[RegistrationIn, ValidationContext], ValidationResult]


@dataclass(frozen=True, slots=True)
class FieldCheck:
    """A named validator bound to the DTO."""

    name: str
    check: Check


FIELD_CHECKS: Final[tuple[FieldCheck, ...]] = (
    FieldCheck("first_name", lambda d, _: validate_name(d.first_name, "First name")),
    FieldCheck("last_name", lambda d, _: validate_name(d.last_name, "Last name")),
    FieldCheck("email", lambda d, ctx: validate_email(d.email, is_taken=ctx.is_taken)),
    FieldCheck("phone", lambda d, _: validate_phone(d.phone)),
    FieldCheck(
        "date_of_birth", lambda d, ctx: validate_date_of_birth(d.date_of_birth, today=ctx.today)
    ),
    FieldCheck(
        "address", lambda d, _: validate_address(d.street, d.city, d.state, d.zip_code)
    ),
    FieldCheck("gender", lambda d, _: validate_gender(d.gender)),
    FieldCheck("experience", lambda d, _: validate_experience(d.experience)),
    FieldCheck("interests", lambda d, _: validate_interests(d.interests)),
    FieldCheck("terms", lambda d, _: validate_terms(d.terms)),
    FieldCheck("bio", lambda d, _: validate_bio(d.bio)),
)


def validate_all(
    dto: RegistrationIn,
    ctx: ValidationContext,
    checks: Sequence[FieldCheck] = FIELD_CHECKS,
) -> AggregateValidationResult:
    """Run every check once, in order, and collect all failure messages."""
    errors = []
    for field_check in checks:
        result = field_check.check(dto, ctx)
        if not result.valid:
            errors.append(result.message or f"Invalid {field_check.name}.")
    return AggregateValidationResult(errors=tuple(errors))
