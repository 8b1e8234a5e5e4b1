"""
Field validation for candidate intake payloads.

Pure functions: nothing here touches storage. `validate_candidate` returns a
mapping of field path (e.g. ``education[0].endDate``) to messages and reports
every violating field at once. `clean_candidate` turns an accepted payload
into a normalized `CandidateInput`.

An ``endDate`` sent alongside ``current: true`` is dropped, not rejected.
"""

import re
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from email_validator import validate_email, EmailNotValidError
from pydantic import HttpUrl, TypeAdapter, ValidationError

from services.intake_models import CandidateInput, EducationInput, ExperienceInput

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
ADDRESS_MAX_LENGTH = 200

# Letters (accented Latin included), spaces, hyphen, apostrophe
NAME_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s'-]+$")
PHONE_PATTERN = re.compile(r"^[+]?[(]?[0-9]{1,4}[)]?[-\s.]?[(]?[0-9]{1,4}[)]?[-\s.]?[0-9]{1,9}$")

_url_adapter = TypeAdapter(HttpUrl)

Errors = Dict[str, List[str]]


def _add(errors: Errors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def _text(value: Any) -> Optional[str]:
    """Trimmed string, "" for missing, None when the value is not text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return None


def parse_date(value: Any) -> Optional[date]:
    """Parse an ISO-8601 calendar date (a datetime is truncated to its date)."""
    if not isinstance(value, str) or not value.strip():
        return None
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    return None


def is_valid_url(value: str) -> bool:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def normalize_email(value: str) -> str:
    return value.strip().lower()


def _check_name(errors: Errors, payload: dict, key: str, label: str) -> None:
    value = _text(payload.get(key))
    if value is None:
        _add(errors, key, f"{label} must be text")
        return
    if not value:
        _add(errors, key, f"{label} is required")
        return
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        _add(errors, key, f"{label} must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters")
    if not NAME_PATTERN.match(value):
        _add(errors, key, f"{label} contains invalid characters")


def _check_email(errors: Errors, payload: dict) -> None:
    value = _text(payload.get("email"))
    if value is None:
        _add(errors, "email", "Email must be text")
    elif not value:
        _add(errors, "email", "Email is required")
    else:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            _add(errors, "email", "Please provide a valid email address")


def _check_phone(errors: Errors, payload: dict) -> None:
    value = _text(payload.get("phone"))
    if value is None:
        _add(errors, "phone", "Phone number must be text")
    elif not value:
        _add(errors, "phone", "Phone number is required")
    elif not PHONE_PATTERN.match(value):
        _add(errors, "phone", "Please provide a valid phone number")


def _check_optional_url(errors: Errors, payload: dict, key: str, label: str) -> None:
    value = _text(payload.get(key))
    if value is None:
        _add(errors, key, f"{label} must be text")
    elif value and not is_valid_url(value):
        _add(errors, key, f"Please provide a valid {label} URL")


def _check_period(errors: Errors, entry: dict, prefix: str) -> None:
    """startDate/current/endDate rules shared by education and experience."""
    start_raw = entry.get("startDate")
    start = parse_date(start_raw)
    if start_raw is None or (isinstance(start_raw, str) and not start_raw.strip()):
        _add(errors, f"{prefix}.startDate", "Start date is required")
    elif start is None:
        _add(errors, f"{prefix}.startDate", "Invalid start date format")

    current = parse_bool(entry.get("current"))
    if current is None:
        _add(errors, f"{prefix}.current", "Current field must be boolean")
    if current:
        return

    end_raw = entry.get("endDate")
    end = parse_date(end_raw)
    if end_raw is None or (isinstance(end_raw, str) and not end_raw.strip()):
        # Unknown `current` is already reported; only demand an end date when it is false
        if current is False:
            _add(errors, f"{prefix}.endDate", "End date is required if not current")
    elif end is None:
        _add(errors, f"{prefix}.endDate", "Invalid end date format")
    elif start is not None and end < start:
        _add(errors, f"{prefix}.endDate", "End date must not be before start date")


def _check_entries(
    errors: Errors,
    payload: dict,
    key: str,
    path: str,
    label: str,
    required: Tuple[Tuple[str, str], ...],
) -> None:
    entries = payload.get(key)
    if entries is None:
        return
    if not isinstance(entries, list):
        _add(errors, key, f"{label} must be an array")
        return

    for index, entry in enumerate(entries):
        prefix = f"{path}[{index}]"
        if not isinstance(entry, dict):
            _add(errors, prefix, f"{label} entry must be an object")
            continue
        for field, field_label in required:
            value = _text(entry.get(field))
            if value is None:
                _add(errors, f"{prefix}.{field}", f"{field_label} must be text")
            elif not value:
                _add(errors, f"{prefix}.{field}", f"{field_label} is required")
        if _text(entry.get("description")) is None:
            _add(errors, f"{prefix}.description", "Description must be text")
        _check_period(errors, entry, prefix)


def validate_candidate(payload: Any) -> Errors:
    """
    Validate one candidate payload.

    Args:
        payload: Decoded JSON body (camelCase keys, nested ``educations``
            and ``experiences`` arrays)

    Returns:
        Mapping of field path to messages; empty when the payload is accepted
    """
    errors: Errors = {}
    if not isinstance(payload, dict):
        _add(errors, "candidateData", "Invalid candidate data format")
        return errors

    _check_name(errors, payload, "firstName", "First name")
    _check_name(errors, payload, "lastName", "Last name")
    _check_email(errors, payload)
    _check_phone(errors, payload)

    address = _text(payload.get("address"))
    if address is None:
        _add(errors, "address", "Address must be text")
    elif len(address) > ADDRESS_MAX_LENGTH:
        _add(errors, "address", f"Address must not exceed {ADDRESS_MAX_LENGTH} characters")

    _check_optional_url(errors, payload, "linkedIn", "LinkedIn")
    _check_optional_url(errors, payload, "portfolio", "portfolio")

    _check_entries(
        errors, payload, "educations", "education", "Educations",
        (("institution", "Institution name"), ("degree", "Degree"), ("fieldOfStudy", "Field of study")),
    )
    _check_entries(
        errors, payload, "experiences", "experience", "Experiences",
        (("company", "Company name"), ("position", "Position")),
    )
    return errors


def _optional(value: Any) -> Optional[str]:
    value = _text(value)
    return value or None


def _period(entry: dict) -> Dict[str, Any]:
    current = parse_bool(entry.get("current"))
    return {
        "start_date": parse_date(entry.get("startDate")),
        "end_date": None if current else parse_date(entry.get("endDate")),
        "current": current,
        "description": _optional(entry.get("description")),
    }


def clean_candidate(payload: dict) -> CandidateInput:
    """
    Normalize a payload that `validate_candidate` accepted.

    Strings are trimmed, empty optionals become None, the email is
    lower-cased and end dates of current entries are dropped.
    """
    return CandidateInput(
        first_name=_text(payload["firstName"]),
        last_name=_text(payload["lastName"]),
        email=normalize_email(payload["email"]),
        phone=_text(payload["phone"]),
        address=_optional(payload.get("address")),
        linked_in=_optional(payload.get("linkedIn")),
        portfolio=_optional(payload.get("portfolio")),
        educations=[
            EducationInput(
                institution=_text(entry["institution"]),
                degree=_text(entry["degree"]),
                field_of_study=_text(entry["fieldOfStudy"]),
                **_period(entry),
            )
            for entry in payload.get("educations") or []
        ],
        experiences=[
            ExperienceInput(
                company=_text(entry["company"]),
                position=_text(entry["position"]),
                **_period(entry),
            )
            for entry in payload.get("experiences") or []
        ],
    )
