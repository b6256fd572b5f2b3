"""
Field presentation rules for the intake form.

Every applicant field arrives as a plain string field. How it is shown is
inferred from its name, with the schema's description and max_length as the
only metadata consulted:

- email-like      -> email input, example address placeholder
- date-like       -> text input, YYYY-MM-DD placeholder
- ssn-like        -> 9 characters, digits only
- 2-letter state  -> 2 characters, uppercase
- country         -> 2 characters, uppercase
- anything else   -> text input labelled from the description or the name
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from src.integrations.contracts.verification import FieldSchema

_NON_DIGITS = re.compile(r"\D", re.ASCII)

EMAIL_PLACEHOLDER = "your.email@example.com"
DATE_PLACEHOLDER = "YYYY-MM-DD"
SSN_PLACEHOLDER = "123456789 (9 digits, no dashes)"


@dataclass(frozen=True)
class FieldPresentation:
    name: str
    label: str
    input_type: str
    placeholder: str
    max_length: Optional[int] = None
    required: bool = False


def is_email_field(name: str) -> bool:
    return "email" in name


def is_date_field(name: str) -> bool:
    return "birth_date" in name or "date" in name


def is_ssn_field(name: str) -> bool:
    return "ssn" in name


def is_uppercase_field(name: str) -> bool:
    return "state" in name or "country" in name


def humanize_field_name(name: str) -> str:
    """birth_date -> Birth Date"""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), name.replace("_", " "), flags=re.ASCII)


def field_label(field: FieldSchema) -> str:
    return field.description or humanize_field_name(field.name)


def present_field(field: FieldSchema) -> FieldPresentation:
    name = field.name
    label = field_label(field)
    input_type = "text"
    placeholder = f"Enter {label.lower()}"
    max_length: Optional[int] = None
    declared_max = field.validation.max_length if field.validation else None

    if is_email_field(name):
        input_type = "email"
        placeholder = EMAIL_PLACEHOLDER
    elif is_date_field(name):
        placeholder = DATE_PLACEHOLDER
    elif is_ssn_field(name):
        placeholder = SSN_PLACEHOLDER
        max_length = 9
    elif "state" in name and declared_max == 2:
        placeholder = "NY"
        max_length = 2
    elif "country" in name:
        placeholder = "US"
        max_length = 2

    return FieldPresentation(
        name=name,
        label=label,
        input_type=input_type,
        placeholder=placeholder,
        max_length=max_length,
        required=field.required,
    )


def normalize_input(name: str, value: Optional[str]) -> str:
    """Apply the as-you-type rules: SSN keeps digits only, state/country are uppercased."""
    value = value or ""
    if is_ssn_field(name):
        value = _NON_DIGITS.sub("", value)
    if is_uppercase_field(name):
        value = value.upper()
    return value
