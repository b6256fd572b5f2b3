"""Client-side validation for the intake form.

Runs on submit, before anything is sent. On failure, raise
`FormValidationError`; the form shows `message` inline and keeps the
applicant's input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from src.form.field_rendering import is_date_field

DATE_FORMAT_MESSAGE = "DOB format must be YYYY-MM-DD"

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass
class FormValidationError(Exception):
    """Exception raised for form validation failures.

    Attributes:
        field_errors: mapping of field name -> human-readable error message.
        message: top-level message shown above the submit button.
    """

    field_errors: Dict[str, str]
    message: str = "Validation failed"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def validate_date_format(value: str, errors: Dict[str, str], field: str) -> str:
    """Empty dates are allowed; non-empty ones must look like YYYY-MM-DD."""
    raw = "" if value is None else str(value)
    if raw and not _DATE_RE.fullmatch(raw):
        add_error(errors, field, DATE_FORMAT_MESSAGE)
    return raw


def validate_applicant_record(schema: Mapping[str, Any], record: Mapping[str, Any]) -> None:
    errors: Dict[str, str] = {}
    for name in schema:
        if is_date_field(name):
            validate_date_format(record.get(name) or "", errors, field=name)
    raise_if_errors(errors)


def raise_if_errors(errors: Dict[str, str]) -> None:
    if errors:
        # Every check here shares one message; show the first failure.
        raise FormValidationError(field_errors=errors, message=next(iter(errors.values())))
