"""Fallback schema handling.

The provider's parameter listing drives the intake form. When that listing
is unavailable, empty, or too thin to label the form (no field carries a
description), the form falls back to a fixed set of applicant fields.
"""
from typing import Any, Dict, Optional

import logging

from src.integrations.contracts.verification import FieldSchema, FieldValidation, SchemaMap

logger = logging.getLogger(__name__)


def _field(name: str, description: str, **validation: Any) -> FieldSchema:
    return FieldSchema(
        name=name,
        type="string",
        required=False,
        description=description,
        validation=FieldValidation(**validation),
    )


FALLBACK_FIELDS: Dict[str, FieldSchema] = {
    f.name: f
    for f in (
        _field("name_first", "First Name", min_length=1, max_length=50),
        _field("name_last", "Last Name", min_length=1, max_length=50),
        _field("document_ssn", "Social Security Number", min_length=9, max_length=9, pattern="^[0-9]{9}$"),
        _field("birth_date", "Date of Birth", pattern="^[0-9]{4}-[0-9]{2}-[0-9]{2}$"),
        _field("address_line_1", "Address Line 1", min_length=1, max_length=100),
        _field("address_line_2", "Address Line 2", min_length=0, max_length=100),
        _field("address_city", "City", min_length=1, max_length=50),
        _field("address_state", "State", min_length=2, max_length=2),
        _field("address_postal_code", "ZIP Code", min_length=5, max_length=10),
        _field("address_country_code", "Country", min_length=2, max_length=2),
        _field("email_address", "Email Address", pattern="^[^@]+@[^@]+\\.[^@]+$"),
    )
}

COUNTRY_FIELDS = ("address_country_code", "address_country")


class FallbackHandler:
    """Chooses between the provider schema and the fallback fields."""

    def __init__(self, fallback_fields: Optional[SchemaMap] = None):
        self.fallback_fields = fallback_fields or FALLBACK_FIELDS

    def fallback_schema(self) -> SchemaMap:
        # Fresh copies so a session can never mutate the shared table.
        return {name: field.model_copy(deep=True) for name, field in self.fallback_fields.items()}

    def is_usable(self, schema: Optional[SchemaMap]) -> bool:
        if not schema:
            return False
        return any(field.description for field in schema.values())

    def resolve_schema(self, fetched: Optional[SchemaMap], reason: Optional[str] = None) -> SchemaMap:
        if reason is None and self.is_usable(fetched):
            return fetched

        logger.info(
            "Using fallback fields: reason=%s, fetched_fields=%d",
            reason or "insufficient_parameter_data",
            len(fetched or {}),
        )
        return self.fallback_schema()

    @staticmethod
    def initial_record(schema: SchemaMap, default_country: str = "US") -> Dict[str, str]:
        record = {name: "" for name in schema}
        for name in COUNTRY_FIELDS:
            if name in record:
                record[name] = default_country
        return record
