"""Grouping of schema fields into the form's sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from src.integrations.contracts.verification import FieldSchema, SchemaMap

FieldEntry = Tuple[str, FieldSchema]

_ADDRESS_ROW_KEYWORDS = ("city", "state", "postal")


@dataclass
class FieldGroups:
    name_fields: List[FieldEntry] = field(default_factory=list)
    address_fields: List[FieldEntry] = field(default_factory=list)
    personal_fields: List[FieldEntry] = field(default_factory=list)

    @property
    def address_single_fields(self) -> List[FieldEntry]:
        """Address fields rendered one per line, above the city/state/postal row."""
        return [(n, f) for n, f in self.address_fields if not is_address_row_field(n)]

    @property
    def address_row_fields(self) -> List[FieldEntry]:
        return [(n, f) for n, f in self.address_fields if is_address_row_field(n)]


def is_address_row_field(name: str) -> bool:
    return any(kw in name for kw in _ADDRESS_ROW_KEYWORDS)


def group_fields(schema: SchemaMap) -> FieldGroups:
    # A field named e.g. "address_name" lands in both the name and address groups.
    entries = list(schema.items())
    return FieldGroups(
        name_fields=[(n, f) for n, f in entries if "name" in n],
        address_fields=[(n, f) for n, f in entries if "address" in n],
        personal_fields=[(n, f) for n, f in entries if "name" not in n and "address" not in n],
    )
