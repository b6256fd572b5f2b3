from src.fallback_handler import FALLBACK_FIELDS
from src.form.layout import group_fields
from src.integrations.contracts.verification import FieldSchema


def _names(entries):
    return [name for name, _ in entries]


def test_fallback_fields_grouping():
    # email_address contains "address".
    groups = group_fields(FALLBACK_FIELDS)

    assert _names(groups.name_fields) == ["name_first", "name_last"]
    assert _names(groups.address_single_fields) == ["address_line_1", "address_line_2", "address_country_code", "email_address"]
    assert _names(groups.address_row_fields) == ["address_city", "address_state", "address_postal_code"]
    assert _names(groups.personal_fields) == ["document_ssn", "birth_date"]


def test_unknown_fields_go_to_personal_group():
    schema = {n: FieldSchema(name=n) for n in ("phone_number", "income", "name_middle")}
    groups = group_fields(schema)

    assert _names(groups.personal_fields) == ["phone_number", "income"]
    assert _names(groups.name_fields) == ["name_middle"]
    assert groups.address_fields == []
