from src.fallback_handler import FALLBACK_FIELDS
from src.form.field_rendering import humanize_field_name, normalize_input, present_field
from src.integrations.contracts.verification import FieldSchema, FieldValidation


def test_ssn_input_keeps_digits_only():
    assert normalize_input("document_ssn", "12a3") == "123"
    assert normalize_input("document_ssn", "123-45-6789") == "123456789"


def test_state_and_country_are_uppercased():
    assert normalize_input("address_state", "ny") == "NY"
    assert normalize_input("address_country_code", "us") == "US"
    assert normalize_input("name_first", "ada") == "ada"


def test_normalize_none_is_empty():
    assert normalize_input("document_ssn", None) == ""


def test_email_field_presentation():
    p = present_field(FALLBACK_FIELDS["email_address"])
    assert p.input_type == "email"
    assert p.placeholder == "your.email@example.com"
    assert p.label == "Email Address"
    assert p.max_length is None


def test_date_field_presentation():
    p = present_field(FieldSchema(name="issue_date"))
    assert p.input_type == "text"
    assert p.placeholder == "YYYY-MM-DD"


def test_ssn_field_presentation():
    p = present_field(FALLBACK_FIELDS["document_ssn"])
    assert p.max_length == 9
    assert p.placeholder == "123456789 (9 digits, no dashes)"


def test_two_letter_state_presentation():
    p = present_field(FALLBACK_FIELDS["address_state"])
    assert p.max_length == 2
    assert p.placeholder == "NY"


def test_state_without_two_letter_limit_is_plain_text():
    p = present_field(FieldSchema(name="address_state", validation=FieldValidation(max_length=20)))
    assert p.max_length is None
    assert p.placeholder == "Enter address state"


def test_country_presentation():
    p = present_field(FieldSchema(name="address_country_code", description="Country"))
    assert p.max_length == 2
    assert p.placeholder == "US"


def test_label_falls_back_to_humanized_name():
    p = present_field(FieldSchema(name="phone_number"))
    assert p.label == "Phone Number"
    assert p.placeholder == "Enter phone number"
    assert humanize_field_name("address_line_1") == "Address Line 1"


def test_humanized_name_capitalizes_ascii_words_only():
    assert humanize_field_name("née_name") == "NéE Name"
