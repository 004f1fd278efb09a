from datetime import date, datetime

import pytest

from nda_drafter.errors import ValidationError
from nda_drafter.pipeline.intake import validate_request

CONTEXT = "Sharing financial projections ahead of an acquisition."


def test_valid_request_trims_names(party):
    party["disclosing_party"] = "  Acme Inc. "

    result = validate_request({"party": party, "conversation_context": CONTEXT})

    assert result["party"]["disclosing_party"] == "Acme Inc."
    assert result["party"]["effective_date"] == date(2024, 1, 15)


def test_all_problems_reported_together():
    state = {
        "party": {"disclosing_party": " ", "receiving_party": "", "effective_date": None},
        "conversation_context": "short",
    }

    with pytest.raises(ValidationError) as excinfo:
        validate_request(state)

    assert excinfo.value.problems == [
        "Disclosing party name is required.",
        "Receiving party name is required.",
        "An effective date is required.",
        "Please provide some context for better clause selection.",
    ]


def test_context_length_bounds(party):
    validate_request({"party": party, "conversation_context": "x" * 10})
    validate_request({"party": party, "conversation_context": "x" * 500})

    with pytest.raises(ValidationError, match="less than 500"):
        validate_request({"party": party, "conversation_context": "x" * 501})


def test_datetime_is_rejected(party):
    party["effective_date"] = datetime(2024, 1, 15, 9, 30)

    with pytest.raises(ValidationError, match="effective date"):
        validate_request({"party": party, "conversation_context": CONTEXT})


def test_missing_party():
    with pytest.raises(ValidationError):
        validate_request({"conversation_context": CONTEXT})


def test_non_string_names_are_rejected(party):
    party["disclosing_party"] = 123
    party["receiving_party"] = ["John", "Doe"]

    with pytest.raises(ValidationError) as excinfo:
        validate_request({"party": party, "conversation_context": CONTEXT})

    assert excinfo.value.problems == [
        "Disclosing party name must be a string.",
        "Receiving party name must be a string.",
    ]


def test_party_must_be_a_mapping():
    with pytest.raises(ValidationError) as excinfo:
        validate_request({"party": ("Acme Inc.", "John Doe"), "conversation_context": CONTEXT})

    assert excinfo.value.problems[0] == "Party data must be a mapping."
