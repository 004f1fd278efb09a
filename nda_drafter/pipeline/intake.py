"""
pipeline/intake.py — request validation.

Same rules the drafting form enforces. All problems are reported at once.
"""

import logging
from collections.abc import Mapping
from datetime import date, datetime

from nda_drafter.errors import ValidationError
from nda_drafter.state import PartyData

logger = logging.getLogger(__name__)

MIN_CONTEXT_CHARS = 10
MAX_CONTEXT_CHARS = 500


def _check_name(value, role: str) -> list[str]:
    if value is not None and not isinstance(value, str):
        return [f"{role} party name must be a string."]
    if not (value or "").strip():
        return [f"{role} party name is required."]
    return []


def _check(state: dict) -> list[str]:
    problems: list[str] = []
    party = state.get("party")
    if party is None:
        party = {}
    elif not isinstance(party, Mapping):
        problems.append("Party data must be a mapping.")
        party = {}

    problems.extend(_check_name(party.get("disclosing_party"), "Disclosing"))
    problems.extend(_check_name(party.get("receiving_party"), "Receiving"))

    effective_date = party.get("effective_date")
    # datetime is a date subclass; only a calendar date is accepted
    if not isinstance(effective_date, date) or isinstance(effective_date, datetime):
        problems.append("An effective date is required.")

    context = state.get("conversation_context")
    if not isinstance(context, str):
        problems.append("Conversation context is required.")
    elif len(context) < MIN_CONTEXT_CHARS:
        problems.append("Please provide some context for better clause selection.")
    elif len(context) > MAX_CONTEXT_CHARS:
        problems.append(f"Context should be less than {MAX_CONTEXT_CHARS} characters.")

    return problems


def validate_request(state: dict) -> dict:
    """Validate the draft request. Returns the party data with names trimmed."""
    problems = _check(state)
    if problems:
        logger.warning("Rejected draft request: %s", problems)
        raise ValidationError(problems)

    party = state["party"]
    normalized = PartyData(
        disclosing_party=party["disclosing_party"].strip(),
        receiving_party=party["receiving_party"].strip(),
        effective_date=party["effective_date"],
    )
    return {"party": normalized}
