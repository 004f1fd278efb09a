"""
pipeline/clauses.py — the NDA clause library.

Every renderer takes the party data and the ordinal the clause occupies in
the final document. The library is built once and is read-only.
"""

from datetime import date
from types import MappingProxyType
from typing import Callable

from nda_drafter.state import PartyData

ClauseRenderer = Callable[[PartyData, int], str]

CONFIDENTIAL_INFORMATION_DEFINITION = "Confidential Information Definition"
NON_USE_AND_NON_DISCLOSURE = "Non-Use and Non-Disclosure"
EXCLUSIONS = "Exclusions from Confidential Information"
TERM_AND_TERMINATION = "Term and Termination"
INTELLECTUAL_PROPERTY = "Intellectual Property"
PERMITTED_USE = "Permitted Use"
GOVERNING_LAW = "Governing Law and Jurisdiction"
ENTIRE_AGREEMENT = "Entire Agreement"

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_effective_date(value: date) -> str:
    """'January 15, 2024'. Avoids strftime so the locale can't leak in."""
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def render_preamble(party: PartyData) -> str:
    return f"""NON-DISCLOSURE AGREEMENT

This Non-Disclosure Agreement (the "Agreement") is entered into as of {format_effective_date(party["effective_date"])} (the "Effective Date"), by and between:

Disclosing Party: {party["disclosing_party"]}
Receiving Party: {party["receiving_party"]}

(Each, a "Party" and collectively, the "Parties").

In consideration of the mutual covenants contained herein, the Parties agree as follows:
"""


def render_signature_block(party: PartyData) -> str:
    return f"""
IN WITNESS WHEREOF, the Parties have executed this Agreement as of the Effective Date.

DISCLOSING PARTY:

By: _________________________
Name: {party["disclosing_party"]}


RECEIVING PARTY:

By: _________________________
Name: {party["receiving_party"]}
"""


def _definition(party: PartyData, ordinal: int) -> str:
    return (
        f'{ordinal}. **Definition of Confidential Information.** "Confidential Information" means all '
        "non-public information disclosed by the Disclosing Party to the Receiving Party, whether orally "
        "or in writing, that is designated as confidential or that reasonably should be understood to be "
        "confidential given the nature of the information and the circumstances of disclosure."
    )


def _non_use(party: PartyData, ordinal: int) -> str:
    return (
        f"{ordinal}. **Non-Use and Non-Disclosure.** The Receiving Party agrees not to use any Confidential "
        "Information for any purpose except to evaluate and engage in discussions concerning a potential "
        "business relationship between the Parties. The Receiving Party agrees not to disclose any "
        "Confidential Information to third parties or to its employees, except to those employees who are "
        "required to have the information in order to evaluate or engage in discussions concerning the "
        "contemplated business relationship."
    )


def _exclusions(party: PartyData, ordinal: int) -> str:
    return (
        f"{ordinal}. **Exclusions.** Confidential Information does not include information that: (a) is or "
        "becomes generally available to the public other than as a result of a disclosure by the Receiving "
        "Party; (b) was in its possession or known by it prior to receipt from the Disclosing Party; (c) was "
        "rightfully disclosed to it without restriction by a third party; or (d) was independently developed "
        "without use of any Confidential Information of the Disclosing Party."
    )


def _term(party: PartyData, ordinal: int) -> str:
    return (
        f"{ordinal}. **Term.** The obligations of the Receiving Party under this Agreement shall survive for "
        "a period of five (5) years from the date of disclosure of the Confidential Information. The term of "
        "this Agreement shall be one (1) year from the Effective Date, unless terminated earlier by either "
        "Party with 30 days written notice."
    )


def _intellectual_property(party: PartyData, ordinal: int) -> str:
    return (
        f"{ordinal}. **Intellectual Property.** Nothing in this Agreement is intended to grant any rights to "
        "the Receiving Party under any patent, copyright, or other intellectual property right of the "
        "Disclosing Party, nor shall this Agreement grant the Receiving Party any rights in or to the "
        "Confidential Information except as expressly set forth herein."
    )


def _permitted_use(party: PartyData, ordinal: int) -> str:
    return (
        f"{ordinal}. **Permitted Use.** The Receiving Party may use the Confidential Information solely for "
        "the purpose of evaluating a potential business relationship between the Parties. Any other use of "
        "the Confidential Information by the Receiving Party is strictly prohibited without the prior "
        "written consent of the Disclosing Party."
    )


def _governing_law(party: PartyData, ordinal: int) -> str:
    return (
        f"{ordinal}. **Governing Law.** This Agreement shall be governed by the laws of the State of "
        "Delaware, without regard to its conflict of laws principles. Any legal action or proceeding "
        "arising under this Agreement will be brought exclusively in the federal or state courts located "
        "in Delaware and the Parties irrevocably consent to the personal jurisdiction and venue therein."
    )


def _entire_agreement(party: PartyData, ordinal: int) -> str:
    return (
        f"{ordinal}. **Entire Agreement.** This Agreement contains the entire agreement between the Parties "
        "with respect to the subject matter hereof and supersedes all prior and contemporaneous agreements, "
        "understandings, negotiations, and discussions, whether oral or in writing, of the Parties."
    )


CLAUSE_LIBRARY: "MappingProxyType[str, ClauseRenderer]" = MappingProxyType({
    CONFIDENTIAL_INFORMATION_DEFINITION: _definition,
    NON_USE_AND_NON_DISCLOSURE: _non_use,
    EXCLUSIONS: _exclusions,
    TERM_AND_TERMINATION: _term,
    INTELLECTUAL_PROPERTY: _intellectual_property,
    PERMITTED_USE: _permitted_use,
    GOVERNING_LAW: _governing_law,
    ENTIRE_AGREEMENT: _entire_agreement,
})

KNOWN_CLAUSES = frozenset(CLAUSE_LIBRARY)

# Included in every document regardless of what the selector returns
DEFAULT_CLAUSES = frozenset({
    CONFIDENTIAL_INFORMATION_DEFINITION,
    NON_USE_AND_NON_DISCLOSURE,
    EXCLUSIONS,
    TERM_AND_TERMINATION,
    GOVERNING_LAW,
    ENTIRE_AGREEMENT,
})

CANONICAL_ORDER: tuple[str, ...] = (
    CONFIDENTIAL_INFORMATION_DEFINITION,
    NON_USE_AND_NON_DISCLOSURE,
    EXCLUSIONS,
    PERMITTED_USE,
    INTELLECTUAL_PROPERTY,
    TERM_AND_TERMINATION,
    GOVERNING_LAW,
    ENTIRE_AGREEMENT,
)
