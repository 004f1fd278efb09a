"""
pipeline/assembler.py — final document assembly.

Clause set is the default clauses plus whatever the selector picked,
ordered by CANONICAL_ORDER and numbered from 1. No LLM involved. Pure Python.
"""

import logging
from collections.abc import Iterable

from nda_drafter.pipeline.clauses import (
    CANONICAL_ORDER,
    CLAUSE_LIBRARY,
    DEFAULT_CLAUSES,
    KNOWN_CLAUSES,
    render_preamble,
    render_signature_block,
)
from nda_drafter.state import PartyData

logger = logging.getLogger(__name__)


def order_clauses(selected_clause_names: Iterable[str]) -> list[str]:
    """Merge the selection into the default set and return it in canonical order."""
    to_include = DEFAULT_CLAUSES | set(selected_clause_names)

    unknown = to_include - KNOWN_CLAUSES
    if unknown:
        logger.warning("Dropping %d unknown clause name(s): %s", len(unknown), sorted(unknown))

    return [name for name in CANONICAL_ORDER if name in to_include]


def _render(party: PartyData, clause_names: list[str]) -> str:
    parts = [render_preamble(party)]
    for ordinal, name in enumerate(clause_names, start=1):
        parts.append("\n" + CLAUSE_LIBRARY[name](party, ordinal))
    parts.append(render_signature_block(party))
    return "".join(parts).strip()


def generate(party: PartyData, selected_clause_names: Iterable[str]) -> str:
    """Render the full agreement text for `party` with the selected clauses."""
    return _render(party, order_clauses(selected_clause_names))


def assemble(state: dict) -> dict:
    party = state["party"]
    selected = state.get("selected_clauses", frozenset())

    clause_names = order_clauses(selected)
    document = _render(party, clause_names)

    logger.info("Assembly complete: %d clauses, %d chars", len(clause_names), len(document))
    return {"document": document, "clause_names": clause_names}
