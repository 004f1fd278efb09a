"""
Shared TypedDicts for the drafting pipeline.
"""

from datetime import date
from typing import TypedDict


class PartyData(TypedDict):
    disclosing_party: str
    receiving_party: str
    effective_date: date


class DraftRequest(TypedDict):
    party: PartyData
    conversation_context: str  # free text the selector classifies
