"""
Clause selection using Haiku.

One call per request: the model reads the conversation context and returns
the names of the clauses it considers relevant. Any failure is a
SelectionError. No retry.
"""

import json
import logging
import os
import re

import anthropic

from nda_drafter.errors import SelectionError
from nda_drafter.pipeline.clauses import CANONICAL_ORDER

logger = logging.getLogger(__name__)

MODEL = os.getenv("NDA_DRAFTER_MODEL", "claude-haiku-4-5-20251001")
DEFAULT_MAX_TOKENS = 256

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.MULTILINE)

SELECT_PROMPT = """\
You are an AI assistant that selects relevant clauses from an NDA template
based on the provided conversation context.

The NDA template includes the following clauses:
{clause_list}

Given the following conversation context, identify and return only the
clauses that are most relevant. Use the clause names exactly as listed.

Return a single JSON object:
{{"selectedClauses": ["<clause name>", ...]}}

CONVERSATION CONTEXT:
---
{context}
---

Return ONLY the JSON object."""


def build_prompt(context: str) -> str:
    clause_list = "\n".join(f"- {name}" for name in CANONICAL_ORDER)
    return SELECT_PROMPT.format(clause_list=clause_list, context=context)


def _max_tokens() -> int:
    raw = os.getenv("NDA_DRAFTER_MAX_TOKENS", str(DEFAULT_MAX_TOKENS))
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        raise SelectionError(f"NDA_DRAFTER_MAX_TOKENS must be a positive integer, got {raw!r}")
    return value


def _call_llm(client: anthropic.Anthropic, context: str) -> str:
    response = client.messages.create(
        model=MODEL,
        max_tokens=_max_tokens(),
        messages=[{
            "role": "user",
            "content": build_prompt(context),
        }]
    )
    # tool_use and thinking blocks carry no text
    text = "".join(
        block.text for block in response.content or []
        if getattr(block, "type", None) == "text"
    )
    if not text.strip():
        raise SelectionError("Model reply contained no text")
    return _FENCE_RE.sub("", text).strip()


def _validate(data) -> str | None:
    if not isinstance(data, dict):
        return f"Expected a JSON object, got {type(data).__name__}"
    names = data.get("selectedClauses")
    if not isinstance(names, list):
        return f"'selectedClauses' must be a list, got {names!r}"
    if not all(isinstance(n, str) for n in names):
        return f"Non-string clause names: {names}"
    return None


def parse_selection(raw: str) -> frozenset[str]:
    """Parse the model reply into a set of clause names. Raises SelectionError."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SelectionError(f"Malformed selector output: {exc}") from exc

    error = _validate(data)
    if error:
        raise SelectionError(f"Selector output does not match schema: {error}")
    return frozenset(data["selectedClauses"])


def select_clauses(state: dict, client: anthropic.Anthropic | None = None) -> dict:
    context = state["conversation_context"]
    logger.info("Selecting clauses (%d chars of context)", len(context))

    try:
        client = client or anthropic.Anthropic()
        raw = _call_llm(client, context)
    except SelectionError:
        raise
    except anthropic.AnthropicError as exc:
        logger.error("Clause selection failed: %s", exc)
        raise SelectionError(f"Clause selection failed: {exc}") from exc

    selected = parse_selection(raw)
    logger.info("  Selected %d clauses: %s", len(selected), sorted(selected))
    return {"selected_clauses": selected}
