"""CLI entry point for the NDA drafter."""

import argparse
import logging
import sys
import time
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import anthropic

from nda_drafter.errors import SelectionError, ValidationError
from nda_drafter.pipeline.intake import validate_request
from nda_drafter.pipeline.selector import select_clauses
from nda_drafter.pipeline.assembler import assemble
from nda_drafter.state import DraftRequest, PartyData

logger = logging.getLogger(__name__)


def run_pipeline(request: DraftRequest, client: anthropic.Anthropic | None = None) -> dict:
    """Run validation, selection and assembly, return final state."""
    state: dict = dict(request)

    state.update(validate_request(state))
    state.update(select_clauses(state, client=client))
    state.update(assemble(state))

    return state


def generate_document(
    party: PartyData,
    conversation_context: str,
    client: anthropic.Anthropic | None = None,
) -> str:
    """Draft an NDA for `party`. Raises ValidationError or SelectionError."""
    request = DraftRequest(party=party, conversation_context=conversation_context)
    return run_pipeline(request, client=client)["document"]


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Draft a non-disclosure agreement.")
    parser.add_argument("--disclosing-party", required=True)
    parser.add_argument("--receiving-party", required=True)
    parser.add_argument("--effective-date", required=True, type=_parse_date,
                        help="Effective date, YYYY-MM-DD")
    context = parser.add_mutually_exclusive_group(required=True)
    context.add_argument("--context", help="What the parties are discussing")
    context.add_argument("--context-file", help="Read the context from a file")
    parser.add_argument("--output", "-o", help="Write the agreement here instead of stdout")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.context_file:
        context_path = Path(args.context_file)
        if not context_path.exists():
            logger.error("File not found: %s", context_path)
            return 1
        conversation_context = context_path.read_text(encoding="utf-8").strip()
    else:
        conversation_context = args.context.strip()

    party = PartyData(
        disclosing_party=args.disclosing_party,
        receiving_party=args.receiving_party,
        effective_date=args.effective_date,
    )

    start = time.time()
    logger.info("Drafting NDA: %s -> %s", party["disclosing_party"], party["receiving_party"])

    try:
        state = run_pipeline(DraftRequest(party=party, conversation_context=conversation_context))
    except ValidationError as exc:
        for problem in exc.problems:
            logger.error("Invalid request: %s", problem)
        return 1
    except SelectionError as exc:
        logger.error("Could not select clauses, no document generated: %s", exc)
        return 2

    document = state["document"]

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document + "\n", encoding="utf-8")
    else:
        sys.stdout.write(document + "\n")

    logger.info("Done: %d clauses -> %s (%.1fs)",
                len(state["clause_names"]), args.output or "stdout", time.time() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
