"""Exceptions raised by the drafting pipeline."""


class NdaDrafterError(Exception):
    pass


class ValidationError(NdaDrafterError):
    """The drafting request is malformed. Raised before any LLM call."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


class SelectionError(NdaDrafterError):
    """The clause selector failed or returned something unusable."""
