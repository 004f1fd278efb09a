from datetime import date

import pytest

from nda_drafter.pipeline.clauses import (
    CANONICAL_ORDER,
    CLAUSE_LIBRARY,
    DEFAULT_CLAUSES,
    KNOWN_CLAUSES,
    format_effective_date,
)


def test_library_shape():
    assert len(CLAUSE_LIBRARY) == 8
    assert set(CANONICAL_ORDER) == KNOWN_CLAUSES
    assert len(CANONICAL_ORDER) == 8
    assert len(DEFAULT_CLAUSES) == 6
    assert DEFAULT_CLAUSES < KNOWN_CLAUSES
    assert KNOWN_CLAUSES - DEFAULT_CLAUSES == {"Intellectual Property", "Permitted Use"}


def test_library_is_read_only():
    with pytest.raises(TypeError):
        CLAUSE_LIBRARY["Bogus"] = lambda party, ordinal: ""


def test_renderers_use_the_ordinal(party):
    for name, render in CLAUSE_LIBRARY.items():
        assert render(party, 7).startswith("7. **")
        assert render(party, 7) == render(party, 7)


@pytest.mark.parametrize("value, expected", [
    (date(2024, 1, 15), "January 15, 2024"),
    (date(2023, 12, 1), "December 1, 2023"),
    (date(2000, 2, 29), "February 29, 2000"),
])
def test_format_effective_date(value, expected):
    assert format_effective_date(value) == expected
