"""Tests for letter sequences."""

from __future__ import annotations

import pytest

from directive_outline.numbering.letters import to_letters


@pytest.mark.parametrize(
    ("n", "expected"),
    [(1, "a"), (2, "b"), (26, "z"), (27, "aa"), (28, "ab"), (52, "az"), (53, "ba"), (702, "zz"), (703, "aaa")],
)
def test_to_letters_known_values(n: int, expected: str) -> None:
    """It should use spreadsheet-column naming with no zero digit."""

    assert to_letters(n) == expected


def test_to_letters_strictly_increasing() -> None:
    """It should order like column names: shorter first, then alphabetically."""

    labels = [to_letters(n) for n in range(1, 1001)]
    keys = [(len(s), s) for s in labels]
    assert all(a < b for a, b in zip(keys, keys[1:]))
    assert len(set(labels)) == len(labels)


@pytest.mark.parametrize("n", [0, -1])
def test_to_letters_rejects_non_positive(n: int) -> None:
    """It should treat a non-positive ordinal as a programming error."""

    with pytest.raises(ValueError):
        to_letters(n)

