"""Tests for microstate enumeration."""

import math
from fractions import Fraction

import pytest

from microstates.enumerator import (
    COMBINATION_COUNTS,
    compute_ml,
    enumerate_microstates,
    group_size,
    tabulate_microstates,
)
from microstates.exceptions import ValidationError
from microstates.typing import Microstate

MAGNETIC_NUMBERS = [2, 1, 0, -1, -2]


def test_combination_counts_reference_table() -> None:
    assert [COMBINATION_COUNTS[n] for n in range(1, 11)] == [10, 45, 120, 210, 252, 210, 120, 45, 10, 1]


@pytest.mark.parametrize("n_electrons", range(1, 11))
def test_group_size_is_binomial(n_electrons: int) -> None:
    assert group_size(n_electrons) == math.comb(10, n_electrons)


@pytest.mark.parametrize("n_electrons", range(1, 11))
def test_microstate_invariants(n_electrons: int) -> None:
    """Cells sum to n, ML is recomputed independently, |MS| <= ones/2, parity of 2*MS follows ones."""
    for state in enumerate_microstates(n_electrons):
        assert sum(state.occupation) == n_electrons
        assert all(count in (0, 1, 2) for count in state.occupation)

        expected_ml = 0
        for count, m in zip(state.occupation, MAGNETIC_NUMBERS):
            expected_ml += count * m
        assert state.ml == expected_ml

        ones = state.occupation.count(1)
        assert len(state.spins) == ones
        assert abs(state.ms) <= Fraction(ones, 2)
        assert (state.two_ms % 2 == 0) == (ones % 2 == 0)
        assert state.two_ms == sum(state.spins)


@pytest.mark.parametrize("n_electrons", range(1, 11))
def test_no_duplicate_microstates(n_electrons: int) -> None:
    keys = [(s.occupation, s.spins) for s in enumerate_microstates(n_electrons)]
    assert len(keys) == len(set(keys))


def test_single_electron_scenario() -> None:
    states = list(enumerate_microstates(1))
    assert len(states) == 10
    assert {s.occupation for s in states} == {
        (0, 0, 0, 0, 1), (0, 0, 0, 1, 0), (0, 0, 1, 0, 0), (0, 1, 0, 0, 0), (1, 0, 0, 0, 0),
    }  # fmt:skip
    assert states[-2] == Microstate(occupation=(1, 0, 0, 0, 0), spins=(-1,), ml=2, two_ms=-1)
    assert states[-1] == Microstate(occupation=(1, 0, 0, 0, 0), spins=(1,), ml=2, two_ms=1)


def test_full_shell_scenario() -> None:
    states = list(enumerate_microstates(10))
    assert states == [Microstate(occupation=(2, 2, 2, 2, 2), spins=(), ml=0, two_ms=0)]


def test_half_filled_high_spin_pattern() -> None:
    """The all-singly-occupied d5 pattern has one distinct arrangement and 2**5 spin states."""
    high_spin = [s for s in enumerate_microstates(5) if s.occupation == (1, 1, 1, 1, 1)]
    assert len(high_spin) == 32
    assert max(s.ms for s in high_spin) == Fraction(5, 2)
    assert min(s.ms for s in high_spin) == Fraction(-5, 2)
    assert all(s.ml == 0 for s in high_spin)


def test_d5_counts_per_pattern() -> None:
    by_pattern = {(1, 1, 1, 1, 1): 0, (0, 1, 1, 1, 2): 0, (0, 0, 1, 2, 2): 0}
    for state in enumerate_microstates(5):
        by_pattern[tuple(sorted(state.occupation))] += 1
    assert by_pattern == {(1, 1, 1, 1, 1): 32, (0, 1, 1, 1, 2): 160, (0, 0, 1, 2, 2): 60}


def test_enumeration_order_for_two_electrons() -> None:
    """Patterns first, then lexicographic permutations, then spin codes."""
    states = list(enumerate_microstates(2))
    # fmt:off
    assert [(s.occupation, s.spins) for s in states[:5]] == [
        ((0, 0, 0, 1, 1), (-1, -1)),
        ((0, 0, 0, 1, 1), (-1, 1)),
        ((0, 0, 0, 1, 1), (1, -1)),
        ((0, 0, 0, 1, 1), (1, 1)),
        ((0, 0, 1, 0, 1), (-1, -1)),
    ]
    # fmt:on
    # paired pattern comes after all 40 two-singles states
    assert states[40].occupation == (0, 0, 0, 0, 2)
    assert states[-1].occupation == (2, 0, 0, 0, 0)


def test_ml_shared_across_spin_expansion() -> None:
    states = [s for s in enumerate_microstates(3) if s.occupation == (1, 1, 1, 0, 0)]
    assert len(states) == 8
    assert {s.ml for s in states} == {3}


def test_enumeration_is_deterministic() -> None:
    assert list(enumerate_microstates(4)) == list(enumerate_microstates(4))


@pytest.mark.parametrize(
    "occupation, expected",
    [((1, 0, 0, 0, 0), 2), ((0, 0, 0, 0, 2), -4), ((2, 2, 2, 2, 2), 0), ((2, 1, 0, 0, 0), 5)],
)
def test_compute_ml(occupation: tuple[int, ...], expected: int) -> None:
    assert compute_ml(occupation) == expected


def test_invalid_electron_count() -> None:
    with pytest.raises(ValidationError):
        list(enumerate_microstates(11))


def test_tabulate_d2() -> None:
    """d2 chart: 3F + 3P + 1G + 1D + 1S."""
    table = tabulate_microstates(2)
    assert sum(table.values()) == 45
    assert table[(4, 0)] == 1
    assert (4, 2) not in table
    assert table[(3, 2)] == 1
    assert table[(3, 0)] == 2
    assert table[(0, 0)] == 5
    assert table[(0, 2)] == 2
    assert next(iter(table)) == (4, 0)


@pytest.mark.parametrize("n_electrons", range(1, 11))
def test_tabulate_symmetry(n_electrons: int) -> None:
    table = tabulate_microstates(n_electrons)
    assert sum(table.values()) == math.comb(10, n_electrons)
    for (ml, two_ms), count in table.items():
        assert table[(-ml, -two_ms)] == count
