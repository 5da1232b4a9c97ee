"""Enumeration of d^n microstates.

For each base occupation pattern, every distinct permutation is expanded into
``2**ones`` spin assignments, where ``ones`` is the number of singly occupied
orbitals of the pattern. ML and MS are computed for each resulting microstate.
"""

import math
from collections import Counter
from collections.abc import Iterator, Sequence
from typing import Final

from microstates.patterns import count_singly_occupied, occupation_patterns, validate_electron_count
from microstates.permutations import distinct_permutations
from microstates.spin import spin_assignments
from microstates.typing import MAX_ELECTRONS, ORBITAL_ML, Microstate
from microstates.utils import logger

# Ways of placing n electrons in the 10 d spin-orbitals, C(10, n), indexed by n
COMBINATION_COUNTS: Final[dict[int, int]] = {
    n: math.comb(MAX_ELECTRONS, n) for n in range(1, MAX_ELECTRONS + 1)
}


def compute_ml(occupation: Sequence[int]) -> int:
    """Sum of electron count times magnetic quantum number over the five orbitals."""
    return sum(count * ml for count, ml in zip(occupation, ORBITAL_ML, strict=True))


def enumerate_microstates(n_electrons: int) -> Iterator[Microstate]:
    """Yields every microstate of a d^n configuration.

    Order: base patterns as returned by :func:`occupation_patterns`, then
    permutations in lexicographic order, then spin codes in increasing order.

    Args:
        n_electrons: Number of d electrons, 1 to 10.

    Yields:
        Microstate objects; nothing is retained between iterations.

    Raises:
        ValidationError: If ``n_electrons`` is outside 1..10.
    """
    for pattern in occupation_patterns(n_electrons):
        ones = count_singly_occupied(pattern)
        assignments = tuple(spin_assignments(ones))
        logger.debug(f"Expanding pattern {pattern}: ones={ones}, {len(assignments)} spin assignments each")
        for occupation in distinct_permutations(pattern):
            ml = compute_ml(occupation)
            for spins in assignments:
                yield Microstate(occupation=occupation, spins=spins, ml=ml, two_ms=sum(spins))


def group_size(n_electrons: int) -> int:
    """Number of microstates emitted for ``n_electrons``."""
    return sum(1 for _ in enumerate_microstates(n_electrons))


def tabulate_microstates(n_electrons: int) -> dict[tuple[int, int], int]:
    """Counts microstates per (ML, 2*MS) cell.

    Args:
        n_electrons: Number of d electrons, 1 to 10.

    Returns:
        Mapping ``(ml, two_ms) -> count``, sorted by descending ML then descending MS.
    """
    validate_electron_count(n_electrons)
    counts = Counter((state.ml, state.two_ms) for state in enumerate_microstates(n_electrons))
    return dict(sorted(counts.items(), key=lambda item: (-item[0][0], -item[0][1])))
