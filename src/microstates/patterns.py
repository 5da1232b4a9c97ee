"""Base occupation patterns of n electrons in the five d orbitals.

A pattern is one representative (sorted ascending) of each multiset of orbital
occupancies in {0, 1, 2} that sums to n. All other arrangements are obtained by
permuting a pattern, see :mod:`microstates.permutations`.
"""

from typing import Final

from microstates.exceptions import InternalCodeError, ValidationError
from microstates.typing import MAX_ELECTRONS, NUM_ORBITALS, OccupationPattern
from microstates.utils import logger

# Number of base patterns for each electron count
# fmt:off
PATTERN_COUNTS: Final[dict[int, int]] = {
    1: 1, 2: 2, 3: 2, 4: 3, 5: 3,
    6: 3, 7: 2, 8: 2, 9: 1, 10: 1,
}
# fmt:on


def validate_electron_count(n_electrons: int) -> None:
    """Raises ValidationError unless ``n_electrons`` is an integer in 1..10."""
    if not isinstance(n_electrons, int) or isinstance(n_electrons, bool):
        raise ValidationError(f"Electron count must be an integer, got {n_electrons!r}.")
    if not 1 <= n_electrons <= MAX_ELECTRONS:
        raise ValidationError(f"Electron count must be between 1 and {MAX_ELECTRONS}, got {n_electrons}.")


def occupation_patterns(n_electrons: int) -> tuple[OccupationPattern, ...]:
    """Returns the distinct occupation patterns for ``n_electrons`` d electrons.

    Patterns are ordered by decreasing number of singly occupied orbitals, so the
    high-spin pattern always comes first. Each pattern is sorted ascending, which
    is the starting point of the lexicographic permutation sequence.

    Args:
        n_electrons: Number of electrons, 1 to 10.

    Returns:
        Tuple of 5-tuples, e.g. ``((0, 0, 0, 1, 1), (0, 0, 0, 0, 2))`` for n=2.

    Raises:
        ValidationError: If ``n_electrons`` is outside 1..10.
    """
    validate_electron_count(n_electrons)

    patterns: list[OccupationPattern] = []
    # every pair in excess of 5 electrons is forced, at most n // 2 pairs fit
    for n_pairs in range(max(0, n_electrons - NUM_ORBITALS), n_electrons // 2 + 1):
        n_single = n_electrons - 2 * n_pairs
        n_empty = NUM_ORBITALS - n_single - n_pairs
        patterns.append((0,) * n_empty + (1,) * n_single + (2,) * n_pairs)

    if len(patterns) != PATTERN_COUNTS[n_electrons]:
        raise InternalCodeError(
            f"Derived {len(patterns)} occupation patterns for n={n_electrons}, "
            f"expected {PATTERN_COUNTS[n_electrons]}."
        )
    logger.debug(f"Occupation patterns for n={n_electrons}: {patterns}")
    return tuple(patterns)


def count_singly_occupied(pattern: OccupationPattern) -> int:
    """Number of orbitals holding exactly one electron; invariant under permutation."""
    return sum(1 for count in pattern if count == 1)
