from dataclasses import dataclass
from fractions import Fraction
from typing import Final, TypeAlias

# Magnetic quantum number of each d orbital, left to right
ORBITAL_ML: Final[tuple[int, ...]] = (2, 1, 0, -1, -2)
NUM_ORBITALS: Final[int] = len(ORBITAL_ML)
MAX_PER_ORBITAL: Final[int] = 2
MAX_ELECTRONS: Final[int] = NUM_ORBITALS * MAX_PER_ORBITAL

OccupationPattern: TypeAlias = tuple[int, ...]
SpinAssignment: TypeAlias = tuple[int, ...]


def format_ms(two_ms: int) -> str:
    """Formats twice the spin projection as an integer or an odd half-integer.

    Args:
        two_ms: Sum of the +1/-1 spin signs, i.e. 2 * MS.

    Returns:
        "1", "0", "-2", ... for even inputs and "3/2", "-1/2", ... for odd ones.
    """
    if two_ms % 2 == 0:
        return str(two_ms // 2)
    return f"{two_ms}/2"


@dataclass(frozen=True)
class Microstate:
    """A single d^n microstate.

    Attributes:
        occupation: Electrons in each orbital, ordered as ORBITAL_ML.
        spins: One sign (+1 or -1) per singly occupied orbital, left to right.
        ml: Total orbital magnetic quantum number.
        two_ms: Twice the total spin magnetic quantum number (sum of spins).
    """

    occupation: OccupationPattern
    spins: SpinAssignment
    ml: int
    two_ms: int

    @property
    def n_electrons(self) -> int:
        return sum(self.occupation)

    @property
    def ones(self) -> int:
        """Number of singly occupied orbitals."""
        return self.occupation.count(1)

    @property
    def ms(self) -> Fraction:
        return Fraction(self.two_ms, 2)

    def cells(self) -> list[str]:
        """Returns the text of each orbital cell, without brackets.

        Singly occupied orbitals carry their spin sign (``+1``/``-1``); empty and
        doubly occupied orbitals show the bare count.
        """
        cells: list[str] = []
        spin_iter = iter(self.spins)
        for count in self.occupation:
            if count == 1:
                sign = "+" if next(spin_iter) > 0 else "-"
                cells.append(f"{sign}{count}")
            else:
                cells.append(str(count))
        return cells

    def render(self) -> str:
        """Returns the report line for this microstate."""
        orbitals = "".join(f"[{cell}]" for cell in self.cells())
        return f"{orbitals} ML: {self.ml} MS: {format_ms(self.two_ms)}"

    def __str__(self) -> str:
        return self.render()
