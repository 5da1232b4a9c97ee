from collections.abc import Iterator

from microstates.exceptions import ValidationError
from microstates.typing import SpinAssignment


def decode_spin_code(code: int, width: int) -> SpinAssignment:
    """Decodes a binary code into spin signs.

    The ``width`` binary digits of ``code`` are read most significant first;
    a 1 bit is spin up (+1) and a 0 bit is spin down (-1).

    Args:
        code: Integer in ``0 .. 2**width - 1``.
        width: Number of singly occupied orbitals.

    Returns:
        Tuple of ``width`` signs, e.g. ``decode_spin_code(6, 3) == (1, 1, -1)``.

    Raises:
        ValidationError: If ``width`` is negative or ``code`` does not fit in ``width`` bits.
    """
    if width < 0:
        raise ValidationError(f"Spin code width must be non-negative, got {width}.")
    if not 0 <= code < 1 << width:
        raise ValidationError(f"Spin code {code} does not fit in {width} bits.")
    return tuple(1 if (code >> shift) & 1 else -1 for shift in range(width - 1, -1, -1))


def spin_assignments(width: int) -> Iterator[SpinAssignment]:
    """Yields all ``2**width`` spin assignments for codes 0, 1, ... in increasing order.

    With no singly occupied orbitals a single empty assignment is produced, since
    paired electrons contribute nothing to MS.
    """
    if width < 0:
        raise ValidationError(f"Spin code width must be non-negative, got {width}.")
    for code in range(1 << width):
        yield decode_spin_code(code, width)
