from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T", int, float, str)


def next_permutation(seq: Sequence[T]) -> tuple[T, ...] | None:
    """Returns the next distinct permutation of ``seq`` in lexicographic order.

    Args:
        seq: Sequence of comparable values.

    Returns:
        The lexicographically next arrangement, or None if ``seq`` is already the
        last (non-increasing) arrangement.
    """
    items = list(seq)
    # rightmost position whose value is smaller than its successor
    pivot = len(items) - 2
    while pivot >= 0 and items[pivot] >= items[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return None

    successor = len(items) - 1
    while items[successor] <= items[pivot]:
        successor -= 1
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return tuple(items)


def distinct_permutations(seq: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Yields every distinct ordering of ``seq`` exactly once, in lexicographic order.

    Iteration starts from the sorted arrangement regardless of the order of ``seq``,
    so calling it again restarts the same sequence. Repeated values do not produce
    duplicate orderings: ``(0, 2, 2)`` yields three permutations, not six.

    Args:
        seq: Sequence of comparable values.

    Yields:
        Tuples holding one arrangement each.
    """
    current: tuple[T, ...] | None = tuple(sorted(seq))
    while current is not None:
        yield current
        current = next_permutation(current)
