"""Generic operations over token sequences."""

from typing import Hashable, Optional, Sequence, TypeVar

from ..errors import InvalidInputError
from ..models import PadOptions

T = TypeVar("T", bound=Hashable)


def intersection(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Return the distinct elements present in both sequences.

    Elements are returned once each, in order of first appearance in a.

    Args:
        a: First sequence
        b: Second sequence

    Returns:
        List of shared elements without duplicates
    """
    reference = set(b)
    return [element for element in dict.fromkeys(a) if element in reference]


def lcs(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Return the elements matched between two ordered sequences.

    Common leading and trailing runs are stripped first to shrink the
    search space. The remaining middle region is scanned with a nested
    loop (outer over b, inner over a) and every equal pair contributes
    one element. The result is the prefix, then the middle matches in
    scan order, then the suffix.

    Args:
        a: Candidate sequence
        b: Reference sequence

    Returns:
        Matched elements; empty if either input is empty
    """
    if not a or not b:
        return []

    start = 0
    while start < len(a) and start < len(b) and a[start] == b[start]:
        start += 1

    a_end = len(a) - 1
    b_end = len(b) - 1
    while a_end >= start and b_end >= start and a[a_end] == b[b_end]:
        a_end -= 1
        b_end -= 1

    matched = list(a[:start])
    trimmed_a = a[start:a_end + 1]
    trimmed_b = b[start:b_end + 1]

    for b_item in trimmed_b:
        for a_item in trimmed_a:
            if a_item == b_item:
                matched.append(a_item)

    matched.extend(a[a_end + 1:])
    return matched


def n_gram(
    tokens: Sequence[str],
    n: int = 2,
    pad: Optional[PadOptions] = None,
) -> list[str]:
    """Return the overlapping n-token windows of a token sequence.

    Args:
        tokens: Word tokens
        n: Window size
        pad: Optional padding added (n - 1 copies) before windowing

    Returns:
        Space-joined windows, left to right

    Raises:
        InvalidInputError: If n < 1 or there are fewer than n (padded) tokens
    """
    if n < 1:
        raise InvalidInputError("ngram size cannot be smaller than 1")

    pad = pad or PadOptions()
    padding = [pad.value] * (n - 1)
    padded = list(tokens)
    if pad.start:
        padded = padding + padded
    if pad.end:
        padded = padded + padding

    if len(padded) < n:
        raise InvalidInputError(
            "ngram size cannot be larger than the number of tokens available"
        )

    return [" ".join(padded[idx:idx + n]) for idx in range(len(padded) - n + 1)]


def skip_bigram(tokens: Sequence[str]) -> list[str]:
    """Return every ordered token pair (i < j) joined by a space.

    Raises:
        InvalidInputError: If fewer than two tokens are given
    """
    if len(tokens) < 2:
        raise InvalidInputError("Input must have at least two words")

    return [
        f"{tokens[base]} {tokens[sweep]}"
        for base in range(len(tokens) - 1)
        for sweep in range(base + 1, len(tokens))
    ]
