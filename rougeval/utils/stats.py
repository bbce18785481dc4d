"""Statistical helpers: combinatorics, averaging, jackknife and F-measure."""

from functools import lru_cache
from typing import Callable, Sequence

import numpy as np

from ..errors import InvalidInputError


@lru_cache(maxsize=None)
def fact(x: int) -> int:
    """Return x! (memoized, computed iteratively).

    Raises:
        InvalidInputError: If x is negative
    """
    if x < 0:
        raise InvalidInputError("Input must be a positive number")

    acc = 1
    for value in range(2, x + 1):
        acc *= value
    return acc


def comb2(count: int) -> int:
    """Return C(count, 2), the number of unordered pairs among count items.

    Raises:
        InvalidInputError: If count < 2
    """
    if count < 2:
        raise InvalidInputError("Input must be greater than 2")
    return count * (count - 1) // 2


def arithmetic_mean(values: Sequence[float]) -> float:
    """Return the sum of values divided by their count.

    Raises:
        InvalidInputError: If values is empty
    """
    if len(values) < 1:
        raise InvalidInputError("Input array must have at least 1 element")
    return sum(values) / len(values)


def jackknife(
    candidates: Sequence[str],
    reference: str,
    score_fn: Callable[[str, str], float],
    test_fn: Callable[[Sequence[float]], float] = arithmetic_mean,
) -> float:
    """Leave-one-out estimate of a score over several candidates.

    Every candidate is scored against the reference. For each candidate,
    the maximum of the other candidates' scores is taken, and test_fn is
    applied to the collected maxima.

    Args:
        candidates: At least two candidate texts
        reference: Reference text
        score_fn: Scoring function called as score_fn(candidate, reference)
        test_fn: Statistic applied to the leave-one-out maxima

    Returns:
        Value of test_fn over the maxima

    Raises:
        InvalidInputError: If fewer than two candidates are given
    """
    if len(candidates) < 2:
        raise InvalidInputError("Candidate array must contain more than one element")

    scores = np.array([score_fn(candidate, reference) for candidate in candidates])
    maxima = [
        np.max(np.delete(scores, idx)).item() for idx in range(len(scores))
    ]
    return test_fn(maxima)


def f_measure(precision: float, recall: float, beta: float = 0.5) -> float:
    """Weighted harmonic mean of precision and recall.

    For 0 <= beta <= 1 the usual (1 + b^2)rp / (r + b^2 p) is returned.
    DUC evaluations favour precision by using an arbitrarily large beta;
    this is emulated by returning recall unchanged whenever beta > 1.

    Args:
        precision: Value in [0, 1]
        recall: Value in [0, 1]
        beta: Non-negative weight

    Returns:
        F-measure in [0, 1] (0.0 when precision and recall are both 0)

    Raises:
        InvalidInputError: If precision or recall is outside [0, 1] or beta < 0
    """
    if precision < 0 or precision > 1:
        raise InvalidInputError("Precision value p must have bounds 0 <= p <= 1")
    if recall < 0 or recall > 1:
        raise InvalidInputError("Recall value r must have bounds 0 <= r <= 1")

    if beta < 0:
        raise InvalidInputError("beta value must be greater than 0")
    if beta > 1:
        return recall

    denominator = recall + beta * beta * precision
    if denominator == 0:
        return 0.0
    return (1 + beta * beta) * recall * precision / denominator
