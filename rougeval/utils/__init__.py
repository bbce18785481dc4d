"""Sequence primitives and statistical helpers."""

from .sequences import intersection, lcs, n_gram, skip_bigram
from .stats import arithmetic_mean, comb2, f_measure, fact, jackknife

__all__ = [
    "intersection",
    "lcs",
    "n_gram",
    "skip_bigram",
    "arithmetic_mean",
    "comb2",
    "f_measure",
    "fact",
    "jackknife",
]
