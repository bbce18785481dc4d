"""Rougeval - ROUGE summary evaluation with rule-based preprocessing."""

__version__ = "0.1.0"

from .config import EvaluationConfig, RougeLConfig, RougeNConfig, RougeSConfig
from .errors import InvalidInputError
from .metrics import rouge_l, rouge_n, rouge_s
from .models import PadOptions
from .pipeline import EvaluationPipeline, run_pipeline
from .text import (
    RuleSegmenter,
    TreebankTokenizer,
    char_is_upper_case,
    segment,
    str_is_title_case,
    tokenize,
)
from .utils import (
    arithmetic_mean,
    comb2,
    f_measure,
    fact,
    intersection,
    jackknife,
    lcs,
    n_gram,
    skip_bigram,
)

__all__ = [
    "EvaluationConfig",
    "RougeLConfig",
    "RougeNConfig",
    "RougeSConfig",
    "InvalidInputError",
    "rouge_l",
    "rouge_n",
    "rouge_s",
    "PadOptions",
    "EvaluationPipeline",
    "run_pipeline",
    "RuleSegmenter",
    "TreebankTokenizer",
    "char_is_upper_case",
    "segment",
    "str_is_title_case",
    "tokenize",
    "arithmetic_mean",
    "comb2",
    "f_measure",
    "fact",
    "intersection",
    "jackknife",
    "lcs",
    "n_gram",
    "skip_bigram",
]
