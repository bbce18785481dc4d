"""ROUGE-N, ROUGE-S and ROUGE-L metrics.

Implements the recall-oriented measures of Lin (2004), "ROUGE: A Package
for Automatic Evaluation of Summaries", on top of the Treebank tokenizer
and the rule-based sentence segmenter. Every metric takes an optional
config plus keyword overrides, e.g. ``rouge_n(cand, ref, n=2)``.
"""

from typing import Any, Optional

from .config import RougeLConfig, RougeNConfig, RougeSConfig, merge_options
from .errors import InvalidInputError
from .utils import f_measure, intersection


def _check_inputs(candidate: str, reference: str) -> None:
    if len(candidate) == 0:
        raise InvalidInputError("Candidate cannot be an empty string")
    if len(reference) == 0:
        raise InvalidInputError("Reference cannot be an empty string")


def rouge_n(
    candidate: str,
    reference: str,
    config: Optional[RougeNConfig] = None,
    **options: Any,
) -> float:
    """Compute ROUGE-N: the share of reference n-grams found in the candidate.

    Args:
        candidate: Candidate summary
        reference: Reference summary
        config: Optional RougeNConfig
        **options: Overrides for RougeNConfig fields (n, ngram_fn, tokenizer_fn)

    Returns:
        Distinct matching n-grams divided by the number of reference n-grams

    Raises:
        InvalidInputError: On empty input or too few tokens for n
    """
    _check_inputs(candidate, reference)
    config = merge_options(RougeNConfig, config, **options)

    candidate_grams = config.ngram_fn(config.tokenizer_fn(candidate), config.n)
    reference_grams = config.ngram_fn(config.tokenizer_fn(reference), config.n)

    match = intersection(candidate_grams, reference_grams)
    return len(match) / len(reference_grams)


def rouge_s(
    candidate: str,
    reference: str,
    config: Optional[RougeSConfig] = None,
    **options: Any,
) -> float:
    """Compute ROUGE-S: F-measure of skip-bigram co-occurrence.

    Returns exactly 0 when no skip-bigram is shared.

    Args:
        candidate: Candidate summary
        reference: Reference summary
        config: Optional RougeSConfig
        **options: Overrides for RougeSConfig fields (beta, skip_bigram_fn, tokenizer_fn)

    Raises:
        InvalidInputError: On empty input or fewer than two tokens
    """
    _check_inputs(candidate, reference)
    config = merge_options(RougeSConfig, config, **options)

    candidate_grams = config.skip_bigram_fn(config.tokenizer_fn(candidate))
    reference_grams = config.skip_bigram_fn(config.tokenizer_fn(reference))

    skip2 = len(intersection(candidate_grams, reference_grams))
    if skip2 == 0:
        return 0.0

    recall = skip2 / len(reference_grams)
    precision = skip2 / len(candidate_grams)
    return f_measure(precision, recall, config.beta)


def rouge_l(
    candidate: str,
    reference: str,
    config: Optional[RougeLConfig] = None,
    **options: Any,
) -> float:
    """Compute summary-level ROUGE-L using the union LCS.

    For every reference sentence, the LCS elements against each candidate
    sentence are pooled into a set; the set sizes are summed over the
    reference sentences. Recall is normalised by the candidate word count
    and precision by the reference word count.

    Args:
        candidate: Candidate summary
        reference: Reference summary
        config: Optional RougeLConfig
        **options: Overrides for RougeLConfig fields
            (beta, lcs_fn, segmenter_fn, tokenizer_fn)

    Raises:
        InvalidInputError: On empty input, or when the union LCS count
            exceeds either word count
    """
    _check_inputs(candidate, reference)
    config = merge_options(RougeLConfig, config, **options)

    candidate_sentences = [
        config.tokenizer_fn(sentence) for sentence in config.segmenter_fn(candidate)
    ]
    reference_sentences = config.segmenter_fn(reference)

    candidate_words = config.tokenizer_fn(candidate)
    reference_words = config.tokenizer_fn(reference)
    if not candidate_words or not reference_words:
        raise InvalidInputError("Candidate and reference must contain at least one token")

    lcs_sum = 0
    for sentence in reference_sentences:
        reference_tokens = config.tokenizer_fn(sentence)
        lcs_union = set()
        for candidate_tokens in candidate_sentences:
            lcs_union.update(config.lcs_fn(candidate_tokens, reference_tokens))
        lcs_sum += len(lcs_union)

    # Per-sentence tokens split off each final period; whole-text tokens only the last
    if lcs_sum > len(candidate_words) or lcs_sum > len(reference_words):
        raise InvalidInputError(
            f"Union LCS count ({lcs_sum}) exceeds the word count of the candidate "
            f"({len(candidate_words)}) or reference ({len(reference_words)})"
        )

    recall = lcs_sum / len(candidate_words)
    precision = lcs_sum / len(reference_words)
    return f_measure(precision, recall, config.beta)
