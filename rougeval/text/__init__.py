"""Text preprocessing: tokenization and sentence segmentation."""

from .base import SentenceSegmenter, Tokenizer, char_is_upper_case, str_is_title_case
from .segmenter import RuleSegmenter, segment
from .tokenizer import TreebankTokenizer, tokenize

__all__ = [
    "SentenceSegmenter",
    "Tokenizer",
    "RuleSegmenter",
    "TreebankTokenizer",
    "char_is_upper_case",
    "str_is_title_case",
    "segment",
    "tokenize",
]
