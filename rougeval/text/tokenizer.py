"""Penn Treebank style word tokenizer."""

import re

from .base import Tokenizer
from .constants import TREEBANK_CONTRACTIONS

# Applied in order; later rules rely on the padding inserted by earlier ones
PRE_WRAP_RULES = (
    # Opening quote at the start of the sentence
    (re.compile(r'^"'), " `` "),
    # Opening quote after a space or opening bracket
    (re.compile(r'([ (\[{<])"'), r"\1 `` "),
    # Ellipsis of any length becomes exactly three periods
    (re.compile(r"\.\.+"), " ... "),
    (re.compile(r"[;@#$%&]"), r" \g<0> "),
    # Sentence-final period only (plus trailing brackets/quotes)
    (re.compile(r"([^.])(\.)([\]\)}>\"']*)\s*\Z"), r"\1 \2\3 "),
    (re.compile(r"[,?!]"), r" \g<0> "),
    (re.compile(r"[\]\[(){}<>]"), r" \g<0> "),
    (re.compile(r"--+"), " -- "),
)

POST_WRAP_RULES = (
    # Remaining double quotes are closing quotes
    (re.compile(r'"'), " '' "),
    # Closing single quote
    (re.compile(r"([^'])' "), r"\1 ' "),
    # Possessive and 's/'m/'d contractions
    (re.compile(r"'([sSmMdD]) "), r" '\1 "),
    (re.compile(r"('ll|'LL|'re|'RE|'ve|'VE|n't|N'T) "), r" \1 "),
)

MULTI_SPACE_PATTERN = re.compile(r" {2,}")
EDGE_SPACE_PATTERN = re.compile(r"^ | \Z")


class TreebankTokenizer(Tokenizer):
    """Rule-based tokenizer following the Penn Treebank conventions.

    The input is assumed to be a single sentence: only a sentence-final
    period is split off, so abbreviation periods inside the sentence stay
    attached to their word. Run the sentence segmenter first on longer text.
    """

    def tokenize(self, sentence: str) -> list[str]:
        if not sentence:
            return []

        parse = sentence
        for pattern, replacement in PRE_WRAP_RULES:
            parse = pattern.sub(replacement, parse)

        # Pad both ends so the remaining rules can anchor on spaces
        parse = f" {parse} "

        for pattern, replacement in POST_WRAP_RULES:
            parse = pattern.sub(replacement, parse)

        for pattern in TREEBANK_CONTRACTIONS:
            parse = pattern.sub(r" \1 \2 ", parse, count=1)

        parse = MULTI_SPACE_PATTERN.sub(" ", parse)
        parse = EDGE_SPACE_PATTERN.sub("", parse)

        return [token for token in parse.split(" ") if token]


_DEFAULT_TOKENIZER = TreebankTokenizer()


def tokenize(sentence: str) -> list[str]:
    """Tokenize a sentence with the default Treebank tokenizer."""
    return _DEFAULT_TOKENIZER.tokenize(sentence)
