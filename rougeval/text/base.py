"""Base classes for text preprocessing engines."""

from abc import ABC, abstractmethod

from ..errors import InvalidInputError


class Tokenizer(ABC):
    """Base class for word tokenizers."""

    @abstractmethod
    def tokenize(self, sentence: str) -> list[str]:
        """Split a single sentence into word and punctuation tokens.

        Args:
            sentence: Input sentence

        Returns:
            Ordered list of non-empty tokens
        """
        pass

    def __call__(self, sentence: str) -> list[str]:
        return self.tokenize(sentence)


class SentenceSegmenter(ABC):
    """Base class for sentence segmenters."""

    @abstractmethod
    def segment(self, document: str) -> list[str]:
        """Split a document into sentences.

        Args:
            document: Input text

        Returns:
            Ordered list of sentences
        """
        pass

    def __call__(self, document: str) -> list[str]:
        return self.segment(document)


def char_is_upper_case(char: str) -> bool:
    """Check whether a single character is an ASCII capital letter.

    Args:
        char: String of length one

    Returns:
        True for A-Z, False otherwise

    Raises:
        InvalidInputError: If the input is not exactly one character
    """
    if len(char) != 1:
        raise InvalidInputError("Input should be a single character")
    return "A" <= char <= "Z"


def str_is_title_case(text: str) -> bool:
    """Check whether a string starts with a capital letter (ignoring surrounding whitespace)."""
    stripped = text.strip()
    if not stripped:
        return False
    return char_is_upper_case(stripped[0])
