"""Rule-based sentence segmenter for English text."""

import logging
import re
from typing import Optional

from .base import SentenceSegmenter, str_is_title_case
from .constants import EXCEPTION_PATTERN, SUBSTITUTION_PATTERN

logger = logging.getLogger(__name__)

# Naive boundary: shortest run ending in a terminal that is followed by
# whitespace, the end of the text or a double quote
NAIVE_SPLIT_PATTERN = re.compile(r'(\S.+?[.?!])(?=\s+|\Z|")')

LINE_BREAK_PATTERN = re.compile(r"[\r\n]")
ACRONYM_PATTERN = re.compile(r"[ |.][A-Z].?\Z", re.IGNORECASE)
ELLIPSIS_PATTERN = re.compile(r"\.\.+\Z")
MULTI_SPACE_PATTERN = re.compile(r" +")


class RuleSegmenter(SentenceSegmenter):
    """Deterministic sentence segmenter.

    The document is first split naively after every terminal (. ? !).
    A single forward pass then walks the chunks and re-joins false
    boundaries: embedded line breaks, known abbreviations, single-letter
    initials and acronyms, and mid-sentence ellipses. Merging is done by
    rewriting the chunk(s) ahead of the cursor, so a merged chunk is
    examined again when the cursor reaches it.
    """

    def __init__(
        self,
        substitution_pattern: re.Pattern = SUBSTITUTION_PATTERN,
        exception_pattern: re.Pattern = EXCEPTION_PATTERN,
    ):
        """Initialize the segmenter.

        Args:
            substitution_pattern: Matches chunks ending in a known abbreviation
            exception_pattern: Matches abbreviations that never end a sentence
        """
        self.substitution_pattern = substitution_pattern
        self.exception_pattern = exception_pattern

    def split_naive(self, document: str) -> list[str]:
        """Split a document after every terminal punctuation run.

        Args:
            document: Input text

        Returns:
            Candidate chunks, including the whitespace between them
        """
        return NAIVE_SPLIT_PATTERN.split(document)

    @staticmethod
    def _chunk_at(chunks: list[str], idx: int) -> Optional[str]:
        """Return the chunk at idx if it exists and is non-empty."""
        if idx < len(chunks) and chunks[idx]:
            return chunks[idx]
        return None

    @staticmethod
    def _join(current: str, following: str, separator: str = " ") -> str:
        return current + separator + MULTI_SPACE_PATTERN.sub(" ", following)

    def segment(self, document: str) -> list[str]:
        if not document:
            return []

        chunks = self.split_naive(document)
        sentences: list[str] = []

        for idx in range(len(chunks)):
            if not chunks[idx]:
                continue

            chunk = chunks[idx].strip(" \t")
            chunks[idx] = chunk
            next_chunk = self._chunk_at(chunks, idx + 1)

            if LINE_BREAK_PATTERN.search(chunk):
                if next_chunk is not None and str_is_title_case(chunk):
                    # Accidental line break inside a sentence
                    chunks[idx + 1] = self._join(chunk.strip(), next_chunk)
                    logger.debug(f"Merged chunk {idx} across line break")
                else:
                    lines = [line.strip() for line in chunk.strip().splitlines()]
                    sentences.extend(line for line in lines if line)
                    logger.debug(f"Split chunk {idx} on line breaks")

            elif next_chunk is not None and self.substitution_pattern.search(chunk):
                if (
                    next_chunk.strip()
                    and str_is_title_case(next_chunk)
                    and not self.exception_pattern.search(chunk)
                ):
                    # Abbreviation followed by a new capitalized sentence
                    sentences.append(chunk)
                else:
                    chunks[idx + 1] = self._join(chunk, next_chunk)
                    logger.debug(f"Merged chunk {idx} after abbreviation")

            elif len(chunk) > 1 and next_chunk is not None and ACRONYM_PATTERN.search(chunk):
                self._resolve_acronym(chunks, idx, sentences)

            elif next_chunk is not None and ELLIPSIS_PATTERN.search(chunk):
                chunks[idx + 1] = self._join(chunk, next_chunk, separator="")
                logger.debug(f"Merged chunk {idx} after ellipsis")

            elif chunk:
                sentences.append(chunk)

        # Nothing recognised as a sentence: treat the whole input as one
        if not sentences:
            return [document]

        return sentences

    def _resolve_acronym(self, chunks: list[str], idx: int, sentences: list[str]) -> None:
        """Decide whether a chunk ending in an initial or acronym is a boundary.

        Args:
            chunks: Mutable chunk buffer
            idx: Cursor position (chunk ending in the initial)
            sentences: Committed sentences, appended to in place
        """
        chunk = chunks[idx]
        words = chunk.split(" ")
        last_word = words[-1]

        if last_word == last_word.lower():
            # Lowercase initial, e.g. "p. 55"
            chunks[idx + 1] = self._join(chunk, chunks[idx + 1])
            logger.debug(f"Merged chunk {idx} after lowercase initial")
            return

        after_next = self._chunk_at(chunks, idx + 2)
        previous_word = words[-2] if len(words) > 1 else ""

        if (
            after_next is not None
            and str_is_title_case(previous_word)
            and str_is_title_case(after_next)
        ):
            # Initial inside a name, e.g. "Albert I. Jones"
            chunks[idx + 2] = (
                chunk + MULTI_SPACE_PATTERN.sub(" ", chunks[idx + 1]) + after_next
            )
            chunks[idx + 1] = ""
            logger.debug(f"Merged chunks {idx}-{idx + 2} around name initial")
        else:
            sentences.append(chunk)


_DEFAULT_SEGMENTER = RuleSegmenter()


def segment(document: str) -> list[str]:
    """Split a document into sentences with the default rule segmenter."""
    return _DEFAULT_SEGMENTER.segment(document)
