"""Tests for the ROUGE metrics."""

import pytest
from pydantic import ValidationError

from rougeval import RougeLConfig, RougeNConfig, RougeSConfig, rouge_l, rouge_n, rouge_s
from rougeval.errors import InvalidInputError


class TestRougeN:
    """Tests for ROUGE-N."""

    CANDIDATE = "pulses may ease schizophrenic voices"
    REFERENCES = [
        "magnetic pulse series sent through brain may ease schizophrenic voices",
        "yale finds magnetic stimulation some relief to schizophrenics imaginary voices",
    ]

    def test_empty_candidate(self):
        with pytest.raises(InvalidInputError):
            rouge_n("", self.REFERENCES[0])

    def test_empty_reference(self):
        with pytest.raises(InvalidInputError):
            rouge_n(self.CANDIDATE, "")

    def test_unigrams(self):
        assert rouge_n(self.CANDIDATE, self.REFERENCES[0]) == pytest.approx(0.4)
        assert rouge_n(self.CANDIDATE, self.REFERENCES[1]) == pytest.approx(0.1)

    def test_bigrams(self):
        assert rouge_n(self.CANDIDATE, self.REFERENCES[0], n=2) == pytest.approx(1 / 3)
        assert rouge_n(self.CANDIDATE, self.REFERENCES[1], n=2) == 0

    def test_config_object(self):
        config = RougeNConfig(n=2)
        assert rouge_n(self.CANDIDATE, self.REFERENCES[0], config) == pytest.approx(1 / 3)

    def test_option_overrides_config(self):
        config = RougeNConfig(n=2)
        assert rouge_n(self.CANDIDATE, self.REFERENCES[0], config, n=1) == pytest.approx(0.4)
        assert config.n == 2

    def test_custom_tokenizer(self):
        assert rouge_n("a b", "a c", tokenizer_fn=str.split) == 0.5

    def test_invalid_n(self):
        with pytest.raises(ValidationError):
            rouge_n(self.CANDIDATE, self.REFERENCES[0], n=0)

    def test_n_larger_than_reference(self):
        with pytest.raises(InvalidInputError):
            rouge_n("one two three", "one two", n=3)


class TestRougeS:
    """Tests for ROUGE-S."""

    REFERENCE = "police killed the gunman"
    CANDIDATES = [
        "police kill the gunman",
        "the gunman kill police",
        "the gunman police killed",
    ]

    def test_empty_candidate(self):
        with pytest.raises(InvalidInputError):
            rouge_s("", self.REFERENCE)

    def test_empty_reference(self):
        with pytest.raises(InvalidInputError):
            rouge_s(self.CANDIDATES[0], "")

    def test_zero_overlap(self):
        assert rouge_s("banana yoghurt", self.REFERENCE) == 0

    @pytest.mark.parametrize(
        "candidate, expected",
        [
            ("police kill the gunman", 1 / 2),
            ("the gunman kill police", 1 / 6),
            ("the gunman police killed", 1 / 3),
        ],
    )
    def test_balanced_f_measure(self, candidate, expected):
        assert rouge_s(candidate, self.REFERENCE, beta=1) == pytest.approx(expected)

    def test_large_beta_returns_recall(self):
        config = RougeSConfig(beta=5)
        assert rouge_s(self.CANDIDATES[0], self.REFERENCE, config) == pytest.approx(0.5)

    def test_single_word_candidate(self):
        with pytest.raises(InvalidInputError):
            rouge_s("police", self.REFERENCE)


class TestRougeL:
    """Tests for summary-level ROUGE-L."""

    REFERENCE = "police killed the gunman"

    def test_empty_candidate(self):
        with pytest.raises(InvalidInputError):
            rouge_l("", self.REFERENCE)

    def test_empty_reference(self):
        with pytest.raises(InvalidInputError):
            rouge_l("police kill the gunman", "")

    @pytest.mark.parametrize(
        "candidate, expected",
        [
            ("police kill the gunman", 3 / 4),
            ("the gunman kill police", 3 / 4),
            ("the gunman police killed", 4 / 4),
        ],
    )
    def test_balanced_f_measure(self, candidate, expected):
        assert rouge_l(candidate, self.REFERENCE, beta=1) == pytest.approx(expected)

    def test_whitespace_only_candidate(self):
        with pytest.raises(InvalidInputError):
            rouge_l("   ", self.REFERENCE)

    def test_two_sentence_candidate(self):
        """LCS elements are pooled over both candidate sentences."""
        candidate = "the cat sat. on the mat."
        # union {the, cat, sat, ., on, mat}: recall 6/7, precision 6/8
        assert rouge_l(candidate, "the cat sat on the red mat.") == pytest.approx(10 / 13)
        assert rouge_l(candidate, "the cat sat on the mat.") == pytest.approx(6 / 7)

    def test_union_larger_than_word_count(self):
        text = "The cat sat. The dog ran."
        with pytest.raises(InvalidInputError, match="exceeds the word count"):
            rouge_l(text, text)

    def test_custom_lcs(self):
        assert rouge_l("a b", "c d", lcs_fn=lambda a, b: []) == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
