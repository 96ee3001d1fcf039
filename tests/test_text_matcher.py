"""Tests for whole-word literal term matching."""
import pytest

from careertools.services.text_matcher import count_matches, find_first, round_half_up


class TestCountMatches:
    def test_single_letter_term_matches_whole_word_only(self):
        assert count_matches("I use R and Python", "R") == 1
        assert count_matches("I use Rust", "R") == 0

    def test_metacharacters_are_literal(self):
        assert count_matches("Skilled in C++ and C#", "C++") == 1
        assert count_matches("Skilled in C and C#", "C++") == 0
        assert count_matches("Built Node.js services", "Node.js") == 1
        assert count_matches("Built Nodexjs services", "Node.js") == 0

    def test_term_at_end_of_text(self):
        assert count_matches("Expert in C++", "C++") == 1

    def test_case_insensitive(self):
        assert count_matches("PYTHON, python and Python", "Python") == 3

    def test_multi_word_phrase(self):
        assert count_matches("Applied machine learning daily", "Machine Learning") == 1
        assert count_matches("Machine-learning", "Machine Learning") == 0

    def test_slash_terms(self):
        assert count_matches("Ran A/B testing and CI/CD pipelines", "A/B Testing") == 1
        assert count_matches("Ran A/B testing and CI/CD pipelines", "CI/CD") == 1

    def test_prefix_of_longer_word_does_not_match(self):
        assert count_matches("JavaScript developer", "Java") == 0
        assert count_matches("Transformers library", "Transformer") == 0

    def test_punctuation_boundaries(self):
        assert count_matches("Python, SQL.", "SQL") == 1
        assert count_matches("(AWS)", "AWS") == 1

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text(self, text):
        assert count_matches(text, "Python") == 0


class TestFindFirst:
    def test_returns_offset_of_first_match(self):
        assert find_first("We use k8s and K8s", "k8s") == 7

    def test_returns_none_when_absent(self):
        assert find_first("Rust only", "R") is None


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4) == 2
    assert round_half_up(-2.5) == -2
