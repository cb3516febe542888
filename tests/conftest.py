"""Shared test fixtures for the reflow test suite.

WHY: Several test modules check the same paragraph-level properties
(fit, optimal <= greedy, re-wrap stability) over the same inputs.
Keeping the corpus here means every property runs against identical,
hand-picked text: short and long words, punctuation, wide CJK
characters and an over-long word.

HOW: SAMPLE_PARAGRAPHS and SAMPLE_WIDTHS are plain constants (usable in
pytest.mark.parametrize); make_words() builds measured Words from a
list of strings.

RULES:
- The corpus is fixed: no randomized inputs, results are reproducible.
- Widths include 1 so the single-column edge case is always covered.
"""

from typing import List

import pytest

from reflow.core.fragments import Word, find_words

SAMPLE_PARAGRAPHS: List[str] = [
    "The quick brown fox jumps over the lazy dog.",
    "aaaa bb cc dddd",
    "aaa bb cc ddddd",
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua.",
    "Call me Ishmael. Some years ago, never mind how long precisely, having "
    "little or no money in my purse, and nothing particular to interest me on "
    "shore, I thought I would sail about a little and see the watery part of "
    "the world.",
    "a b c d e f g h i j k l m n o p q r s t u v w x y z",
    "Supercalifragilisticexpialidocious is a rather long word indeed",
    "日本語のテキスト と English words mixed together",
]

SAMPLE_WIDTHS: List[int] = [1, 3, 6, 10, 17, 25, 40, 79]

# Short enough (<= 12 words) for exhaustive partition search.
SMALL_PARAGRAPHS: List[str] = [
    "The quick brown fox jumps over the lazy dog.",
    "aaaa bb cc dddd",
    "aaa bb cc ddddd",
    "a bb ccc dddd eeeee ffff ggg hh i",
    "To be, or not to be, that is the question:",
]


def make_words(texts: List[str]) -> List[Word]:
    """Measured Words for texts, separated by single spaces."""
    return find_words(" ".join(texts))


@pytest.fixture
def sample_paragraphs():
    return list(SAMPLE_PARAGRAPHS)


@pytest.fixture
def fox_words():
    """The four words of "The quick brown fox"."""
    return make_words(["The", "quick", "brown", "fox"])
