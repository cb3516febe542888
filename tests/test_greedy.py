"""Unit tests for first-fit wrapping (reflow.core.greedy) and the line model.

WHY: Greedy wrapping is the baseline and the fallback of the optimal
wrapper; an off-by-one in the fit check shows up as lines one column
too long or too short.
"""

from reflow.core.fragments import Word
from reflow.core.greedy import wrap_first_fit
from reflow.core.lines import Line, LineBudgets, content_width, line_raggedness, raggedness

from conftest import make_words


def texts(lines):
    return [line.text for line in lines]


class TestWrapFirstFit:
    """wrap_first_fit() fills each line as far as it goes."""

    def test_quick_brown_fox(self, fox_words):
        lines = wrap_first_fit(fox_words, LineBudgets(10, 10))
        assert texts(lines) == ["The quick", "brown fox"]

    def test_exact_fit_stays_on_line(self):
        lines = wrap_first_fit(make_words(["aaa", "bbb"]), LineBudgets(7, 7))
        assert texts(lines) == ["aaa bbb"]

    def test_one_column_short_breaks(self):
        lines = wrap_first_fit(make_words(["aaa", "bbb"]), LineBudgets(6, 6))
        assert texts(lines) == ["aaa", "bbb"]

    def test_wide_word_goes_alone(self):
        lines = wrap_first_fit(make_words(["a", "verylongword", "b"]), LineBudgets(5, 5))
        assert texts(lines) == ["a", "verylongword", "b"]
        assert lines[1].overflows
        assert not lines[0].overflows

    def test_first_row_has_own_budget(self):
        lines = wrap_first_fit(make_words(["aaa", "bbb", "ccc", "ddd"]), LineBudgets(5, 10))
        assert texts(lines) == ["aaa", "bbb ccc", "ddd"]
        assert [line.budget for line in lines] == [5, 10, 10]

    def test_penalty_counts_when_line_ends(self):
        words = [
            Word("ab", 2, " ", 1),
            Word("cd", 2, penalty="-", penalty_width=1),
            Word("ef", 2),
        ]
        lines = wrap_first_fit(words, LineBudgets(6, 6))
        assert texts(lines) == ["ab cd-", "ef"]

    def test_penalty_pushes_word_to_next_line(self):
        words = [
            Word("ab", 2, " ", 1),
            Word("cde", 3, penalty="-", penalty_width=1),
            Word("f", 1),
        ]
        lines = wrap_first_fit(words, LineBudgets(6, 6))
        assert texts(lines) == ["ab", "cdef"]

    def test_empty_input(self):
        assert wrap_first_fit([], LineBudgets(10, 10)) == []

    def test_every_word_appears_once_in_order(self, sample_paragraphs):
        for paragraph in sample_paragraphs:
            words = make_words(paragraph.split())
            lines = wrap_first_fit(words, LineBudgets(12, 12))
            assert [w for line in lines for w in line.words] == words


class TestLineModel:
    """Line width, slack and raggedness."""

    def test_content_width_excludes_trailing_whitespace(self):
        words = make_words(["ab", "cd"])
        assert content_width(words) == 5

    def test_content_width_includes_last_penalty(self):
        words = (Word("ab", 2, " ", 1), Word("cd", 2, penalty="-", penalty_width=1))
        assert content_width(words) == 6

    def test_slack(self):
        line = Line(tuple(make_words(["ab", "cd"])), 8)
        assert line.slack == 3
        assert line_raggedness(line) == 9

    def test_single_word_overflow_costs_nothing(self):
        line = Line((Word("toolong", 7),), 4)
        assert line.overflows
        assert line_raggedness(line) == 0

    def test_raggedness_sums_squares(self):
        lines = [Line((Word("aaa", 3),), 6), Line((Word("bb", 2),), 6)]
        assert raggedness(lines) == 9 + 16

    def test_empty_line_text(self):
        assert Line((), 10).text == ""

    def test_budgets_for_line(self):
        budgets = LineBudgets(4, 9)
        assert budgets.for_line(0) == 4
        assert budgets.for_line(3) == 9
        assert budgets.narrowest == 4
