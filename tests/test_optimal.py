"""Unit tests for optimal-fit wrapping (reflow.core.optimal).

WHY: The optimal wrapper promises the least raggedness over every way
of breaking the paragraph. That is checked directly: small paragraphs
are small enough to try every partition.

HOW: brute_force() enumerates all 2^(n-1) partitions and keeps the
cheapest one whose lines all fit. Budgets with a narrower and with a
wider first row both go through the SMAWK search; odd marker widths
make the offsets non-monotone and exercise the quadratic search.

RULES:
- Optimal raggedness is never worse than greedy on the same input.
"""

import itertools

import pytest

from reflow.core import optimal as optimal_module
from reflow.core.fragments import Word
from reflow.core.greedy import wrap_first_fit
from reflow.core.lines import Line, LineBudgets, raggedness
from reflow.core.optimal import line_cost, wrap_optimal_fit

from conftest import SAMPLE_PARAGRAPHS, SMALL_PARAGRAPHS, make_words


def texts(lines):
    return [line.text for line in lines]


def brute_force(words, budgets):
    """Lowest raggedness over all partitions whose lines fit their budget."""
    best = None
    n = len(words)
    for cuts in itertools.product([False, True], repeat=n - 1):
        lines, start = [], 0
        for idx, cut in enumerate(cuts, start=1):
            if cut:
                lines.append(Line(tuple(words[start:idx]), budgets.for_line(len(lines))))
                start = idx
        lines.append(Line(tuple(words[start:]), budgets.for_line(len(lines))))
        if any(line.overflows for line in lines):
            continue
        cost = raggedness(lines)
        if best is None or cost < best:
            best = cost
    return best


class TestLineCost:

    def test_fitting_line_is_squared_slack(self):
        assert line_cost(7, 10, 1000) == 9

    def test_exact_fit_costs_nothing(self):
        assert line_cost(10, 10, 1000) == 0

    def test_overflow_pays_penalty(self):
        assert line_cost(12, 10, 1000) == 2 * 1000 + 4


class TestWrapOptimalFit:
    """wrap_optimal_fit() minimizes the total squared slack."""

    def test_empty_input(self):
        assert wrap_optimal_fit([], LineBudgets(10, 10)) == []

    def test_balances_where_greedy_does_not(self):
        words = make_words(["aaa", "bb", "cc", "ddddd"])
        budgets = LineBudgets(6, 6)
        optimal = wrap_optimal_fit(words, budgets)
        greedy = wrap_first_fit(words, budgets)
        assert texts(greedy) == ["aaa bb", "cc", "ddddd"]
        assert texts(optimal) == ["aaa", "bb cc", "ddddd"]
        assert raggedness(greedy) == 17
        assert raggedness(optimal) == 11

    def test_no_worse_than_greedy_when_equal(self):
        words = make_words(["aaaa", "bb", "cc", "dddd"])
        budgets = LineBudgets(6, 6)
        optimal = wrap_optimal_fit(words, budgets)
        assert texts(optimal) == ["aaaa", "bb cc", "dddd"]
        assert raggedness(optimal) <= raggedness(wrap_first_fit(words, budgets))

    def test_everything_on_one_line_when_it_fits(self, fox_words):
        assert texts(wrap_optimal_fit(fox_words, LineBudgets(40, 40))) == ["The quick brown fox"]

    def test_all_words_too_wide(self):
        words = make_words(["abcdef", "ghijkl", "mnopqr"])
        lines = wrap_optimal_fit(words, LineBudgets(4, 4))
        assert texts(lines) == ["abcdef", "ghijkl", "mnopqr"]

    def test_single_overflowing_word_stays_alone(self):
        words = make_words(["a", "verylongword", "b"])
        lines = wrap_optimal_fit(words, LineBudgets(5, 5))
        assert texts(lines) == ["a", "verylongword", "b"]

    def test_first_row_budget_respected(self):
        words = make_words(["aaa", "bbb", "ccc", "ddd"])
        lines = wrap_optimal_fit(words, LineBudgets(5, 10))
        assert [line.budget for line in lines][0] == 5
        assert not any(line.overflows for line in lines)

    def test_penalty_marker_counts(self):
        words = [
            Word("ab", 2, " ", 1),
            Word("cd", 2, penalty="-", penalty_width=1),
            Word("ef", 2),
        ]
        lines = wrap_optimal_fit(words, LineBudgets(6, 6))
        assert not any(line.overflows for line in lines)
        assert [w for line in lines for w in line.words] == words

    def test_is_deterministic(self):
        words = make_words(SAMPLE_PARAGRAPHS[4].split())
        first = wrap_optimal_fit(words, LineBudgets(25, 25))
        second = wrap_optimal_fit(words, LineBudgets(25, 25))
        assert texts(first) == texts(second)

    @pytest.mark.parametrize("paragraph", SMALL_PARAGRAPHS)
    def test_minimum_with_narrow_first_row(self, paragraph):
        words = make_words(paragraph.split())
        budgets = LineBudgets(4, 10)
        lines = wrap_optimal_fit(words, budgets)
        assert raggedness(lines) == brute_force(words, budgets)

    @pytest.mark.parametrize("paragraph", SMALL_PARAGRAPHS[:4])
    def test_minimum_with_wide_first_row(self, paragraph):
        words = make_words(paragraph.split())
        budgets = LineBudgets(12, 6)
        lines = wrap_optimal_fit(words, budgets)
        assert raggedness(lines) == brute_force(words, budgets)

    @pytest.mark.parametrize("width", [6, 10, 17, 25, 40, 79])
    @pytest.mark.parametrize("paragraph", SAMPLE_PARAGRAPHS)
    def test_never_worse_than_greedy(self, paragraph, width):
        words = make_words(paragraph.split())
        budgets = LineBudgets(width, width)
        optimal = wrap_optimal_fit(words, budgets)
        greedy = wrap_first_fit(words, budgets)
        assert [w for line in optimal for w in line.words] == words
        if not any(len(line) > 1 and line.overflows for line in greedy):
            assert raggedness(optimal) <= raggedness(greedy)

    def test_non_monotone_offsets_still_optimal(self):
        # A long marker on "ab" ends it past the end of "c".
        words = [
            Word("ab", 2, penalty="---", penalty_width=3),
            Word("c", 1, " ", 1),
            Word("de", 2),
        ]
        budgets = LineBudgets(6, 6)
        lines = wrap_optimal_fit(words, budgets)
        assert raggedness(lines) == brute_force(words, budgets)


def reference_cost(words, budgets):
    """Quadratic DP over every predecessor, first row costed on its own budget."""
    best = [0]
    for j in range(1, len(words) + 1):
        candidates = []
        for i in range(j):
            line = Line(tuple(words[i:j]), budgets.first if i == 0 else budgets.rest)
            if line.overflows:
                continue
            candidates.append(best[i] + raggedness([line]))
        best.append(min(candidates) if candidates else float("inf"))
    return best[-1]


class TestHangingIndent:
    """A first row wider than the rest (hanging indent) stays on the fast path."""

    @staticmethod
    def hanging_words(count):
        tokens = ["a"] + ["word{}".format(i % 7 * "x") for i in range(count - 1)]
        return make_words(tokens)

    def test_cost_evaluations_stay_linear(self, monkeypatch):
        calls = []
        original = optimal_module.line_cost

        def counting(width, budget, overflow_penalty):
            calls.append(1)
            return original(width, budget, overflow_penalty)

        monkeypatch.setattr(optimal_module, "line_cost", counting)
        count = 2000
        lines = wrap_optimal_fit(self.hanging_words(count), LineBudgets(60, 52))
        assert lines
        # A quadratic search would need about count * count / 2 evaluations.
        assert len(calls) < 100 * count

    @pytest.mark.parametrize("budgets", [LineBudgets(60, 52), LineBudgets(30, 12), LineBudgets(12, 30)])
    def test_matches_quadratic_search(self, budgets):
        words = self.hanging_words(150)
        lines = wrap_optimal_fit(words, budgets)
        assert not any(line.overflows for line in lines)
        assert raggedness(lines) == reference_cost(words, budgets)

    def test_first_line_uses_wide_budget(self):
        words = make_words(["a", "bb", "cc", "dd"])
        lines = wrap_optimal_fit(words, LineBudgets(10, 2))
        assert texts(lines) == ["a bb cc dd"]
        assert lines[0].budget == 10
