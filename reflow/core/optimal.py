"""Optimal-fit line breaking: minimum total raggedness for a paragraph.

WHY: Greedy wrapping decides each line in isolation and can leave a
short line followed by a long one. Treating the whole paragraph at once
(as typesetting systems do) gives lines of even length.

HOW: Shortest-path DP over word positions. D[j] is the minimum cost of
wrapping words[0:j]; D[j] = min over i < j of D[i] + cost(i, j), where
cost is the squared slack of a line made of words[i:j]. Lines starting
after word 0 are all measured against budgets.rest, with widths written
as end(j) - start(i); one convex cost of that difference makes the
matrix of rows >= 1 Monge, and online_column_minima() finds their
column minima in linear time. The first line (row 0) has its own
budget, so its cost is computed directly and merged into each D[j] as
a baseline. When the offsets are not monotone (odd marker widths), the
plain quadratic DP runs instead.

RULES:
- A line that fits costs (budget - width)^2.
- An overflowing line pays a convex surcharge larger than the
  raggedness of any fitting layout, so it acts as infinity while
  keeping the matrix Monge.
- Ties go to the smallest predecessor index (deterministic output).
- If every word is wider than any row, one word per line, no DP.
- Falls back to wrap_first_fit() if the result would contain an
  overflowing multi-word line.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Tuple

from .fragments import Word
from .greedy import wrap_first_fit
from .lines import Line, LineBudgets
from .smawk import online_column_minima

logger = logging.getLogger(__name__)

CostFn = Callable[[int, int], int]


def line_cost(width: int, budget: int, overflow_penalty: int) -> int:
    """Cost of one line of the given width: squared slack, or overflow surcharge."""
    slack = budget - width
    if slack >= 0:
        return slack * slack
    excess = -slack
    return overflow_penalty * excess + excess * excess


def _offsets(words: Sequence[Word]) -> Tuple[List[int], List[int]]:
    starts = [0] * len(words)
    ends = [0] * (len(words) + 1)
    pos = 0
    for idx, word in enumerate(words):
        starts[idx] = pos
        ends[idx + 1] = pos + word.width + word.penalty_width
        pos += word.width + word.whitespace_width
    return starts, ends


def _is_monotone(starts: List[int], ends: List[int]) -> bool:
    # Row 0 is costed separately, so only rows >= 1 need monotone starts.
    if any(a > b for a, b in zip(starts[1:], starts[2:])):
        return False
    return not any(a > b for a, b in zip(ends[1:], ends[2:]))


def _naive_minima(size: int, cost: CostFn) -> List[Tuple[int, int]]:
    minima = [(0, 0)]
    for j in range(1, size):
        best_row, best = 0, cost(0, j)
        for i in range(1, j):
            value = minima[i][1] + cost(i, j)
            if value < best:
                best_row, best = i, value
        minima.append((best_row, best))
    return minima


def _smawk_minima(size: int, cost: CostFn) -> List[Tuple[int, int]]:
    # Online search over rows >= 1, indices shifted down by one. Row 0 (the
    # first line) is not Monge-compatible with the others when the first
    # budget is wider, so it enters only through D[i] = min(row 0, found).
    def lookup(found: List[Tuple[int, int]], i: int, j: int) -> int:
        return min(found[i][1], cost(0, i + 1)) + cost(i + 1, j + 1)

    found = online_column_minima(cost(0, 1), size - 1, lookup)

    minima = [(0, 0), (0, cost(0, 1))]
    for j in range(2, size):
        row, value = found[j - 1]
        first = cost(0, j)
        if first <= value:
            minima.append((0, first))
        else:
            minima.append((row + 1, value))
    return minima


def _build_lines(words: Sequence[Word], budgets: LineBudgets, minima: List[Tuple[int, int]]) -> List[Line]:
    spans = []
    j = len(words)
    while j > 0:
        i = minima[j][0]
        spans.append((i, j))
        j = i
    spans.reverse()
    return [
        Line(tuple(words[i:j]), budgets.for_line(number))
        for number, (i, j) in enumerate(spans)
    ]


def wrap_optimal_fit(words: Sequence[Word], budgets: LineBudgets) -> List[Line]:
    """Wrap words into lines minimizing the total squared slack.

    Args:
        words: Measured words of one paragraph.
        budgets: Row budgets (first row, later rows).

    Returns:
        The lines, in order. Empty input gives [].
    """
    if not words:
        return []

    widest = max(budgets.first, budgets.rest)
    if all(word.width + word.penalty_width > widest for word in words):
        return [
            Line((word,), budgets.for_line(number))
            for number, word in enumerate(words)
        ]

    starts, ends = _offsets(words)
    overflow_penalty = len(words) * max(widest, 1) ** 2 + 1

    def cost(i: int, j: int) -> int:
        if i == 0:
            return line_cost(ends[j], budgets.first, overflow_penalty)
        return line_cost(ends[j] - starts[i], budgets.rest, overflow_penalty)

    size = len(words) + 1
    if _is_monotone(starts, ends):
        minima = _smawk_minima(size, cost)
    else:
        logger.debug("Offsets not monotone for %d words; using quadratic search", len(words))
        minima = _naive_minima(size, cost)

    lines = _build_lines(words, budgets, minima)
    if any(len(line) > 1 and line.overflows for line in lines):
        logger.debug("No feasible optimal layout for %d words; falling back to first fit", len(words))
        return wrap_first_fit(words, budgets)
    return lines
