"""First-fit (greedy) line filling.

WHY: The cheapest way to wrap: fill each line as far as it goes. It is
what most tools do, and it is the baseline the optimal wrapper is
measured against and falls back to.

HOW: One left-to-right pass. A word joins the current line while the
line plus the word (and the word's penalty marker, should the line end
there) still fits the row budget; otherwise the line is closed.

RULES:
- An exact fit stays on the current line.
- A word wider than its budget goes alone on its own line.
- The first row uses budgets.first, every later row budgets.rest.
"""

from __future__ import annotations

from typing import List, Sequence

from .fragments import Word
from .lines import Line, LineBudgets


def wrap_first_fit(words: Sequence[Word], budgets: LineBudgets) -> List[Line]:
    """Wrap words into lines, filling each line before starting the next.

    Args:
        words: Measured words of one paragraph.
        budgets: Row budgets (first row, later rows).

    Returns:
        The lines, in order. Empty input gives [].
    """
    lines = []  # type: List[Line]
    start = 0
    width = 0
    for idx, word in enumerate(words):
        budget = budgets.for_line(len(lines))
        if idx > start and width + word.width + word.penalty_width > budget:
            lines.append(Line(tuple(words[start:idx]), budget))
            start = idx
            width = 0
        width += word.width + word.whitespace_width

    if start < len(words):
        lines.append(Line(tuple(words[start:]), budgets.for_line(len(lines))))
    return lines
