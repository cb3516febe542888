"""Line model and the raggedness measure shared by both wrappers.

WHY: Greedy and optimal wrapping produce the same kind of result (rows
of words with a width budget) and are compared with the same cost, so
both live in one place.

HOW: Line is a frozen dataclass over a tuple of Words. Width, slack and
the rendered text are derived on demand. LineBudgets captures the two
budgets a paragraph may have: the first row and every later row.

RULES:
- content_width excludes the last word's trailing whitespace and
  includes its penalty marker (a hyphen added at a split)
- A line may overflow only when it holds a single word
- raggedness() is the sum of squared slack; overflowing single-word
  lines are unavoidable and contribute 0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple

from .fragments import Word


class LineBudgets(NamedTuple):
    """Width budgets for the first row and for all later rows."""

    first: int
    rest: int

    def for_line(self, line_number: int) -> int:
        return self.first if line_number == 0 else self.rest

    @property
    def narrowest(self) -> int:
        return min(self.first, self.rest)


def content_width(words: Sequence[Word]) -> int:
    """Width of words laid out on one row."""
    if not words:
        return 0
    total = sum(w.width + w.whitespace_width for w in words)
    last = words[-1]
    return total - last.whitespace_width + last.penalty_width


@dataclass(frozen=True)
class Line:
    """One output row.

    Attributes:
        words: The words (or word pieces) on this row, in order.
        budget: Width budget of this row, indent already subtracted.
    """

    words: Tuple[Word, ...]
    budget: int

    @property
    def content_width(self) -> int:
        return content_width(self.words)

    @property
    def slack(self) -> int:
        return self.budget - self.content_width

    @property
    def overflows(self) -> bool:
        return self.content_width > self.budget

    @property
    def text(self) -> str:
        """The row content without indent or trailing whitespace."""
        if not self.words:
            return ""
        parts = []
        for word in self.words[:-1]:
            parts.append(word.text)
            parts.append(word.whitespace)
        last = self.words[-1]
        parts.append(last.text)
        parts.append(last.penalty)
        return "".join(parts)

    def __len__(self) -> int:
        return len(self.words)


def line_raggedness(line: Line) -> int:
    if len(line.words) == 1 and line.overflows:
        return 0
    return line.slack * line.slack


def raggedness(lines: Iterable[Line]) -> int:
    """Total squared slack of a wrapped paragraph; lower is more even."""
    return sum(line_raggedness(line) for line in lines)
