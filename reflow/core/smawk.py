"""Column minima of totally monotone matrices (SMAWK and its online form).

WHY: Optimal line breaking is a shortest-path DP whose cost matrix is
Monge (line cost is convex in line width). For such matrices the row
index of each column minimum never decreases from left to right, so the
minima can be found without evaluating every cell: O(n) lookups
instead of O(n^2).

HOW: smawk_column_minima() is the offline SMAWK algorithm: a stack-based
REDUCE pass keeps at most one candidate row per column, a recursive call
solves the odd columns, and an INTERPOLATE pass fills the even columns
by scanning only between the neighbours' minima. online_column_minima()
wraps it for the DP case, where a cell (i, j) can only be evaluated once
the minimum of column i is final (Galil-Park / Eppstein).

RULES:
- Matrices are never materialized; cells come from a lookup callable.
- Ties go to the smallest row index, so results are reproducible.
- The lookup must describe a totally monotone matrix; otherwise the
  results are undefined (callers check this before using it).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence, Tuple


def smawk_column_minima(
    rows: Sequence[int],
    cols: Sequence[int],
    lookup: Callable[[int, int], Any],
) -> Dict[int, int]:
    """Find the row holding the minimum of every column.

    Args:
        rows: Row indices, in increasing order.
        cols: Column indices, in increasing order.
        lookup: lookup(row, col) returns the cell value.

    Returns:
        Dict mapping each column index to the row index of its minimum.
    """
    minima = {}  # type: Dict[int, int]
    _column_minima(list(rows), list(cols), lookup, minima)
    return minima


def _column_minima(
    rows: List[int],
    cols: List[int],
    lookup: Callable[[int, int], Any],
    minima: Dict[int, int],
) -> None:
    if not cols:
        return

    # REDUCE: the row at stack position k survives only if it can still
    # hold the minimum of column k or a later one.
    stack = []  # type: List[int]
    for row in rows:
        while stack:
            col = cols[len(stack) - 1]
            if lookup(stack[-1], col) <= lookup(row, col):
                break
            stack.pop()
        if len(stack) < len(cols):
            stack.append(row)

    _column_minima(stack, cols[1::2], lookup, minima)

    # INTERPOLATE: each even column's minimum lies between the minima of
    # its odd neighbours.
    r = 0
    for c in range(0, len(cols), 2):
        col = cols[c]
        last = stack[-1] if c + 1 == len(cols) else minima[cols[c + 1]]
        best_row = stack[r]
        best = lookup(best_row, col)
        while stack[r] != last:
            r += 1
            value = lookup(stack[r], col)
            if value < best:
                best, best_row = value, stack[r]
        minima[col] = best_row


def online_column_minima(
    initial: Any,
    size: int,
    lookup: Callable[[List[Tuple[int, Any]], int, int], Any],
) -> List[Tuple[int, Any]]:
    """Column minima of an upper-triangular matrix built column by column.

    WHY: In the line-breaking DP, cell (i, j) is D[i] + cost(i, j), so a
    row can only be evaluated once the minimum of the same-numbered
    column is known. Offline SMAWK cannot be applied directly.

    HOW: Keeps a "finished" prefix of columns whose minima are final, a
    "base" row below which no row can supply a later minimum, and a
    "tentative" frontier computed by SMAWK over the largest square
    submatrix that fits under the base. Four cases advance finished by
    one column each step; the total work stays linear.

    RULES:
    - Only cells with i < j are evaluated.
    - lookup receives the minima list; entries up to the finished column
      are final when it is called.

    Args:
        initial: Value of column 0 (D[0]).
        size: Number of columns (n + 1 for n words).
        lookup: lookup(minima, i, j) returns the value of cell (i, j).

    Returns:
        List of (row, value) per column; column 0 is (0, initial).
    """
    minima = [(0, initial)]  # type: List[Tuple[int, Any]]
    finished = base = tentative = 0

    def cell(i: int, j: int) -> Any:
        return lookup(minima, i, j)

    while finished < size - 1:
        i = finished + 1

        # Past the old frontier: run SMAWK on the next square submatrix.
        if i > tentative:
            rows = list(range(base, finished + 1))
            tentative = min(finished + len(rows), size - 1)
            cols = list(range(finished + 1, tentative + 1))
            found = smawk_column_minima(rows, cols, cell)
            for col in cols:
                row = found[col]
                value = cell(row, col)
                if col >= len(minima):
                    minima.append((row, value))
                elif value < minima[col][1]:
                    minima[col] = (row, value)
            finished = i
            continue

        # New minimum on the diagonal: older rows cannot win again.
        diag = cell(i - 1, i)
        if diag < minima[i][1]:
            minima[i] = (i - 1, diag)
            base = i - 1
            tentative = finished = i
            continue

        # Row i-1 supplies no minimum up to the frontier.
        if cell(i - 1, tentative) >= minima[tentative][1]:
            finished = i
            continue

        # Row i-1 beats the frontier: rows before it are done for good.
        base = i - 1
        tentative = finished = i

    return minima
