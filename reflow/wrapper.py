"""Wrap orchestrator: the public wrap() / fill() entry points.

WHY: Callers hand over text and options and want finished lines back.
This module drives the engine (tokenize, pick a wrapper, wrap) and turns
its Line objects into indented strings, so the core never deals with
indentation or line terminators.

HOW: The text is cut into physical lines; each non-blank one is
tokenized and wrapped on its own with the selected algorithm. Only the
very first output row gets the initial budget and indent. wrap() renders
the lines, fill() joins them.

RULES:
- Empty or all-whitespace text gives no lines.
- A blank input line gives an empty output line (indent stripped).
- width <= 0 places one word per line; nothing is split.
- Output lines carry no trailing whitespace and no terminator.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from reflow.core.fragments import Word, tokenize
from reflow.core.greedy import wrap_first_fit
from reflow.core.lines import Line, LineBudgets
from reflow.core.optimal import wrap_optimal_fit
from reflow.options import WrapAlgorithm, WrapOptions

logger = logging.getLogger(__name__)

WRAPPERS: Dict[WrapAlgorithm, Callable[[Sequence[Word], LineBudgets], List[Line]]] = {
    WrapAlgorithm.GREEDY: wrap_first_fit,
    WrapAlgorithm.OPTIMAL_FIT: wrap_optimal_fit,
}

OptionsArg = Union[None, int, WrapOptions]


def _coerce_options(options: OptionsArg, overrides: Dict[str, Any]) -> WrapOptions:
    if isinstance(options, WrapOptions):
        return options.replace(**overrides) if overrides else options
    if options is None:
        return WrapOptions(**overrides)
    return WrapOptions(width=options, **overrides)


def wrap_lines(text: str, options: WrapOptions) -> List[Line]:
    """Wrap text into Line objects, without rendering.

    Args:
        text: Input text; line terminators separate paragraphs.
        options: Wrap configuration.

    Returns:
        One Line per output row. Each Line's budget is its row's width
        minus indent.

    Raises:
        SplitterContractError: If the configured splitter misbehaves.
    """
    if not text.strip():
        return []

    budgets = options.line_budgets()
    wrapper = WRAPPERS[options.wrap_algorithm]
    lines = []  # type: List[Line]

    for paragraph in text.splitlines():
        row_budgets = budgets if not lines else LineBudgets(budgets.rest, budgets.rest)
        if options.one_word_per_line:
            words = tokenize(paragraph, options, 0)
        else:
            # Split against the narrowest row, first row included, so every
            # piece fits wherever the wrapper places it.
            words = tokenize(paragraph, options, row_budgets.narrowest)

        if not words:
            lines.append(Line((), row_budgets.first))
        elif options.one_word_per_line:
            lines.extend(
                Line((word,), row_budgets.for_line(number))
                for number, word in enumerate(words)
            )
        else:
            lines.extend(wrapper(words, row_budgets))

    logger.debug(
        "Wrapped %d chars into %d lines (%s, width %d)",
        len(text), len(lines), options.wrap_algorithm.value, options.width,
    )
    return lines


def render_lines(lines: Sequence[Line], options: WrapOptions) -> List[str]:
    """Prefix each Line with its indent and return the strings."""
    rendered = []
    for number, line in enumerate(lines):
        prefix = options.initial_indent if number == 0 else options.subsequent_indent
        if line.words:
            rendered.append(prefix + line.text)
        else:
            rendered.append(prefix.rstrip())
    return rendered


def wrap(text: str, options: OptionsArg = None, **kwargs: Any) -> List[str]:
    """Wrap text into indented lines.

    Args:
        text: Text to wrap.
        options: A WrapOptions, a bare width, or None (then width must be
            passed as a keyword).
        **kwargs: WrapOptions fields overriding those in options.

    Returns:
        The output lines, indent included, without terminators.

    Example:
        >>> wrap("The quick brown fox", 10, wrap_algorithm="greedy")
        ['The quick', 'brown fox']
    """
    opts = _coerce_options(options, kwargs)
    return render_lines(wrap_lines(text, opts), opts)


def fill(text: str, options: OptionsArg = None, linesep: str = "\n", **kwargs: Any) -> str:
    """Wrap text and join the lines with linesep (pass os.linesep for the platform's)."""
    return linesep.join(wrap(text, options, **kwargs))


def indent(text: str, prefix: str) -> str:
    """Add prefix to every line of text that is not blank.

    Line terminators are preserved; whitespace-only lines are left
    unchanged so no trailing whitespace is introduced.
    """
    result = []
    for line in text.splitlines(keepends=True):
        if line.strip():
            result.append(prefix + line)
        else:
            result.append(line)
    return "".join(result)


def dedent(text: str) -> str:
    """Remove the longest whitespace prefix shared by all non-blank lines.

    RULES:
    - Whitespace-only lines do not count towards the common prefix and
      are reduced to their line terminator.
    - Tabs and spaces are compared literally ("\\t" does not match "    ").
    """
    lines = text.splitlines(keepends=True)
    prefix = None  # type: Optional[str]
    for line in lines:
        if not line.strip():
            continue
        lead = line[:len(line) - len(line.lstrip())]
        prefix = lead if prefix is None else os.path.commonprefix([prefix, lead])

    result = []
    for line in lines:
        if not line.strip():
            result.append(line[len(line.rstrip("\r\n")):])
        else:
            result.append(line[len(prefix or ""):])
    return "".join(result)
