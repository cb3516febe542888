"""Fragment model: the words a line is built from.

WHY: Both wrapping algorithms work on a flat sequence of measured
fragments, never on raw strings. Measuring once up front (display width,
whitespace width, marker width) keeps the wrappers simple and lets the
measurement policy (wide CJK characters, combining marks) live in one
place.

HOW: find_words() cuts a paragraph into Words at whitespace runs.
tokenize() asks the configured splitter for break candidates and
pre-splits any word wider than the line budget, either at those
candidates or, failing that, at code-point granularity.

RULES:
- Word text is never modified: no case changes, no normalization.
- Only ASCII whitespace separates words; a no-break space glues them.
- With collapse_whitespace a gap renders as a single space. Otherwise the
  run is kept, with tabs expanded to spaces (8-column stops counted from
  the start of the gap) and other whitespace shown as one space, so the
  rendered gap is exactly as wide as it is measured.
- Joining the text of the pieces of a split word gives back the word.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from wcwidth import wcswidth, wcwidth

from .splitters import BreakCandidate, validate_candidates

if TYPE_CHECKING:
    from reflow.options import WrapOptions

logger = logging.getLogger(__name__)

WidthFn = Callable[[str], int]

_WORD_RE = re.compile(r"([^ \t\n\r\f\v]+)([ \t\n\r\f\v]*)")
_OTHER_SPACE_RE = re.compile(r"[\n\r\f\v]")

TAB_SIZE = 8


def display_width(text: str) -> int:
    """Return the number of terminal columns text occupies.

    Wide East Asian characters count as 2, combining marks as 0.
    Control characters, which wcwidth reports as -1, count as 0.
    """
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(ch), 0) for ch in text)


@dataclass(frozen=True)
class Word:
    """A run of non-whitespace text plus the whitespace after it.

    Attributes:
        text: The visible content, verbatim from the input.
        width: Display width of text.
        whitespace: Gap rendered after text when another word follows
            on the same line.
        whitespace_width: Width of that gap.
        penalty: Marker rendered when a line ends right after this
            fragment ("-" after a dictionary hyphenation point).
        penalty_width: Width of the marker.
        breaks: Interior break candidates reported by the splitter.
        may_overflow: True if the word is wider than the budget and was
            left whole.
    """

    text: str
    width: int
    whitespace: str = ""
    whitespace_width: int = 0
    penalty: str = ""
    penalty_width: int = 0
    breaks: Tuple[BreakCandidate, ...] = ()
    may_overflow: bool = False

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("Word width must be >= 0, got {} for {!r}".format(self.width, self.text))

    @property
    def splittable(self) -> bool:
        return bool(self.breaks)


def find_words(
    text: str,
    width_fn: WidthFn = display_width,
    collapse_whitespace: bool = True,
) -> List[Word]:
    """Cut one paragraph into Words at whitespace runs.

    Leading whitespace is dropped. Trailing whitespace stays on the last
    word and is never rendered, since nothing follows it on its line.
    """
    words = []
    for match in _WORD_RE.finditer(text):
        body, gap = match.groups()
        if collapse_whitespace:
            gap = " " if gap else ""
        else:
            gap = _OTHER_SPACE_RE.sub(" ", gap.expandtabs(TAB_SIZE))
        words.append(Word(
            text=body,
            width=width_fn(body),
            whitespace=gap,
            whitespace_width=len(gap),
        ))
    return words


def _furthest_fitting(
    text: str, start: int, breaks: Tuple[BreakCandidate, ...], budget: int, width_fn: WidthFn
) -> Optional[BreakCandidate]:
    best = None
    for candidate in breaks:
        if candidate.position <= start:
            continue
        if width_fn(text[start:candidate.position]) + candidate.marker_width <= budget:
            best = candidate
    return best


def _forced_end(text: str, start: int, budget: int, width_fn: WidthFn) -> int:
    # At least one code point per chunk, even if it alone is too wide.
    end = start + 1
    while end < len(text) and width_fn(text[start:end + 1]) <= budget:
        end += 1
    return end


def split_word(word: Word, budget: int, width_fn: WidthFn = display_width) -> List[Word]:
    """Divide a too-wide word into pieces that each fit budget.

    HOW: Repeatedly cut the remainder at the furthest break candidate
    whose piece (plus marker) fits. When no candidate fits, cut at the
    last code point that fits. The final piece keeps the word's trailing
    whitespace; earlier pieces carry the candidate's marker as penalty.

    RULES:
    - Words that already fit, or a budget <= 0, come back unchanged.
    - A single code point wider than budget is left as an overflowing
      piece rather than dropped.

    Args:
        word: The word to divide.
        budget: Narrowest line width the pieces must fit.
        width_fn: Text measurement function.

    Returns:
        The pieces, in order.
    """
    if budget <= 0 or word.width <= budget:
        return [word]

    text = word.text
    pieces = []
    start = 0
    while start < len(text) and width_fn(text[start:]) > budget:
        candidate = _furthest_fitting(text, start, word.breaks, budget, width_fn)
        if candidate is not None:
            end, penalty, penalty_width = candidate.position, candidate.marker, candidate.marker_width
        else:
            end = _forced_end(text, start, budget, width_fn)
            if end >= len(text):
                break
            penalty, penalty_width = "", 0
        piece = text[start:end]
        piece_width = width_fn(piece)
        pieces.append(Word(
            text=piece,
            width=piece_width,
            penalty=penalty,
            penalty_width=penalty_width,
            may_overflow=piece_width + penalty_width > budget,
        ))
        start = end

    rest = text[start:]
    rest_width = width_fn(rest)
    pieces.append(Word(
        text=rest,
        width=rest_width,
        whitespace=word.whitespace,
        whitespace_width=word.whitespace_width,
        may_overflow=rest_width > budget,
    ))
    logger.debug("Split %r into %d pieces for budget %d", text, len(pieces), budget)
    return pieces


def tokenize(text: str, options: "WrapOptions", budget: int) -> List[Word]:
    """Turn one paragraph into the word sequence the wrappers consume.

    Args:
        text: A single paragraph (no line terminators).
        options: Wrap configuration (splitter, measurement, policies).
        budget: Narrowest line budget of the paragraph; words wider than
            this are split or marked as overflowing.

    Returns:
        Words in reading order, with over-wide words pre-split when
        break_long_words is enabled.

    Raises:
        SplitterContractError: If the splitter returns malformed candidates.
    """
    result = []
    for word in find_words(text, options.width_fn, options.collapse_whitespace):
        breaks = tuple(validate_candidates(word.text, options.splitter.candidate_breaks(word.text)))
        word = dataclasses.replace(word, breaks=breaks)

        if budget <= 0 or word.width <= budget:
            result.append(word)
        elif options.break_long_words:
            result.extend(split_word(word, budget, options.width_fn))
        else:
            result.append(dataclasses.replace(word, may_overflow=True))
    return result
