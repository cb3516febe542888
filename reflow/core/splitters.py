"""Word splitting strategies: where a word may be divided across lines.

WHY: Words wider than a line must sometimes be cut. Cutting at a
hyphenation point ("hyphen-ation") reads far better than cutting at an
arbitrary character, but how those points are found (existing hyphens,
a hyphenation dictionary, a caller's own rules) is a policy the wrapping
engine should not own.

HOW: WordSplitter is an ABC with a single operation, candidate_breaks(),
returning BreakCandidate tuples. The engine only looks at the position
and the width of the marker inserted there. resolve_splitter() turns the
loose values callers pass in WrapOptions (None, a name, a callable, an
instance) into a WordSplitter.

RULES:
- Candidate positions are strictly increasing and lie strictly inside
  the word (0 < position < len(word)).
- Splitters must be deterministic; unsplittable words give [].
- Output that breaks these rules raises SplitterContractError; the
  engine never repairs a defective splitter's output.
"""

from __future__ import annotations

import functools
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, NamedTuple, Union

import pyphen

logger = logging.getLogger(__name__)

HYPHEN = "-"

_LETTER_RUN_RE = re.compile(r"[^\W\d_]+")


class BreakCandidate(NamedTuple):
    """A legal break point inside a word.

    Attributes:
        position: Code-point offset where the first piece ends.
        marker_width: Width of the continuation marker shown at the
            end of the line when the break is taken.
        marker: The marker text itself ("" when nothing is inserted,
            e.g. after an existing hyphen).
    """

    position: int
    marker_width: int = 0
    marker: str = ""


class SplitterContractError(ValueError):
    """Raised when a splitter returns malformed break candidates.

    WHY: Non-increasing or out-of-range positions would silently corrupt
    the word pieces. The fault lies with the splitter, so the caller is
    told instead of the engine guessing.

    RULES:
    - Message names the offending word and candidate list
    """


class WordSplitter(ABC):
    """Abstract base for word splitting strategies.

    To add a splitting strategy, subclass and implement
    candidate_breaks(), or wrap a plain function in CustomSplitter.
    """

    @property
    def name(self) -> str:
        """Short label used in logs and CLI output."""
        return type(self).__name__

    @abstractmethod
    def candidate_breaks(self, word: str) -> List[BreakCandidate]:
        """Return the legal break points inside word, in order."""

    def __repr__(self) -> str:
        return "{}()".format(type(self).__name__)


class NoHyphenation(WordSplitter):
    """Never splits; words can only be cut by the forced code-point split."""

    def candidate_breaks(self, word: str) -> List[BreakCandidate]:
        return []


def _hyphen_breaks(word: str) -> List[BreakCandidate]:
    # Only hyphens with alphanumerics on both sides: "-v" or "x--y" stay whole.
    breaks = []
    for idx in range(1, len(word) - 1):
        if word[idx] == HYPHEN and word[idx - 1].isalnum() and word[idx + 1].isalnum():
            breaks.append(BreakCandidate(idx + 1))
    return breaks


class HyphenSplitter(WordSplitter):
    """Split after hyphens already present in the word.

    "ultra-light" can break as "ultra-" / "light". No marker is inserted
    since the hyphen is part of the text.
    """

    def candidate_breaks(self, word: str) -> List[BreakCandidate]:
        return _hyphen_breaks(word)


@functools.lru_cache(maxsize=None)
def _load_dictionary(language: str) -> pyphen.Pyphen:
    if language not in pyphen.LANGUAGES:
        raise ValueError(
            "Unknown hyphenation language '{}'. Available include: {}".format(
                language, ", ".join(sorted(pyphen.LANGUAGES)[:10])
            )
        )
    return pyphen.Pyphen(lang=language)


class PyphenSplitter(WordSplitter):
    """Dictionary hyphenation backed by pyphen.

    WHY: Dictionary hyphenation finds syllable boundaries
    ("hy-phen-ation"), so long words break where a reader expects.

    HOW: Existing hyphens are break points first. Each run of letters
    in the word (so "hyphenation" inside '"hyphenation",') is then
    hyphenated with the pyphen dictionary for the configured language
    and its offsets shifted to the run's position. Dictionary breaks
    insert a "-" marker; existing hyphens insert nothing.

    RULES:
    - Dictionaries load once per language and are shared read-only
    - Unknown languages raise ValueError at construction time
    """

    def __init__(self, language: str = "en_US") -> None:
        self.language = language
        self._dictionary = _load_dictionary(language)

    @property
    def name(self) -> str:
        return "{} hyphenation".format(self.language)

    def candidate_breaks(self, word: str) -> List[BreakCandidate]:
        positions = {}
        for candidate in _hyphen_breaks(word):
            positions[candidate.position] = candidate

        # Punctuation, digits and hyphens delimit the runs pyphen sees.
        for run in _LETTER_RUN_RE.finditer(word):
            for offset in self._dictionary.positions(run.group()):
                position = run.start() + int(offset)
                if 0 < position < len(word) and position not in positions:
                    positions[position] = BreakCandidate(position, 1, HYPHEN)

        return [positions[p] for p in sorted(positions)]

    def __repr__(self) -> str:
        return "PyphenSplitter(language={!r})".format(self.language)


class CustomSplitter(WordSplitter):
    """Adapt a caller-supplied function into a WordSplitter.

    The function receives the word and returns an iterable of
    BreakCandidate, (position,), (position, marker_width) or
    (position, marker_width, marker) tuples, or bare int positions.
    """

    def __init__(self, func: Callable[[str], Iterable[Any]]) -> None:
        self.func = func

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", "custom")

    def candidate_breaks(self, word: str) -> List[BreakCandidate]:
        result = []
        for item in self.func(word):
            if isinstance(item, BreakCandidate):
                result.append(item)
            elif isinstance(item, int):
                result.append(BreakCandidate(item))
            else:
                result.append(BreakCandidate(*item))
        return result

    def __repr__(self) -> str:
        return "CustomSplitter({!r})".format(self.func)


SPLITTER_NAMES = ("none", "hyphen", "hyphenation")

SplitterArg = Union[None, str, WordSplitter, Callable[[str], Iterable[Any]]]


def resolve_splitter(value: SplitterArg, language: str = "en_US") -> WordSplitter:
    """Turn a loose splitter value into a WordSplitter.

    Args:
        value: None or "none" (no splitting), "hyphen" (existing hyphens),
            "hyphenation" (pyphen dictionary), a WordSplitter instance, or
            a callable accepted by CustomSplitter.
        language: Dictionary language for "hyphenation".

    Returns:
        A WordSplitter instance.

    Raises:
        ValueError: If value is an unknown name or an unsupported type.
    """
    if value is None:
        return NoHyphenation()
    if isinstance(value, WordSplitter):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key == "none":
            return NoHyphenation()
        if key == "hyphen":
            return HyphenSplitter()
        if key == "hyphenation":
            return PyphenSplitter(language)
        raise ValueError(
            "Unknown splitter '{}'. Available: {}".format(value, ", ".join(SPLITTER_NAMES))
        )
    if callable(value):
        return CustomSplitter(value)
    raise ValueError("Unsupported splitter value: {!r}".format(value))


def validate_candidates(word: str, candidates: List[BreakCandidate]) -> List[BreakCandidate]:
    """Check a splitter's output against the candidate contract.

    Raises:
        SplitterContractError: On out-of-range or non-increasing positions,
            or a negative marker width.
    """
    previous = 0
    for candidate in candidates:
        if not 0 < candidate.position < len(word):
            raise SplitterContractError(
                "Break position {} out of range for word {!r} (candidates: {})".format(
                    candidate.position, word, list(candidates)
                )
            )
        if candidate.position <= previous:
            raise SplitterContractError(
                "Break positions must be strictly increasing for word {!r} (candidates: {})".format(
                    word, list(candidates)
                )
            )
        if candidate.marker_width < 0:
            raise SplitterContractError(
                "Negative marker width at position {} for word {!r}".format(candidate.position, word)
            )
        previous = candidate.position
    return candidates
