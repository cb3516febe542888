"""Core line-breaking engine: fragment model, splitters and both wrappers."""

from reflow.core.fragments import Word, display_width, find_words, split_word, tokenize
from reflow.core.greedy import wrap_first_fit
from reflow.core.lines import Line, LineBudgets, raggedness
from reflow.core.optimal import wrap_optimal_fit
from reflow.core.splitters import (
    BreakCandidate,
    CustomSplitter,
    HyphenSplitter,
    NoHyphenation,
    PyphenSplitter,
    SplitterContractError,
    WordSplitter,
    resolve_splitter,
)

__all__ = [
    "BreakCandidate",
    "CustomSplitter",
    "HyphenSplitter",
    "Line",
    "LineBudgets",
    "NoHyphenation",
    "PyphenSplitter",
    "SplitterContractError",
    "Word",
    "WordSplitter",
    "display_width",
    "find_words",
    "raggedness",
    "resolve_splitter",
    "split_word",
    "tokenize",
    "wrap_first_fit",
    "wrap_optimal_fit",
]
