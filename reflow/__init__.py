"""reflow: paragraph wrapping with greedy and minimum-raggedness line breaking.

WHY: Terminal and document output needs text reflowed to a width. First
fit is fast but leaves ragged paragraphs; this package also offers an
optimal-fit wrapper that balances the whole paragraph, in linear time.

HOW: wrap(text, options) returns indented lines, fill() joins them.
WrapOptions carries width, indents, the word-splitting policy and the
algorithm. The engine lives in reflow.core; configuration, presets and
the CLI are thin layers on top.

RULES:
- wrap()/fill() are pure; concurrent calls need no locking.
- Text content is never modified, only re-broken (whitespace between
  words is collapsed unless collapse_whitespace=False).
"""

from reflow.core.lines import Line
from reflow.core.splitters import (
    BreakCandidate,
    CustomSplitter,
    HyphenSplitter,
    NoHyphenation,
    PyphenSplitter,
    SplitterContractError,
    WordSplitter,
)
from reflow.options import WrapAlgorithm, WrapOptions
from reflow.wrapper import dedent, fill, indent, wrap, wrap_lines

__version__ = "0.1.0"

__all__ = [
    "BreakCandidate",
    "CustomSplitter",
    "HyphenSplitter",
    "Line",
    "NoHyphenation",
    "PyphenSplitter",
    "SplitterContractError",
    "WordSplitter",
    "WrapAlgorithm",
    "WrapOptions",
    "dedent",
    "fill",
    "indent",
    "wrap",
    "wrap_lines",
]
