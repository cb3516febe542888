"""Wrap configuration: WrapOptions, the algorithm switch and options documents.

WHY: Every wrap call is parametrized by the same handful of settings
(width, indents, splitting policy, algorithm). Bundling them in one
immutable object keeps call sites short, lets the same options be reused
across threads, and gives one place to validate input.

HOW: WrapOptions is a frozen dataclass. __post_init__ normalizes the
loose values callers pass (algorithm names, splitter names, the
break_words alias) so the engine only ever sees resolved types.
Options can also be loaded from a JSON document, checked with
jsonschema against OPTIONS_SCHEMA, from a named preset, or from the
environment defaults in reflow.config.

RULES:
- width is required; width <= 0 means "one word per line".
- break_words is an alias of break_long_words; when given it wins and
  is folded into break_long_words (the field itself is reset to None).
- splitter is always a WordSplitter after construction.
- Invalid values raise ValueError; invalid documents raise
  jsonschema.ValidationError.
"""

from __future__ import annotations

import copy
import dataclasses
import enum
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import jsonschema

from reflow import config
from reflow.core.fragments import display_width
from reflow.core.lines import LineBudgets
from reflow.core.splitters import SPLITTER_NAMES, resolve_splitter
from reflow.presets import PRESETS


class WrapAlgorithm(str, enum.Enum):
    """Which wrapper partitions the words into lines."""

    GREEDY = "greedy"
    OPTIMAL_FIT = "optimal-fit"

    @classmethod
    def parse(cls, value: Union[str, "WrapAlgorithm"]) -> "WrapAlgorithm":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("_", "-")
        aliases = {"first-fit": "greedy", "optimal": "optimal-fit"}
        key = aliases.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            "Unknown wrap algorithm '{}'. Available: {}".format(
                value, ", ".join(m.value for m in cls)
            )
        )


OPTIONS_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "reflow wrap options",
    "type": "object",
    "properties": {
        "width": {"type": "integer"},
        "initial_indent": {"type": "string"},
        "subsequent_indent": {"type": "string"},
        "break_long_words": {"type": "boolean"},
        "break_words": {"type": ["boolean", "null"]},
        "splitter": {"enum": list(SPLITTER_NAMES) + [None]},
        "wrap_algorithm": {"enum": [m.value for m in WrapAlgorithm]},
        "collapse_whitespace": {"type": "boolean"},
        "hyphenation_language": {"type": "string", "minLength": 1},
    },
    "required": ["width"],
    "additionalProperties": False,
}


@dataclass(frozen=True)
class WrapOptions:
    """Settings for one wrap operation.

    Attributes:
        width: Line budget in display columns, indent included.
        initial_indent: Prefix of the first output line; its width
            counts against the first line's budget.
        subsequent_indent: Prefix of every later line.
        break_long_words: Split words wider than the line budget (at
            splitter candidates, else at code points). When False such
            words overflow their line.
        break_words: Alias of break_long_words.
        splitter: WordSplitter, callable, splitter name or None.
        wrap_algorithm: Greedy first fit or optimal fit.
        collapse_whitespace: Render each gap between words as a single
            space instead of the original run.
        width_fn: Text measurement function.
        hyphenation_language: pyphen dictionary for the "hyphenation"
            splitter name.
    """

    width: int
    initial_indent: str = ""
    subsequent_indent: str = ""
    break_long_words: bool = True
    break_words: Optional[bool] = None
    splitter: Any = None
    wrap_algorithm: WrapAlgorithm = WrapAlgorithm.OPTIMAL_FIT
    collapse_whitespace: bool = True
    width_fn: Callable[[str], int] = display_width
    hyphenation_language: str = "en_US"
    _splitter_arg: Any = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError("width must be an integer, got {!r}".format(self.width))
        if self.break_words is not None:
            object.__setattr__(self, "break_long_words", bool(self.break_words))
            object.__setattr__(self, "break_words", None)
        object.__setattr__(self, "wrap_algorithm", WrapAlgorithm.parse(self.wrap_algorithm))
        # Keep the value as given so replace() can resolve it again, e.g.
        # for a new hyphenation_language.
        object.__setattr__(self, "_splitter_arg", self.splitter)
        object.__setattr__(
            self, "splitter", resolve_splitter(self.splitter, self.hyphenation_language)
        )

    @property
    def one_word_per_line(self) -> bool:
        return self.width <= 0

    def line_budgets(self) -> LineBudgets:
        """Budgets of the first row and later rows, indents subtracted.

        Indents wider than the width leave a budget of 1 rather than 0,
        so words are still placed (and split) sensibly.
        """
        first = max(self.width - self.width_fn(self.initial_indent), 1)
        rest = max(self.width - self.width_fn(self.subsequent_indent), 1)
        return LineBudgets(first, rest)

    def replace(self, **changes: Any) -> "WrapOptions":
        """Return a copy with the given fields changed.

        The splitter is re-resolved from the value originally passed, so a
        new hyphenation_language takes effect for the "hyphenation" name.
        """
        changes.setdefault("splitter", self._splitter_arg)
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WrapOptions":
        """Build options from a plain (JSON-compatible) dict.

        Raises:
            jsonschema.ValidationError: If data does not match OPTIONS_SCHEMA.
        """
        jsonschema.validate(instance=data, schema=OPTIONS_SCHEMA)
        return cls(**data)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "WrapOptions":
        """Load options from a JSON document on disk."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_preset(cls, name: str, **overrides: Any) -> "WrapOptions":
        """Build options from a named preset, applying overrides on top.

        Raises:
            ValueError: If the preset name is not recognized.
        """
        if name not in PRESETS:
            raise ValueError(
                "Unknown preset '{}'. Available: {}".format(name, ", ".join(PRESETS.keys()))
            )
        cfg = copy.deepcopy(PRESETS[name])
        cfg.update(overrides)
        return cls(**cfg)

    @classmethod
    def from_env(cls, **overrides: Any) -> "WrapOptions":
        """Build options from the REFLOW_* environment defaults."""
        cfg = {
            "width": config.load_width(),
            "wrap_algorithm": config.DEFAULT_WRAP_ALGORITHM,
            "splitter": config.DEFAULT_SPLITTER,
            "hyphenation_language": config.DEFAULT_HYPHENATION_LANGUAGE,
        }  # type: Dict[str, Any]
        cfg.update(overrides)
        return cls(**cfg)
