"""Command-line interface: reflow text files to a target width.

WHY: Reflowing a README paragraph or a commit message from the shell is
the most common use of the engine outside library code. The CLI wires
the configuration layers (environment, preset, options file, flags)
onto wrap() behind one command.

HOW: argparse parses the flags. Options are built from the environment
defaults, then a preset or JSON options file, then explicit flags on
top. Each input is split into paragraphs at blank lines; the lines of a
paragraph are joined and re-wrapped; paragraphs are written to stdout
separated by a blank line.

RULES:
- Positional arguments: input files; "-" or none means stdin
- Width defaults to REFLOW_WIDTH, else the terminal width
- --preset and --options-file are mutually exclusive
- Errors print "Error: ..." to stderr and exit 1; Ctrl-C exits 130
- Diagnostics go to stderr through logging (--log-level)
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Any, Dict, Iterable, List, Optional

import jsonschema

from reflow import config
from reflow.core.splitters import SPLITTER_NAMES
from reflow.options import WrapAlgorithm, WrapOptions
from reflow.presets import PRESETS
from reflow.wrapper import fill

logger = logging.getLogger(__name__)

_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n+")


def _status(msg: str) -> None:
    """Print a status message to stderr, keeping stdout pipeable."""
    print(msg, file=sys.stderr, flush=True)


def split_paragraphs(text: str) -> List[str]:
    """Split text at blank lines; each paragraph's lines are joined with spaces."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    paragraphs = []
    for block in _BLANK_LINE_RE.split(text):
        joined = " ".join(line.strip() for line in block.split("\n") if line.strip())
        if joined:
            paragraphs.append(joined)
    return paragraphs


def reflow_text(text: str, options: WrapOptions) -> str:
    """Reflow every paragraph of text and join them with a blank line."""
    return "\n\n".join(fill(p, options) for p in split_paragraphs(text))


def build_options(args: argparse.Namespace) -> WrapOptions:
    """Layer environment defaults, preset/options file and flags into WrapOptions.

    Raises:
        ValueError: On unknown presets or bad environment values.
        jsonschema.ValidationError: If the options file is malformed.
    """
    if args.options_file:
        options = WrapOptions.from_json_file(args.options_file)
    elif args.preset:
        options = WrapOptions.from_preset(args.preset)
    else:
        width = config.load_width(default=config.terminal_width())
        options = WrapOptions.from_env(width=width)

    overrides = {}  # type: Dict[str, Any]
    if args.width is not None:
        overrides["width"] = args.width
    if args.algorithm is not None:
        overrides["wrap_algorithm"] = args.algorithm
    if args.language is not None:
        overrides["hyphenation_language"] = args.language
    if args.splitter is not None:
        overrides["splitter"] = args.splitter
    elif args.language is not None:
        overrides["splitter"] = "hyphenation"
    if args.initial_indent is not None:
        overrides["initial_indent"] = args.initial_indent
    if args.subsequent_indent is not None:
        overrides["subsequent_indent"] = args.subsequent_indent
    if args.break_long_words is not None:
        overrides["break_long_words"] = args.break_long_words
    if args.preserve_whitespace:
        overrides["collapse_whitespace"] = False

    return options.replace(**overrides) if overrides else options


def _read_inputs(paths: Iterable[str]) -> Iterable[str]:
    for path in paths:
        if path == "-":
            yield sys.stdin.read()
        else:
            with open(path, "r", encoding="utf-8") as f:
                yield f.read()


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect it.
    """
    parser = argparse.ArgumentParser(
        prog="reflow",
        description="Reflow plain-text paragraphs to a target width, "
                    "greedily or with minimal raggedness.",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        default=["-"],
        help="Files to reflow; '-' or nothing reads stdin.",
    )

    parser.add_argument(
        "-w", "--width",
        type=int,
        default=None,
        help="Line width in columns (default: REFLOW_WIDTH, else the terminal width).",
    )

    parser.add_argument(
        "-a", "--algorithm",
        choices=[m.value for m in WrapAlgorithm],
        default=None,
        help="Line-breaking algorithm (default: {}).".format(config.DEFAULT_WRAP_ALGORITHM),
    )

    parser.add_argument(
        "-s", "--splitter",
        choices=list(SPLITTER_NAMES),
        default=None,
        help="How long words may be split (default: {}).".format(config.DEFAULT_SPLITTER),
    )

    parser.add_argument(
        "--language",
        default=None,
        help="Hyphenation dictionary, e.g. en_US or de_DE "
             "(implies --splitter hyphenation).",
    )

    parser.add_argument(
        "--initial-indent",
        default=None,
        help="Prefix for the first output line.",
    )

    parser.add_argument(
        "--subsequent-indent",
        default=None,
        help="Prefix for every later output line.",
    )

    parser.add_argument(
        "--break-long-words",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Split words wider than the line (default: on).",
    )

    parser.add_argument(
        "--preserve-whitespace",
        action="store_true",
        help="Keep whitespace runs between words instead of collapsing them.",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--preset",
        choices=sorted(PRESETS.keys()),
        default=None,
        help="Start from a named preset.",
    )
    source.add_argument(
        "--options-file",
        default=None,
        help="Start from a JSON options document.",
    )

    parser.add_argument(
        "--log-level",
        default=config.DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Diagnostic verbosity on stderr (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``reflow`` and ``python -m reflow``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = build_options(args)
        logger.info(
            "Wrapping at width %d with %s (splitter: %s)",
            options.width, options.wrap_algorithm.value, options.splitter.name,
        )
        outputs = [reflow_text(text, options) for text in _read_inputs(args.inputs)]
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except jsonschema.ValidationError as e:
        print("Error: invalid options file: {}".format(e.message), file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    text = "\n\n".join(o for o in outputs if o)
    if text:
        sys.stdout.write(text + "\n")


if __name__ == "__main__":
    main()
